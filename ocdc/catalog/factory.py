# -*- coding: utf-8 -*-
"""
Catalog Factory - Create and read DublinCore catalogs.

Builders for empty, standard, episode and series catalogs, accessor
wrappers for existing catalogs, and a reader that detects whether a
serialized catalog is JSON or XML.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-18

Modified
--------
2026-10-18
"""

# Standard library
import logging
import uuid
from typing import IO, Optional, Union

logger = logging.getLogger(__name__)

# OCDC internal
from ocdc.catalog import json_format, xml_format
from ocdc.catalog.accessors import Episode, Series
from ocdc.catalog.models import EPISODE, SERIES, DublinCoreCatalog, Flavor
from ocdc.core import vocabulary as voc
from ocdc.core.names import DEFAULT_NS_PREFIX, NamespaceBinding, NamespaceContext
from ocdc.exceptions import CatalogReadError, CatalogStreamError

Source = Union[bytes, str, IO[bytes], IO[str]]


def generate_identifier() -> str:
    """Return a random UUID (version 4) in canonical textual form."""
    return str(uuid.uuid4())


def make_empty_catalog() -> DublinCoreCatalog:
    """Create a catalog with no namespace bindings, no root tag and no flavor."""
    return DublinCoreCatalog()


def make_standard_catalog() -> DublinCoreCatalog:
    """Create an empty catalog bound to the standard DublinCore namespaces.

    Registers the DC elements 1.1 (``dc``) and DC terms (``dcterms``)
    namespaces. Neither a flavor nor a root tag is set.
    """
    return DublinCoreCatalog(bindings=NamespaceContext.of(
        NamespaceBinding(voc.ELEMENTS_1_1_NS_PREFIX, voc.ELEMENTS_1_1_NS_URI),
        NamespaceBinding(voc.TERMS_NS_PREFIX, voc.TERMS_NS_URI),
    ))


def _make_opencast(flavor: Flavor) -> DublinCoreCatalog:
    catalog = make_standard_catalog()
    catalog.flavor = flavor
    catalog.add_bindings(NamespaceContext.of(
        NamespaceBinding(voc.OC_PROPERTY_NS_PREFIX, voc.OC_PROPERTY_NS_URI),
        NamespaceBinding(DEFAULT_NS_PREFIX, voc.OC_DC_CATALOG_NS_URI),
        NamespaceBinding(voc.XSI_NS_PREFIX, voc.XSI_NS_URI),
    ))
    catalog.root_tag = voc.OC_DC_CATALOG_ROOT_ELEMENT
    return catalog


def make_episode_catalog(
    identifier: Optional[str] = None,
    series_id: Optional[str] = None,
    *,
    generate_id: bool = False,
) -> Episode:
    """Create a new Opencast episode catalog.

    The catalog has the episode flavor, the Opencast namespaces and the
    Opencast ``dublincore`` root tag.

    Parameters
    ----------
    identifier : Optional[str]
        Value of ``dcterms:identifier``. Not set when None, unless
        ``generate_id`` is True.
    series_id : Optional[str]
        Identifier of the series, stored as ``dcterms:isPartOf``.
    generate_id : bool
        Use a random UUID when no ``identifier`` is given.

    Returns
    -------
    Episode
        Accessor over the new catalog.
    """
    episode = Episode(_make_opencast(EPISODE))
    if identifier is None and generate_id:
        identifier = generate_identifier()
    if identifier is not None:
        episode.dc_identifier = identifier
    if series_id is not None:
        episode.is_part_of = series_id
    return episode


def make_series_catalog(
    identifier: Optional[str] = None,
    *,
    generate_id: bool = False,
) -> Series:
    """Create a new Opencast series catalog.

    Same as :func:`make_episode_catalog` with the series flavor and
    without a series relation.
    """
    series = Series(_make_opencast(SERIES))
    if identifier is None and generate_id:
        identifier = generate_identifier()
    if identifier is not None:
        series.dc_identifier = identifier
    return series


def wrap_as_episode(catalog: DublinCoreCatalog) -> Episode:
    """Create an episode accessor that reads and modifies ``catalog``."""
    return Episode(catalog)


def wrap_as_series(catalog: DublinCoreCatalog) -> Series:
    """Create a series accessor that reads and modifies ``catalog``."""
    return Series(catalog)


def _read_text(source: Source) -> str:
    try:
        data = source.read() if hasattr(source, 'read') else source
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode('utf-8')
    except UnicodeDecodeError as e:
        raise CatalogStreamError(
            f"Unable to read DublinCore from stream: {e}"
        ) from e
    if not isinstance(data, str):
        raise TypeError(
            f"Expected bytes, str or a file object, got {type(data).__name__}"
        )
    return data.lstrip("\ufeff")


def read_catalog(source: Source) -> DublinCoreCatalog:
    """Read a catalog serialized as JSON or XML.

    The whole input is read into memory to detect the format: a document
    whose first non-whitespace character is ``{`` is JSON, anything else
    is XML. Use the format modules directly when the format is known.

    Parameters
    ----------
    source : Source
        Bytes (decoded as UTF-8), text, or a binary or text file object.

    Returns
    -------
    DublinCoreCatalog

    Raises
    ------
    CatalogStreamError
        If the input cannot be decoded as UTF-8.
    CatalogReadError
        If the detected format fails to parse. ``format`` names the
        codec and ``__cause__`` holds the underlying error.
    """
    text = _read_text(source).lstrip()
    if text.startswith("{"):
        fmt, codec = 'json', json_format
    else:
        fmt, codec = 'xml', xml_format
    logger.debug("Detected %s catalog", fmt)

    try:
        return codec.read(text)
    except (ValueError, TypeError, KeyError, SyntaxError) as e:
        logger.error("Failed to parse %s catalog: %s", fmt.upper(), e)
        raise CatalogReadError(
            f"Unable to read DublinCore catalog, {fmt.upper()} parsing failed: {e}",
            format=fmt,
        ) from e
