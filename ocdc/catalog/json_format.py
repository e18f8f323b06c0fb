# -*- coding: utf-8 -*-
"""
JSON Format - Read and write DublinCore catalogs as JSON.

Properties are grouped by namespace URI, then by local name, each
holding a list of value objects. Catalog metadata lives under reserved
keys starting with ``@``, which never collide with namespace URIs::

    {
      "@flavor": "dublincore/episode",
      "@rootTag": "{http://www.opencastproject.org/xsd/1.0/dublincore/}dublincore",
      "@namespaces": {"dcterms": "http://purl.org/dc/terms/"},
      "http://purl.org/dc/terms/": {
        "title": [{"value": "Lecture 1", "lang": "en"}],
        "created": [{"value": "2024-01-01T10:00:00Z", "type": "dcterms:W3CDTF"}]
      }
    }

Encoding schemes are written as ``prefix:local``, or as a bare local
name for the default namespace. A scheme with no namespace is written
as ``{}local`` when a default namespace is bound, and Clark notation is
used for namespaces without a binding.

The dictionary form is shared with the YAML format.

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
import json
import logging
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# OCDC internal
from ocdc.catalog.models import DublinCoreCatalog, DublinCoreValue, Flavor, as_catalog
from ocdc.core.names import DEFAULT_NS_PREFIX, EName, NamespaceBinding, NamespaceContext
from ocdc.core.vocabulary import LANGUAGE_UNDEFINED
from ocdc.exceptions import CatalogFormatError


FLAVOR_KEY = "@flavor"
ROOT_TAG_KEY = "@rootTag"
NAMESPACES_KEY = "@namespaces"


def _encode_scheme(scheme: EName, bindings: NamespaceContext) -> str:
    if not scheme.namespace_uri:
        if DEFAULT_NS_PREFIX in bindings:
            return "{}" + scheme.local_name
        return scheme.local_name
    prefix = bindings.prefix_for(scheme.namespace_uri)
    if prefix is None:
        return scheme.to_clark()
    return f"{prefix}:{scheme.local_name}" if prefix else scheme.local_name


def _decode_scheme(text: str, bindings: NamespaceContext) -> EName:
    if text.startswith("{"):
        return EName.from_clark(text)
    prefix, sep, local = text.rpartition(":")
    uri = bindings.uri_for(prefix if sep else DEFAULT_NS_PREFIX)
    if uri is None:
        if not sep:
            return EName("", local)
        raise CatalogFormatError(f"Unbound prefix in type {text!r}")
    return EName(uri, local)


def to_dict(catalog: DublinCoreCatalog) -> Dict[str, Any]:
    """Convert a catalog (or accessor) to its dictionary form.

    Properties are grouped by namespace URI. Order is kept within a
    namespace, but the relative order of properties from different
    namespaces is not preserved, so ``properties`` of a catalog read
    back from this form may list them in another order.

    Returns
    -------
    Dict[str, Any]
    """
    catalog = as_catalog(catalog)
    bindings = catalog.bindings
    d: Dict[str, Any] = {}
    if catalog.flavor is not None:
        d[FLAVOR_KEY] = str(catalog.flavor)
    if catalog.root_tag is not None:
        d[ROOT_TAG_KEY] = catalog.root_tag.to_clark()
    if len(bindings):
        d[NAMESPACES_KEY] = bindings.to_dict()

    for prop, values in catalog.values.items():
        group = d.setdefault(prop.namespace_uri, {})
        entries = group.setdefault(prop.local_name, [])
        for value in values:
            entry: Dict[str, str] = {'value': value.value}
            if value.has_language:
                entry['lang'] = value.language
            if value.encoding_scheme is not None:
                entry['type'] = _encode_scheme(value.encoding_scheme, bindings)
            entries.append(entry)
    return d


def _require(data: Any, kind: type, what: str) -> Any:
    if not isinstance(data, kind):
        raise CatalogFormatError(
            f"{what} must be a {kind.__name__}, got {type(data).__name__}"
        )
    return data


def from_dict(data: Dict[str, Any]) -> DublinCoreCatalog:
    """Build a catalog from its dictionary form.

    Parameters
    ----------
    data : Dict[str, Any]

    Returns
    -------
    DublinCoreCatalog

    Raises
    ------
    CatalogFormatError
        If ``data`` does not have the expected structure.
    """
    try:
        return _build(data)
    except CatalogFormatError:
        raise
    except ValueError as e:
        raise CatalogFormatError(str(e)) from e


def _build(data: Dict[str, Any]) -> DublinCoreCatalog:
    _require(data, dict, "Catalog")
    namespaces = _require(data.get(NAMESPACES_KEY, {}), dict, NAMESPACES_KEY)
    catalog = DublinCoreCatalog(bindings=[
        NamespaceBinding(str(prefix), _require(uri, str, "Namespace URI"))
        for prefix, uri in namespaces.items()
    ])
    bindings = catalog.bindings

    if FLAVOR_KEY in data:
        catalog.flavor = Flavor.parse(_require(data[FLAVOR_KEY], str, FLAVOR_KEY))
    if ROOT_TAG_KEY in data:
        catalog.root_tag = EName.from_clark(
            _require(data[ROOT_TAG_KEY], str, ROOT_TAG_KEY)
        )

    for uri, group in data.items():
        if _require(uri, str, "Namespace key").startswith("@"):
            continue
        _require(group, dict, f"Namespace {uri!r}")
        for local_name, entries in group.items():
            prop = EName(uri, local_name)
            for entry in _require(entries, list, f"Property {prop}"):
                _require(entry, dict, f"Value of {prop}")
                if 'value' not in entry:
                    raise CatalogFormatError(f"Value of {prop} has no 'value'")
                scheme = entry.get('type')
                catalog.add(prop, DublinCoreValue(
                    _require(entry['value'], str, f"Value of {prop}"),
                    entry.get('lang') or LANGUAGE_UNDEFINED,
                    _decode_scheme(scheme, bindings) if scheme else None,
                ))
    return catalog


def write(catalog: DublinCoreCatalog, indent: Optional[int] = None) -> str:
    """Serialize a catalog (or accessor) to a JSON string."""
    text = json.dumps(to_dict(catalog), indent=indent, ensure_ascii=False)
    logger.debug("Wrote JSON catalog (%d characters)", len(text))
    return text


def read(text: str) -> DublinCoreCatalog:
    """Parse a JSON string into a catalog.

    Raises
    ------
    json.JSONDecodeError
        If ``text`` is not valid JSON.
    CatalogFormatError
        If the JSON does not describe a catalog.
    """
    return from_dict(json.loads(text))
