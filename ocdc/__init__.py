# -*- coding: utf-8 -*-
"""
OCDC - Opencast DublinCore catalogs.

Create, access and serialize DublinCore metadata catalogs with
namespace-qualified properties. Catalogs are written as XML, JSON or
YAML, and read back from XML or JSON with automatic format detection.

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

__version__ = "0.1.0"

from ocdc.catalog.accessors import Episode, Series
from ocdc.catalog.factory import (
    generate_identifier,
    make_empty_catalog,
    make_episode_catalog,
    make_series_catalog,
    make_standard_catalog,
    read_catalog,
    wrap_as_episode,
    wrap_as_series,
)
from ocdc.catalog.models import DublinCoreCatalog, DublinCoreValue, Flavor
from ocdc.core.names import EName, NamespaceBinding, NamespaceContext
from ocdc.exceptions import (
    CatalogFormatError,
    CatalogReadError,
    CatalogStreamError,
    OcdcError,
)

__all__: list = [
    "CatalogFormatError",
    "CatalogReadError",
    "CatalogStreamError",
    "DublinCoreCatalog",
    "DublinCoreValue",
    "EName",
    "Episode",
    "Flavor",
    "NamespaceBinding",
    "NamespaceContext",
    "OcdcError",
    "Series",
    "generate_identifier",
    "make_empty_catalog",
    "make_episode_catalog",
    "make_series_catalog",
    "make_standard_catalog",
    "read_catalog",
    "wrap_as_episode",
    "wrap_as_series",
]
