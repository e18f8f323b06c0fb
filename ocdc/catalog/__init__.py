# -*- coding: utf-8 -*-
"""
Catalog Module - DublinCore metadata catalogs.

Provides the catalog data model, Opencast episode and series accessors,
catalog factories and the XML, JSON and YAML serializations.

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
