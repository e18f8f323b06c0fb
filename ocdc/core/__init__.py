# -*- coding: utf-8 -*-
"""
Core Module - Names, vocabulary, value encodings and configuration.

Contains the building blocks shared by the catalog model and its
serializations: qualified names and namespace bindings, the controlled
DublinCore vocabulary, DCMI value encodings and serialization defaults.

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
