# -*- coding: utf-8 -*-
"""
Exceptions - Error types raised when reading DublinCore catalogs.

Hierarchy::

    OcdcError
    ├── CatalogFormatError   (also a ValueError)
    ├── CatalogReadError
    └── CatalogStreamError   (also an OSError)

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
from typing import Optional


class OcdcError(Exception):
    """Base class for all OCDC errors."""


class CatalogFormatError(OcdcError, ValueError):
    """Raised by a codec when a well-formed document is not a valid catalog."""


class CatalogReadError(OcdcError):
    """Raised when a catalog cannot be read from a serialized document.

    Parameters
    ----------
    message : str
        Human-readable description.
    format : Optional[str]
        Codec that attempted the parse ('json' or 'xml').
    """

    def __init__(self, message: str, format: Optional[str] = None) -> None:
        super().__init__(message)
        self.format = format


class CatalogStreamError(OcdcError, OSError):
    """Raised when the input stream cannot be read or decoded as UTF-8."""
