# -*- coding: utf-8 -*-
"""
YAML Format - Author and export DublinCore catalogs as YAML.

Uses the same dictionary form as the JSON format, which makes YAML a
convenient format for hand-written catalog files. YAML is never
auto-detected; read it explicitly.

Dependencies
------------
pyyaml

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
from pathlib import Path
from typing import Optional

# Third-party
import yaml

# OCDC internal
from ocdc.catalog import json_format
from ocdc.catalog.models import DublinCoreCatalog
from ocdc.core.config import OcdcConfig
from ocdc.exceptions import CatalogFormatError


def write(
    catalog: DublinCoreCatalog,
    default_flow_style: Optional[bool] = None,
) -> str:
    """Generate YAML from a catalog (or accessor).

    Parameters
    ----------
    catalog : DublinCoreCatalog
    default_flow_style : Optional[bool]
        Passed to ``yaml.safe_dump``. Defaults to
        ``OcdcConfig.yaml_default_flow_style``.

    Returns
    -------
    str
        YAML string.
    """
    if default_flow_style is None:
        default_flow_style = OcdcConfig().yaml_default_flow_style
    return yaml.safe_dump(
        json_format.to_dict(catalog),
        default_flow_style=default_flow_style,
        sort_keys=False,
        allow_unicode=True,
    )


def read(text: str) -> DublinCoreCatalog:
    """Compile a catalog from a YAML string.

    Raises
    ------
    yaml.YAMLError
        If ``text`` is not valid YAML.
    CatalogFormatError
        If the document does not describe a catalog.
    """
    data = yaml.safe_load(text)
    if data is None:
        raise CatalogFormatError("YAML document is empty")
    return json_format.from_dict(data)


def read_file(path: Path) -> DublinCoreCatalog:
    """Compile a catalog from a YAML file."""
    with open(path, 'r', encoding='utf-8') as f:
        return read(f.read())
