# -*- coding: utf-8 -*-
"""
Configuration Module - Configurable serialization defaults for OCDC.

Provides an OcdcConfig dataclass with default values for XML, JSON and
YAML output formatting. Loads from the file named by the
OCDC_CONFIG_PATH environment variable, or ~/.ocdc/config.json, if it
exists, otherwise uses sensible defaults.

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
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_ENV_VAR = "OCDC_CONFIG_PATH"
_CONFIG_DIR = ".ocdc"
_CONFIG_FILE = "config.json"


@dataclass
class OcdcConfig:
    """Serialization defaults.

    Attributes
    ----------
    xml_indent : int
        Spaces of indentation per property element. 0 writes the whole
        document on one line.
    json_indent : Optional[int]
        Indentation passed to ``json.dumps``. None writes compact JSON.
    yaml_default_flow_style : bool
        Flow style passed to ``yaml.safe_dump``.
    """

    xml_indent: int = 2
    json_indent: Optional[int] = None
    yaml_default_flow_style: bool = False

    def save(self, path: Optional[Path] = None) -> None:
        """Save config to JSON file."""
        path = path or resolve_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(asdict(self), f, indent=2)


def resolve_config_path() -> Path:
    """Resolve the configuration file path.

    Priority:
    1. ``OCDC_CONFIG_PATH`` environment variable
    2. ``~/.ocdc/config.json`` (default)

    Returns
    -------
    Path
    """
    env_path = os.environ.get(_ENV_VAR)
    if env_path:
        return Path(env_path)
    return Path.home() / _CONFIG_DIR / _CONFIG_FILE


def load_config(path: Optional[Path] = None) -> OcdcConfig:
    """Load configuration from file, or return defaults.

    Parameters
    ----------
    path : Optional[Path]
        Config file path. Defaults to :func:`resolve_config_path`.

    Returns
    -------
    OcdcConfig
        Loaded or default configuration.
    """
    path = path or resolve_config_path()
    if path.exists():
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return OcdcConfig(**{
                k: v for k, v in data.items()
                if k in OcdcConfig.__dataclass_fields__
            })
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning("Failed to load config from %s: %s", path, e)

    return OcdcConfig()
