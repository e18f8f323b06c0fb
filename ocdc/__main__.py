# -*- coding: utf-8 -*-
"""
OCDC Command Line - Convert DublinCore catalogs between formats.

Usage::

    python -m ocdc episode.xml --to json --output episode.json

The input format (XML or JSON) is detected automatically. Output
formatting defaults come from the OCDC configuration file.

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

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="ocdc",
        description="OCDC - Convert DublinCore catalogs between XML, JSON and YAML.",
    )
    parser.add_argument(
        "source",
        type=Path,
        help="Path to an XML or JSON catalog file.",
    )
    parser.add_argument(
        "--to", "-t",
        choices=("xml", "json", "yaml"),
        default="xml",
        dest="target",
        help="Output format (default: xml).",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        dest="output_path",
        help="Path to write the converted catalog. Defaults to stdout.",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to an OCDC JSON configuration file.",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.source.exists():
        print(f"Error: catalog file not found: {args.source}", file=sys.stderr)
        return 1

    from ocdc.catalog import json_format, xml_format, yaml_format
    from ocdc.catalog.factory import read_catalog
    from ocdc.core.config import load_config
    from ocdc.exceptions import OcdcError

    config = load_config(args.config)
    try:
        with open(args.source, 'rb') as f:
            catalog = read_catalog(f)
    except OcdcError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.target == "json":
        text = json_format.write(catalog, indent=config.json_indent)
    elif args.target == "yaml":
        text = yaml_format.write(
            catalog, default_flow_style=config.yaml_default_flow_style,
        )
    else:
        text = xml_format.write(catalog, indent=config.xml_indent)

    if args.output_path is None:
        sys.stdout.write(text)
        if not text.endswith("\n"):
            sys.stdout.write("\n")
        return 0

    args.output_path.parent.mkdir(parents=True, exist_ok=True)
    args.output_path.write_text(text, encoding='utf-8')
    print(f"Output written to: {args.output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
