# -*- coding: utf-8 -*-
"""
Tests for ocdc.core.config - OcdcConfig and load_config.

Created
-------
2026-10-18
"""

import json
import os
from pathlib import Path
from unittest import mock

import pytest

from ocdc.core.config import OcdcConfig, load_config, resolve_config_path


class TestOcdcConfig:
    def test_defaults(self):
        cfg = OcdcConfig()
        assert cfg.xml_indent == 2
        assert cfg.json_indent is None
        assert cfg.yaml_default_flow_style is False

    def test_custom_values(self):
        cfg = OcdcConfig(xml_indent=4, json_indent=2)
        assert cfg.xml_indent == 4
        assert cfg.json_indent == 2

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        cfg = OcdcConfig(xml_indent=0, json_indent=4)
        cfg.save(path)

        loaded = load_config(path)
        assert loaded.xml_indent == 0
        assert loaded.json_indent == 4
        # Other fields should be default
        assert loaded.yaml_default_flow_style is False

    def test_load_missing_file_returns_defaults(self, tmp_path):
        path = tmp_path / "nonexistent.json"
        cfg = load_config(path)
        assert cfg.xml_indent == 2

    def test_load_corrupted_file_returns_defaults(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("not json {{{")
        cfg = load_config(path)
        assert cfg.xml_indent == 2

    def test_load_non_object_returns_defaults(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2, 3]")
        cfg = load_config(path)
        assert cfg.xml_indent == 2

    def test_load_ignores_unknown_fields(self, tmp_path):
        path = tmp_path / "config.json"
        data = {"xml_indent": 8, "unknown_field": 42}
        with open(path, 'w') as f:
            json.dump(data, f)
        cfg = load_config(path)
        assert cfg.xml_indent == 8


class TestResolveConfigPath:

    def test_env_var_highest_priority(self):
        with mock.patch.dict(
            os.environ, {'OCDC_CONFIG_PATH': '/custom/path/ocdc.json'}
        ):
            assert resolve_config_path() == Path('/custom/path/ocdc.json')

    def test_default_fallback(self, tmp_path):
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop('OCDC_CONFIG_PATH', None)
            with mock.patch('ocdc.core.config.Path.home', return_value=tmp_path):
                assert resolve_config_path() == tmp_path / ".ocdc" / "config.json"

    def test_load_uses_env_var(self, tmp_path):
        path = tmp_path / "env.json"
        path.write_text(json.dumps({"json_indent": 3}))
        with mock.patch.dict(os.environ, {'OCDC_CONFIG_PATH': str(path)}):
            assert load_config().json_indent == 3
