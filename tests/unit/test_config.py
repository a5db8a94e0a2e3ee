"""Tests for configuration loading."""

import pytest
import yaml
from pydantic import ValidationError

from openguard.config import load_config
from openguard.types import GuardConfig


def test_no_path_gives_defaults():
    assert load_config(None) == GuardConfig()


def test_load_yaml(tmp_path):
    config_file = tmp_path / "openguard.yaml"
    with open(config_file, 'w') as f:
        yaml.dump({"log_level": "warning", "enable_console": False}, f)

    config = load_config(config_file)

    assert config.log_level == "WARNING"
    assert config.enable_console is False


def test_empty_file_gives_defaults(tmp_path):
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    assert load_config(config_file) == GuardConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.yaml")


def test_non_mapping(tmp_path):
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- a\n- b\n")

    with pytest.raises(ValueError, match="mapping"):
        load_config(config_file)


def test_invalid_field(tmp_path):
    config_file = tmp_path / "bad.yaml"
    config_file.write_text("default_mode: q\n")

    with pytest.raises(ValidationError):
        load_config(config_file)
