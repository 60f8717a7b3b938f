"""Unit tests for config.py"""

import pytest

from mdblocks.config import load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Settings defaults apply when no config.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.generate_ids is True
    assert settings.frontmatter is True
    assert settings.parser_config == "gfm-like"
    assert settings.output_format == "json"


def test_load_config_reads_config_yaml(tmp_path):
    (tmp_path / "config.yaml").write_text("output_format: yaml\ngenerate_ids: false\n")
    settings = load_config()
    assert settings.output_format == "yaml"
    assert settings.generate_ids is False


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """MDBLOCKS_OUTPUT_FORMAT takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("output_format: yaml\n")
    monkeypatch.setenv("MDBLOCKS_OUTPUT_FORMAT", "json")
    assert load_config().output_format == "json"


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("MDBLOCKS_OUTPUT_DIR", "env-out")
    settings = load_config(overrides={"output_dir": "cli-out"})
    assert settings.output_dir == "cli-out"


def test_load_config_none_override_ignored(monkeypatch):
    monkeypatch.setenv("MDBLOCKS_OUTPUT_DIR", "env-out")
    assert load_config(overrides={"output_dir": None}).output_dir == "env-out"


@pytest.mark.parametrize("raw,expected", [("false", False), ("0", False), ("true", True)])
def test_load_config_env_bool_coercion(monkeypatch, raw, expected):
    """MDBLOCKS_GENERATE_IDS strings are coerced to bool."""
    monkeypatch.setenv("MDBLOCKS_GENERATE_IDS", raw)
    assert load_config().generate_ids is expected


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_invalid_output_format():
    """Values outside the schema raise a (ValueError) validation error."""
    with pytest.raises(ValueError):
        load_config(overrides={"output_format": "xml"})
