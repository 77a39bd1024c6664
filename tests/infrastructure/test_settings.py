"""Tests for settings resolution."""

from pathlib import Path

import pytest

from pms.domain.exceptions import ValidationError
from pms.infrastructure.settings import load_settings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("PMS_CONFIG", "PMS_DATA_DIR", "PMS_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_config_file(tmp_path):
    settings = load_settings(tmp_path / "missing.yaml")

    assert settings.log_level == "WARNING"
    assert settings.products_file.name == "products.json"


def test_yaml_file_overrides_defaults(tmp_path):
    config = tmp_path / "pms.yaml"
    config.write_text(f"data_dir: {tmp_path / 'store'}\nlog_level: info\n", encoding="utf-8")

    settings = load_settings(config)

    assert settings.data_dir == tmp_path / "store"
    assert settings.log_level == "INFO"


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    config = tmp_path / "pms.yaml"
    config.write_text("log_level: INFO\n", encoding="utf-8")
    monkeypatch.setenv("PMS_LOG_LEVEL", "debug")
    monkeypatch.setenv("PMS_DATA_DIR", str(tmp_path / "env"))

    settings = load_settings(config)

    assert settings.log_level == "DEBUG"
    assert settings.data_dir == Path(tmp_path / "env")


def test_unknown_keys_rejected(tmp_path):
    config = tmp_path / "pms.yaml"
    config.write_text("colour: blue\n", encoding="utf-8")

    with pytest.raises(ValidationError, match="Unknown settings"):
        load_settings(config)


def test_malformed_yaml_rejected(tmp_path):
    config = tmp_path / "pms.yaml"
    config.write_text("log_level: [unclosed\n", encoding="utf-8")

    with pytest.raises(ValidationError, match="not valid YAML"):
        load_settings(config)


def test_lock_file_sits_beside_the_data_file(tmp_path):
    settings = load_settings(tmp_path / "missing.yaml")

    assert settings.lock_file.parent == settings.products_file.parent
