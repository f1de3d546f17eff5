"""Tests for loading config.toml."""

from pathlib import Path

import pytest

from nexus_retriever.config import DEFAULT_WORKSPACE_ROOT, RetrieverConfig, load_config
from nexus_retriever.errors import ConfigurationError


def test_missing_file_returns_defaults(tmp_path: Path) -> None:
    config = load_config(tmp_path / "config.toml")

    assert config == RetrieverConfig.defaults()
    assert config.tool == "mvn"
    assert config.archive_suffix == ".zip"
    assert config.workspace_root == DEFAULT_WORKSPACE_ROOT


def test_loads_retriever_table(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(
        "[retriever]\n"
        'artifact = "com.x:acme-lib:${library.acme-lib.version}:zip"\n'
        'maven_home = "/opt/maven"\n'
        "timeout_seconds = 600\n"
        f'workspace_root = "{tmp_path / "libs"}"\n',
        encoding="utf-8",
    )

    config = load_config(cfg_path)

    assert config.artifact == "com.x:acme-lib:${library.acme-lib.version}:zip"
    assert config.maven_home == "/opt/maven"
    assert config.timeout_seconds == 600.0
    assert config.workspace_root == tmp_path / "libs"
    assert config.tool == "mvn"


def test_file_without_retriever_table_uses_defaults(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("[other]\nkey = 1\n", encoding="utf-8")

    assert load_config(cfg_path) == RetrieverConfig.defaults()


def test_invalid_toml_raises_configuration_error(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("[retriever\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="invalid TOML"):
        load_config(cfg_path)


def test_wrong_value_type_raises_configuration_error(tmp_path: Path) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text("[retriever]\nmaven_home = 42\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="retriever.maven_home"):
        load_config(cfg_path)


@pytest.mark.parametrize("value", ["true", "0", "-5", '"600"'])
def test_invalid_timeout_raises_configuration_error(tmp_path: Path, value: str) -> None:
    cfg_path = tmp_path / "config.toml"
    cfg_path.write_text(f"[retriever]\ntimeout_seconds = {value}\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="timeout_seconds"):
        load_config(cfg_path)
