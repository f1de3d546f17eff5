"""Retriever configuration loaded from TOML.

Example config.toml:
  [retriever]
  artifact = "com.example:acme-lib:${library.acme-lib.version}:zip"
  maven_home = "/opt/maven"
  tool = "mvn"
  archive_suffix = ".zip"
  timeout_seconds = 600
  workspace_root = "~/.nexus-retriever/libs"
"""

import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from nexus_retriever.core.executable import DEFAULT_TOOL_NAME
from nexus_retriever.core.retriever import DEFAULT_ARCHIVE_SUFFIX
from nexus_retriever.errors import ConfigurationError

DEFAULT_CONFIG_PATH = Path("~/.nexus-retriever/config.toml")
DEFAULT_WORKSPACE_ROOT = Path("~/.nexus-retriever/libs")


@dataclass(frozen=True)
class RetrieverConfig:
    """In-memory representation of the [retriever] table."""

    artifact: str | None
    maven_home: str | None
    tool: str
    archive_suffix: str
    timeout_seconds: float | None
    workspace_root: Path

    @staticmethod
    def defaults() -> "RetrieverConfig":
        return RetrieverConfig(
            artifact=None,
            maven_home=None,
            tool=DEFAULT_TOOL_NAME,
            archive_suffix=DEFAULT_ARCHIVE_SUFFIX,
            timeout_seconds=None,
            workspace_root=DEFAULT_WORKSPACE_ROOT,
        )


def _optional_str(table: dict[str, Any], key: str, cfg_path: Path) -> str | None:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        msg = f"{cfg_path}: 'retriever.{key}' must be a string, got {type(value).__name__}"
        raise ConfigurationError(msg)
    return value


def _optional_seconds(table: dict[str, Any], key: str, cfg_path: Path) -> float | None:
    value = table.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int | float) or value <= 0:
        msg = f"{cfg_path}: 'retriever.{key}' must be a positive number"
        raise ConfigurationError(msg)
    return float(value)


def load_config(cfg_path: Path) -> RetrieverConfig:
    """Load the retriever config file if present; otherwise return defaults.

    Args:
        cfg_path: Path to config.toml (``~`` is expanded)

    Returns:
        RetrieverConfig with file values over defaults

    Raises:
        ConfigurationError: If the file is not valid TOML or a value has the wrong type
    """
    path = cfg_path.expanduser()
    defaults = RetrieverConfig.defaults()
    if not path.exists():
        return defaults

    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        msg = f"{path}: invalid TOML: {e}"
        raise ConfigurationError(msg) from e

    table = data.get("retriever", {})
    if not isinstance(table, dict):
        msg = f"{path}: 'retriever' must be a table"
        raise ConfigurationError(msg)

    workspace_root = _optional_str(table, "workspace_root", path)
    return RetrieverConfig(
        artifact=_optional_str(table, "artifact", path),
        maven_home=_optional_str(table, "maven_home", path),
        tool=_optional_str(table, "tool", path) or defaults.tool,
        archive_suffix=_optional_str(table, "archive_suffix", path) or defaults.archive_suffix,
        timeout_seconds=_optional_seconds(table, "timeout_seconds", path),
        workspace_root=Path(workspace_root) if workspace_root else defaults.workspace_root,
    )
