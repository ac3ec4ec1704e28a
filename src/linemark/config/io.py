# topmark:header:start
#
#   project      : LineMark
#   file         : io.py
#   file_relpath : src/linemark/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 LineMark authors
#
# topmark:header:end

"""TOML I/O helpers for LineMark configuration.

This module provides:
- loading of on-disk TOML files (`linemark.toml` / `pyproject.toml`),
- rendering of plain dicts back to TOML text,
- small value getters used when parsing config tables.

Parsing and rendering are done with `tomlkit`; parsed documents are unwrapped
into plain `dict` structures so the config model never sees tomlkit types.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from linemark.config.logging import get_logger
from linemark.core.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from linemark.config.logging import LinemarkLogger

TomlTable = dict[str, Any]

logger: LinemarkLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``linemark.toml`` or
            ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Malformed TOML in {path}: {e}") from e

    return cast("TomlTable", doc.unwrap())


def to_toml(toml_dict: Mapping[str, Any]) -> str:
    """Serialize a TOML mapping to a string.

    TOML has no ``null``, so ``None`` entries are dropped before rendering.

    Args:
        toml_dict (Mapping[str, Any]): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    return tomlkit.dumps(_strip_none_for_toml(toml_dict))


def _strip_none_for_toml(value: object) -> Any:
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    if isinstance(value, (list, tuple)):
        seq: list[object] = list(cast("list[object]", value))
        return [_strip_none_for_toml(v) for v in seq if v is not None]
    return value


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: The sub-table, or an empty dict when missing or not a table.
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when the key is missing or
            the value is not a string (a warning is logged in that case).
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for %r, got %r; ignoring", key, value)
    return None


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        bool | None: The boolean value, or ``None`` when missing or mistyped.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for %r, got %r; ignoring", key, value)
    return None
