# topmark:header:start
#
#   project      : CMDA
#   file         : io.py
#   file_relpath : src/cmda/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TOML I/O helpers for CMDA configuration.

Parsing is done with `tomlkit` and returned as plain `dict` structures. Unlike
lenient lookups, a configuration file that cannot be read or parsed is fatal:
the analyzer must not start with a half-understood configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from cmda.config.logging import get_logger
from cmda.core.errors import ConfigurationError

if TYPE_CHECKING:
    from pathlib import Path

    from cmda.config.logging import CmdaLogger

TomlTable = dict[str, Any]

logger: CmdaLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigurationError: If the file is missing, unreadable or not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise ConfigurationError(f"Configuration file not found: {path}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {path}: {e}") from e

    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as e:
        raise ConfigurationError(f"Error decoding TOML from {path}: {e}") from e

    data_any: Any = doc.unwrap()
    logger.debug("Loaded configuration from %s", path)
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Scalars (``int``, ``float``, ``bool``) are coerced with ``str(...)``.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when absent.

    Raises:
        ConfigurationError: If the value is present but not a scalar.
    """
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    raise ConfigurationError(f"Expected a string for '{key}', got {type(value).__name__}")


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return a sub-table, or an empty dict when absent.

    Args:
        table (TomlTable): Table to query.
        key (str): Key of the sub-table.

    Returns:
        TomlTable: A shallow copy of the sub-table.

    Raises:
        ConfigurationError: If the value is present but not a table.
    """
    value: Any | None = table.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(f"Expected a table for [{key}], got {type(value).__name__}")
    return dict(cast("TomlTable", value))


def merge_tables(base: TomlTable, override: TomlTable) -> TomlTable:
    """Merge ``override`` into a copy of ``base`` (one level of sub-tables deep)."""
    merged: TomlTable = {k: dict(v) if isinstance(v, dict) else v for k, v in base.items()}
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = {**merged[key], **value}
        else:
            merged[key] = value
    return merged
