# topmark:header:start
#
#   project      : ByteNot
#   file         : io.py
#   file_relpath : src/bytenot/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render ByteNot TOML configuration.

This module provides I/O helpers for reading ByteNot configuration from
on-disk TOML files (`bytenot.toml` / `pyproject.toml`) and typed getters for
the values found in them. Parsing is done with `tomlkit` and returned as plain
`dict` structures; merge policy lives in `bytenot.config.model`.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Final, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from bytenot.config.logging import get_logger
from bytenot.constants import BYTENOT_TOML_NAME, CONFIG_SECTION, PYPROJECT_TOML_NAME

if TYPE_CHECKING:
    from pathlib import Path

    from bytenot.config.logging import BytenotLogger

logger: BytenotLogger = get_logger(__name__)

TomlTable = dict[str, Any]


class ConfigError(ValueError):
    """Raised when a configuration source is unusable or holds an invalid value."""


# --- TOML file I/O ---


def load_toml_dict(path: Path, *, strict: bool = False) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (e.g., ``bytenot.toml`` or ``pyproject.toml``).
        strict (bool): Raise `ConfigError` instead of logging and returning ``{}``.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If ``strict`` and the file cannot be read or parsed.

    Notes:
        Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        if strict:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        if strict:
            raise ConfigError(f"Malformed TOML in {path}: {e}") from e
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        # UnicodeDecodeError is a ValueError
        if strict:
            raise ConfigError(f"Cannot decode config file {path}: {e}") from e
        logger.error("Error decoding TOML from %s (invalid encoding or value): %s", path, e)
        return {}
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_section(data: TomlTable, path: Path) -> TomlTable:
    """Return the ByteNot table from a parsed config document.

    - ``pyproject.toml``: the ``[tool.bytenot]`` table (empty if absent).
    - any other file: the ``[bytenot]`` table when present, otherwise the
      top-level keys.

    Args:
        data (TomlTable): Parsed TOML document.
        path (Path): The file the document was read from.

    Returns:
        TomlTable: The ByteNot settings table.
    """
    if path.name == PYPROJECT_TOML_NAME:
        tool: Any = data.get("tool", {})
        section: Any = tool.get(CONFIG_SECTION, {}) if isinstance(tool, dict) else {}
    else:
        section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        logger.warning("[%s] in %s is not a table; ignoring it", CONFIG_SECTION, path)
        return {}
    return cast("TomlTable", section)


def discover_project_config(cwd: Path) -> Path | None:
    """Return the project config file in ``cwd``, if any.

    ``bytenot.toml`` wins over ``pyproject.toml``; the latter only counts when it
    has a ``[tool.bytenot]`` table.

    Args:
        cwd (Path): Directory to look in (no upward traversal).

    Returns:
        Path | None: The discovered config file, or None.
    """
    candidate: Path = cwd / BYTENOT_TOML_NAME
    if candidate.is_file():
        return candidate
    pyproject: Path = cwd / PYPROJECT_TOML_NAME
    if pyproject.is_file() and extract_section(load_toml_dict(pyproject), pyproject):
        return pyproject
    return None


# --- Typed getters (checked) ---


def get_int_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> int | None:
    """Return an optional int value, warning when present but not `int`.

    Notes:
        - Missing key / None -> None
        - `bool` is rejected (since `bool` is a subclass of `int`).
    """
    value: Any | None = table.get(key)
    if value is None:
        return None

    loc: Final[str] = f"{where}.{key}"

    # Note: bool is a subclass of int; exclude it.
    if isinstance(value, bool):
        logger.warning("Expected int in %s, got bool: %r", loc, value)
        return None

    if isinstance(value, int):
        return value

    logger.warning("Expected int in %s, got %s: %r", loc, type(value).__name__, value)
    return None


def get_string_value_or_none_checked(table: TomlTable, key: str, *, where: str) -> str | None:
    """Return an optional string value, warning when present but not `str`."""
    value: Any | None = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value

    logger.warning("Expected str in %s.%s, got %s: %r", where, key, type(value).__name__, value)
    return None


# --- Rendering ---


def _strip_none_for_toml(value: object) -> object:
    """Remove TOML-incompatible `None` from mappings (TOML has no `null`)."""
    if isinstance(value, Mapping):
        m: Mapping[object, object] = cast("Mapping[object, object]", value)
        return {str(k): _strip_none_for_toml(v) for k, v in m.items() if v is not None}
    return value


def to_toml(toml_dict: TomlTable) -> str:
    """Serialize a TOML mapping to a string.

    Args:
        toml_dict (TomlTable): TOML mapping to render.

    Returns:
        str: The rendered TOML document as a string.
    """
    cleaned: Any = _strip_none_for_toml(toml_dict)
    return cast("str", cast("Any", tomlkit).dumps(cast("Mapping[str, Any]", cleaned)))
