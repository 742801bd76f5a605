# topmark:header:start
#
#   project      : ByteNot
#   file         : model.py
#   file_relpath : src/bytenot/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for ByteNot: immutable `Config` and mutable builder.

Design:
    - `MutableConfig` collects values from defaults, the project config file,
      extra ``--config`` files and CLI overrides (later layers win).
    - `MutableConfig.freeze` validates and produces a frozen `Config`; use
      `Config.thaw` → edit → `MutableConfig.freeze` for safe updates.
    - TOML I/O is delegated to `bytenot.config.io`.

Precedence (lowest → highest):
    defaults → project config (``bytenot.toml`` or ``[tool.bytenot]`` in
    ``pyproject.toml`` in the current directory) → ``--config`` files → CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from bytenot.config.io import (
    ConfigError,
    TomlTable,
    discover_project_config,
    extract_section,
    get_int_value_or_none_checked,
    get_string_value_or_none_checked,
    load_toml_dict,
)
from bytenot.config.logging import get_logger
from bytenot.constants import CONFIG_SECTION, DEFAULT_CHUNK_SIZE

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bytenot.config.logging import BytenotLogger

logger: BytenotLogger = get_logger(__name__)


class PipelineMode(str, Enum):
    """How the coordinator moves data through the stages."""

    BUFFERED = "buffered"  # read everything, then transform, then write
    STREAMING = "streaming"  # one chunk at a time, bounded memory

    @classmethod
    def parse(cls, value: str) -> PipelineMode:
        """Return the mode for ``value`` (case-insensitive).

        Raises:
            ConfigError: If ``value`` names no mode.
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices: str = ", ".join(m.value for m in cls)
            raise ConfigError(f"Invalid mode '{value}'. Must be one of: {choices}") from None


class Keys:
    """TOML keys of the ``[bytenot]`` table."""

    MODE = "mode"
    CHUNK_SIZE = "chunk_size"


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for ByteNot.

    Attributes:
        mode (PipelineMode): Buffered or streaming coordinator.
        chunk_size (int): Read batch size (and chunk size when streaming).
        config_files (tuple[Path, ...]): Config files that contributed, in merge order.
    """

    mode: PipelineMode
    chunk_size: int
    config_files: tuple[Path, ...]

    def to_toml_dict(self) -> TomlTable:
        """Convert this Config into a TOML-serializable dict under ``[bytenot]``."""
        return {
            CONFIG_SECTION: {
                Keys.MODE: self.mode.value,
                Keys.CHUNK_SIZE: self.chunk_size,
            }
        }

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this frozen config."""
        return MutableConfig(
            mode=self.mode,
            chunk_size=self.chunk_size,
            config_files=list(self.config_files),
        )


@dataclass
class MutableConfig:
    """Mutable configuration used during discovery and merging.

    Fields left as ``None`` mean "not set by this layer" and fall through to
    lower layers when merged.

    Attributes:
        mode (PipelineMode | None): Buffered or streaming coordinator.
        chunk_size (int | None): Read batch size.
        config_files (list[Path]): Config files that contributed, in merge order.
    """

    mode: PipelineMode | None = None
    chunk_size: int | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    # ---------------------------- Build/freeze ----------------------------
    def freeze(self) -> Config:
        """Validate this builder and freeze it into an immutable Config.

        Raises:
            ConfigError: If ``chunk_size`` is not a positive integer.
        """
        chunk_size: int = DEFAULT_CHUNK_SIZE if self.chunk_size is None else self.chunk_size
        if chunk_size < 1:
            raise ConfigError(f"chunk_size must be >= 1 (got {chunk_size})")
        return Config(
            mode=self.mode or PipelineMode.BUFFERED,
            chunk_size=chunk_size,
            config_files=tuple(self.config_files),
        )

    # --------------------------- Loaders/parsers --------------------------
    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder populated with ByteNot's runtime defaults."""
        return cls(mode=PipelineMode.BUFFERED, chunk_size=DEFAULT_CHUNK_SIZE)

    @classmethod
    def from_toml_dict(cls, table: TomlTable, *, where: str = CONFIG_SECTION) -> MutableConfig:
        """Build a layer from a ``[bytenot]`` table.

        Values of the wrong type are logged and ignored.

        Args:
            table (TomlTable): The settings table.
            where (str): Location prefix used in warnings.

        Returns:
            MutableConfig: A layer with only the keys present in ``table`` set.

        Raises:
            ConfigError: If ``mode`` is a string that names no mode.
        """
        for key in table:
            if key not in (Keys.MODE, Keys.CHUNK_SIZE):
                logger.warning("Unknown config key %s.%s; ignoring it", where, key)

        mode_raw: str | None = get_string_value_or_none_checked(table, Keys.MODE, where=where)
        return cls(
            mode=PipelineMode.parse(mode_raw) if mode_raw is not None else None,
            chunk_size=get_int_value_or_none_checked(table, Keys.CHUNK_SIZE, where=where),
        )

    @classmethod
    def from_toml_file(cls, path: Path, *, strict: bool = False) -> MutableConfig:
        """Load one configuration layer from a TOML file.

        Args:
            path (Path): ``bytenot.toml``, ``pyproject.toml`` or any TOML file.
            strict (bool): Raise on unreadable/malformed files instead of logging.

        Returns:
            MutableConfig: The layer, with ``config_files == [path]``.
        """
        logger.debug("Creating MutableConfig from TOML config: %s", path)
        table: TomlTable = extract_section(load_toml_dict(path, strict=strict), path)
        draft: MutableConfig = cls.from_toml_dict(table, where=f"{path}")
        draft.config_files = [path]
        return draft

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Overlay ``other`` on top of this builder (``other`` wins where set).

        Args:
            other (MutableConfig): The higher-precedence layer.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        if other.mode is not None:
            self.mode = other.mode
        if other.chunk_size is not None:
            self.chunk_size = other.chunk_size
        self.config_files.extend(other.config_files)
        return self

    def merge_toml(self, table: TomlTable, *, where: str = CONFIG_SECTION) -> MutableConfig:
        """Overlay the settings of a ``[bytenot]`` table on this builder.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        return self.merge_with(MutableConfig.from_toml_dict(table, where=where))

    def apply_overrides(
        self,
        *,
        mode: PipelineMode | None = None,
        chunk_size: int | None = None,
    ) -> MutableConfig:
        """Apply CLI/API overrides; ``None`` leaves a value untouched.

        Returns:
            MutableConfig: ``self``, for chaining.
        """
        return self.merge_with(MutableConfig(mode=mode, chunk_size=chunk_size))

    @classmethod
    def load_merged(
        cls,
        *,
        cwd: Path | None = None,
        extra_config_files: Iterable[Path] = (),
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, the project config and extra files, in that order.

        Args:
            cwd (Path | None): Directory searched for the project config
                (defaults to the current working directory).
            extra_config_files (Iterable[Path]): Explicit ``--config`` files;
                these are loaded strictly.
            no_config (bool): Skip project config discovery.

        Returns:
            MutableConfig: The merged builder (CLI overrides not yet applied).
        """
        merged: MutableConfig = cls.from_defaults()
        if not no_config:
            project: Path | None = discover_project_config(cwd or Path.cwd())
            if project is not None:
                logger.info("Using project config %s", project)
                merged.merge_with(cls.from_toml_file(project))
        for path in extra_config_files:
            logger.info("Using extra config %s", path)
            merged.merge_with(cls.from_toml_file(path, strict=True))
        return merged
