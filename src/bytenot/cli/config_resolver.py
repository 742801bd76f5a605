# topmark:header:start
#
#   project      : ByteNot
#   file         : config_resolver.py
#   file_relpath : src/bytenot/cli/config_resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolve the effective ByteNot `Config` from CLI options.

Layers are merged in this order (later wins): defaults, the project config
discovered in the current directory, explicit ``--config`` files, then the
command-line overrides. Any `ConfigError` is turned into a
`BytenotConfigError` so Click exits with ``CONFIG_ERROR``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bytenot.cli.errors import BytenotConfigError
from bytenot.config.io import ConfigError
from bytenot.config.logging import get_logger
from bytenot.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from bytenot.config.logging import BytenotLogger
    from bytenot.config.model import Config, PipelineMode

logger: BytenotLogger = get_logger(__name__)


def resolve_config_from_click(
    *,
    mode: PipelineMode | None,
    chunk_size: int | None,
    config_files: Sequence[Path],
    no_config: bool,
) -> Config:
    """Build and freeze the effective configuration for a command.

    Args:
        mode (PipelineMode | None): ``--mode`` override, if given.
        chunk_size (int | None): ``--chunk-size`` override, if given.
        config_files (Sequence[Path]): ``--config`` files, in order.
        no_config (bool): Whether ``--no-config`` was passed.

    Returns:
        Config: The frozen configuration.

    Raises:
        BytenotConfigError: If a config source is unusable or holds an invalid value.
    """
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            extra_config_files=config_files,
            no_config=no_config,
        )
        draft.apply_overrides(mode=mode, chunk_size=chunk_size)
        config: Config = draft.freeze()
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        raise BytenotConfigError(str(e)) from e
    logger.debug("Effective config: %s", config)
    return config
