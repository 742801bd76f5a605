# topmark:header:start
#
#   project      : ByteNot
#   file         : dump_config.py
#   file_relpath : src/bytenot/cli/commands/dump_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot `dump-config` command.

Emits the effective ByteNot configuration as TOML under a ``[bytenot]`` table,
after applying defaults, the discovered project config, ``--config`` files
and any CLI overrides. The output can be saved as ``bytenot.toml``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytenot.cli.config_resolver import resolve_config_from_click
from bytenot.cli.options import config_file_options, pipeline_options
from bytenot.config.io import to_toml
from bytenot.config.logging import get_logger

if TYPE_CHECKING:
    from pathlib import Path

    from bytenot.cli.console import ClickConsole
    from bytenot.config.logging import BytenotLogger
    from bytenot.config.model import Config, PipelineMode

logger: BytenotLogger = get_logger(__name__)


@click.command(
    name="dump-config",
    help="Dump the final merged ByteNot configuration as TOML.",
)
@pipeline_options
@config_file_options
def dump_config_command(
    *,
    mode: PipelineMode | None = None,
    chunk_size: int | None = None,
    config_files: tuple[Path, ...] = (),
    no_config: bool = False,
) -> None:
    """Dump the final merged configuration as TOML.

    With ``-v``, the files that contributed are listed as TOML comments above
    the table.

    Args:
        mode (PipelineMode | None): ``--mode`` override.
        chunk_size (int | None): ``--chunk-size`` override.
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip project config discovery.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    config: Config = resolve_config_from_click(
        mode=mode,
        chunk_size=chunk_size,
        config_files=config_files,
        no_config=no_config,
    )
    logger.trace("Config after merging CLI and discovered config: %s", config)

    if ctx.obj.get("verbosity_level", 0) > 0:
        for path in config.config_files:
            console.print(f"# from: {path}")
    console.print(to_toml(config.to_toml_dict()), nl=False)
