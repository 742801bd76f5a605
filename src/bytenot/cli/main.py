# topmark:header:start
#
#   project      : ByteNot
#   file         : main.py
#   file_relpath : src/bytenot/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot command-line entry point.

Key ideas:
- Group-level options (verbosity, color) are initialized once and placed into
  ``ctx.obj`` for the subcommands.
- Running ``bytenot`` without a subcommand invokes ``run``: the pipeline reads
  stdin and writes the complemented bytes to stdout.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from bytenot.cli.commands.dump_config import dump_config_command
from bytenot.cli.commands.run import run_command
from bytenot.cli.commands.version import version_command
from bytenot.cli.console import ClickConsole
from bytenot.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from bytenot.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from bytenot.config.logging import BytenotLogger

logger: BytenotLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    # Program-output verbosity (console), independent from internal logging
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    effective_mode: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    # Internal logging is configured via env only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env, use_color=enable_color)

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ByteNot: complement every byte from stdin (255 - b) and write it to stdout.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the ByteNot CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        logger.debug("No subcommand given; running the pipeline")
        ctx.invoke(run_command)


cli.add_command(run_command)

cli.add_command(version_command)

cli.add_command(dump_config_command)

if __name__ == "__main__":
    cli()
