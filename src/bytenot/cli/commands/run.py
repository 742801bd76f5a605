# topmark:header:start
#
#   project      : ByteNot
#   file         : run.py
#   file_relpath : src/bytenot/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot `run` command.

Reads stdin to end-of-stream, complements every byte and writes the result to
stdout. This is also the default action of the ``bytenot`` group when no
subcommand is given.

Exit status follows `ExitCode`: ``SUCCESS`` when the run reaches ``DONE``,
``IO_ERROR`` or ``PERMISSION_DENIED`` when a stage fails.
"""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import click

from bytenot.cli.config_resolver import resolve_config_from_click
from bytenot.cli.errors import error_for_exit_code
from bytenot.cli.options import config_file_options, pipeline_options
from bytenot.config.logging import get_logger
from bytenot.pipeline.engine import run_pipeline

if TYPE_CHECKING:
    from pathlib import Path

    from bytenot.cli.console import ClickConsole
    from bytenot.config.logging import BytenotLogger
    from bytenot.config.model import Config, PipelineMode
    from bytenot.pipeline.engine import RunReport

logger: BytenotLogger = get_logger(__name__)


def silence_stdout() -> None:
    """Point the stdout file descriptor at ``os.devnull``.

    After a broken pipe, the interpreter would otherwise fail again while
    flushing ``sys.stdout`` at shutdown.
    """
    try:
        fd: int = sys.stdout.fileno()
    except (AttributeError, ValueError, OSError) as e:  # io.UnsupportedOperation
        logger.debug("stdout has no file descriptor (%s); not redirecting", e)
        return
    devnull: int = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def describe_failure(report: RunReport) -> str:
    """Return the one-line operator message for a failed run."""
    err: OSError | None = report.error
    detail: str = (err.strerror or str(err)) if err is not None else "unknown error"
    where: str = "reading stdin" if report.failed_stage == "source" else "writing stdout"
    return f"I/O error while {where}: {detail}"


@click.command(
    name="run",
    help="Complement every byte from stdin and write it to stdout (default action).",
)
@pipeline_options
@config_file_options
def run_command(
    *,
    mode: PipelineMode | None = None,
    chunk_size: int | None = None,
    config_files: tuple[Path, ...] = (),
    no_config: bool = False,
) -> None:
    """Run the byte-complement pipeline once.

    Args:
        mode (PipelineMode | None): Buffered or streaming coordinator.
        chunk_size (int | None): Read batch size.
        config_files (tuple[Path, ...]): Extra config files.
        no_config (bool): Skip project config discovery.

    Raises:
        BytenotError: The `ExitCode`-specific subclass when the run fails.
    """
    ctx: click.Context = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    verbosity: int = ctx.obj.get("verbosity_level", 0)

    config: Config = resolve_config_from_click(
        mode=mode,
        chunk_size=chunk_size,
        config_files=config_files,
        no_config=no_config,
    )

    report, code = run_pipeline(config)
    if code is not None:
        if isinstance(report.error, BrokenPipeError):
            silence_stdout()
        raise error_for_exit_code(code, describe_failure(report))

    if verbosity > 0:
        state: str = report.state.render(enable_color=console.enable_color)
        console.note(
            f"bytenot: {state} ({report.mode.value}, "
            f"{report.bytes_in} byte(s) in, {report.bytes_out} out)"
        )
