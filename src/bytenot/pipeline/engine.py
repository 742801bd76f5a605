# topmark:header:start
#
#   project      : ByteNot
#   file         : engine.py
#   file_relpath : src/bytenot/pipeline/engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Execution helper for running the ByteNot pipeline (engine layer).

This module builds a coordinator from a frozen `Config`, runs it, and returns a
structured `RunReport` together with an optional `ExitCode`. It is shared by
the CLI and by API callers.

Design goals:
  - No CLI dependencies: do not import Click or anything under
    ``bytenot.cli.*`` from here. Presentation is the CLI's job.
  - Logging only: failures are logged via the package logger; the original
    exception is kept on the report so callers can surface it.

Typical usage:

    report, err = run_pipeline(config)
    if err is not None:
        ...
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING

from bytenot.config.logging import get_logger
from bytenot.config.model import PipelineMode
from bytenot.core.exit_codes import ExitCode
from bytenot.pipeline.coordinator import Coordinator
from bytenot.pipeline.status import RunState
from bytenot.pipeline.streaming import StreamingCoordinator

if TYPE_CHECKING:
    from bytenot.config.logging import BytenotLogger
    from bytenot.config.model import Config
    from bytenot.pipeline.contracts import ReadChannel, WriteChannel

logger: BytenotLogger = get_logger(__name__)


@dataclass
class RunReport:
    """Outcome of a single pipeline run.

    Attributes:
        state (RunState): Final run state (``DONE`` or ``FAILED``).
        mode (PipelineMode): Coordinator flavor that ran.
        bytes_in (int): Bytes read from the input channel.
        bytes_out (int): Bytes written to the output channel.
        failed_stage (str | None): Name of the stage that raised, if any.
        error (OSError | None): The original exception, unchanged.
    """

    state: RunState
    mode: PipelineMode
    bytes_in: int = 0
    bytes_out: int = 0
    failed_stage: str | None = None
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        """Whether the run reached ``DONE``."""
        return self.state == RunState.DONE


def exit_code_for(error: OSError) -> ExitCode:
    """Map a stage error to its process exit code.

    Args:
        error (OSError): The exception raised by a stage.

    Returns:
        ExitCode: ``PERMISSION_DENIED`` for `PermissionError`, ``IO_ERROR`` otherwise
            (including `BrokenPipeError`).
    """
    if isinstance(error, PermissionError):
        return ExitCode.PERMISSION_DENIED
    return ExitCode.IO_ERROR


def build_coordinator(
    config: Config,
    source: ReadChannel,
    sink: WriteChannel,
) -> Coordinator:
    """Return the coordinator matching ``config.mode``, bound to the channels."""
    cls: type[Coordinator] = (
        StreamingCoordinator if config.mode == PipelineMode.STREAMING else Coordinator
    )
    return cls(source, sink, chunk_size=config.chunk_size)


def run_pipeline(
    config: Config,
    *,
    stdin: ReadChannel | None = None,
    stdout: WriteChannel | None = None,
) -> tuple[RunReport, ExitCode | None]:
    """Run the pipeline once and return ``(report, error_code)``.

    Args:
        config (Config): Frozen configuration for the run.
        stdin (ReadChannel | None): Input channel; defaults to ``sys.stdin.buffer``.
        stdout (WriteChannel | None): Output channel; defaults to ``sys.stdout.buffer``.

    Returns:
        tuple[RunReport, ExitCode | None]: The run report and ``None`` on success,
            or the exit code for the first stage error.

    Notes:
        This helper **never prints**; it only logs.
    """
    coordinator: Coordinator = build_coordinator(
        config,
        stdin if stdin is not None else sys.stdin.buffer,
        stdout if stdout is not None else sys.stdout.buffer,
    )
    logger.debug(
        "Running %s pipeline (chunk_size=%d)", config.mode.value, config.chunk_size
    )

    error: OSError | None = None
    code: ExitCode | None = None
    try:
        coordinator.run()
    except OSError as e:
        error = e
        code = exit_code_for(e)
        logger.error("Stage %s failed: %s", coordinator.failed_stage, e)

    report = RunReport(
        state=coordinator.state,
        mode=config.mode,
        bytes_in=coordinator.bytes_in,
        bytes_out=coordinator.bytes_out,
        failed_stage=coordinator.failed_stage,
        error=error,
    )
    return report, code
