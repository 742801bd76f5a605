# topmark:header:start
#
#   project      : ByteNot
#   file         : coordinator.py
#   file_relpath : src/bytenot/pipeline/coordinator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the ByteNot source → transform → sink pipeline (buffered).

The `Coordinator` owns one instance of each stage and is the only component
that moves buffers between them:

    source.process()
    transform.set_input(source.take_output()); transform.process()
    sink.set_input(transform.take_output());   sink.process()

Stages run strictly in sequence. If a stage raises, no later stage runs, the
run state becomes ``FAILED`` and the very same exception object is re-raised.
The coordinator never prints; callers decide how to surface errors (see
`bytenot.pipeline.engine`).
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from bytenot.config.logging import get_logger
from bytenot.constants import DEFAULT_CHUNK_SIZE
from bytenot.pipeline.stages import SinkStage, SourceStage, TransformStage
from bytenot.pipeline.status import RunState, can_transition

if TYPE_CHECKING:
    from bytenot.config.logging import BytenotLogger
    from bytenot.pipeline.contracts import ReadChannel, Stage, WriteChannel

logger: BytenotLogger = get_logger(__name__)


class Coordinator:
    """Owner and driver of the three pipeline stages.

    Args:
        source (ReadChannel): Channel the source stage is bound to.
        sink (WriteChannel): Channel the sink stage is bound to.
        chunk_size (int): Read batch size for the source stage.

    Attributes:
        state (RunState): Current run state.
        failed_stage (str | None): Name of the stage that raised, if any.
        bytes_in (int): Bytes read by the source during the last run.
        bytes_out (int): Bytes written by the sink during the last run.
    """

    #: Whether ``WRITING → READING`` is a legal edge for this coordinator.
    loops: bool = False

    def __init__(
        self,
        source: ReadChannel,
        sink: WriteChannel,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ) -> None:
        self.source = SourceStage(source, chunk_size=chunk_size)
        self.transform = TransformStage()
        self.sink = SinkStage(sink)

        self.state: RunState = RunState.IDLE
        self.failed_stage: str | None = None
        self.bytes_in: int = 0
        self.bytes_out: int = 0

    @classmethod
    def from_std_streams(cls, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Coordinator:
        """Build a coordinator bound to the process's binary stdin and stdout.

        Args:
            chunk_size (int): Read batch size for the source stage.

        Returns:
            Coordinator: A coordinator in the ``IDLE`` state.
        """
        return cls(sys.stdin.buffer, sys.stdout.buffer, chunk_size=chunk_size)

    def _enter(self, target: RunState) -> None:
        if not can_transition(self.state, target, allow_loop=self.loops):
            raise RuntimeError(f"Illegal run-state transition: {self.state.name} -> {target.name}")
        logger.trace("%s: %s -> %s", type(self).__name__, self.state.name, target.name)
        self.state = target

    def _process(self, stage: Stage) -> None:
        """Run one stage; on failure record it, enter ``FAILED`` and re-raise."""
        try:
            stage.process()
        except OSError:
            self.failed_stage = stage.name
            self._enter(RunState.FAILED)
            raise

    def run(self) -> None:
        """Execute source, transform and sink in sequence.

        Raises:
            OSError: The first stage error, unchanged. Later stages do not run.
            RuntimeError: If the coordinator is not in the ``IDLE`` state.
        """
        self._enter(RunState.READING)
        self._process(self.source)

        self._enter(RunState.TRANSFORMING)
        self.transform.set_input(self.source.take_output())
        self.bytes_in = self.transform.input_size
        self._process(self.transform)

        self._enter(RunState.WRITING)
        self.sink.set_input(self.transform.take_output())
        self._process(self.sink)
        self.bytes_out = self.sink.bytes_written

        self._enter(RunState.DONE)
        logger.debug("Coordinator: done (%d byte(s) in, %d out)", self.bytes_in, self.bytes_out)
