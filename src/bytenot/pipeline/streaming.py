# topmark:header:start
#
#   project      : ByteNot
#   file         : streaming.py
#   file_relpath : src/bytenot/pipeline/streaming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Bounded-memory variant of the ByteNot pipeline.

`StreamingCoordinator` drives the same three stages as `Coordinator`, but one
chunk at a time instead of buffering the whole input. Memory use is bounded by
the source's ``chunk_size``; the output is byte-for-byte identical to a
buffered run.

Each chunk walks ``READING → TRANSFORMING → WRITING``; the run then loops back
to ``READING``. The end-of-stream chunk (empty) still passes through transform
and sink, so the sink flushes once more and an empty input behaves exactly like
the buffered coordinator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bytenot.config.logging import get_logger
from bytenot.pipeline.coordinator import Coordinator
from bytenot.pipeline.status import RunState

if TYPE_CHECKING:
    from bytenot.config.logging import BytenotLogger

logger: BytenotLogger = get_logger(__name__)


class StreamingCoordinator(Coordinator):
    """Coordinator that moves one source chunk at a time through the pipeline."""

    loops = True

    def _read_chunk(self) -> bytes:
        try:
            return self.source.read_chunk()
        except OSError:
            self.failed_stage = self.source.name
            self._enter(RunState.FAILED)
            raise

    def run(self) -> None:
        """Execute source, transform and sink per chunk until end-of-stream.

        Raises:
            OSError: The first stage error, unchanged. Later stages do not run.
            RuntimeError: If the coordinator is not in the ``IDLE`` state.
        """
        chunks: int = 0
        self._enter(RunState.READING)
        while True:
            chunk: bytes = self._read_chunk()
            self.bytes_in += len(chunk)

            self._enter(RunState.TRANSFORMING)
            self.transform.set_input(chunk)
            self._process(self.transform)

            self._enter(RunState.WRITING)
            self.sink.set_input(self.transform.take_output())
            self._process(self.sink)
            self.bytes_out += self.sink.bytes_written

            if not chunk:
                break
            chunks += 1
            self._enter(RunState.READING)

        self._enter(RunState.DONE)
        logger.debug(
            "StreamingCoordinator: done (%d chunk(s), %d byte(s) in, %d out)",
            chunks,
            self.bytes_in,
            self.bytes_out,
        )
