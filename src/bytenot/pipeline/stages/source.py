# topmark:header:start
#
#   project      : ByteNot
#   file         : source.py
#   file_relpath : src/bytenot/pipeline/stages/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source stage: pull every byte from an input channel into memory.

Reads are batched (``read(chunk_size)``) rather than byte-at-a-time; the
resulting buffer holds the same bytes in the same order. End-of-stream is an
empty read. A failing read raises `OSError`, which is propagated unchanged and
never retried.
"""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

from bytenot.config.logging import get_logger
from bytenot.constants import DEFAULT_CHUNK_SIZE
from bytenot.pipeline.stages.base import BaseStage, OutputSlotMixin

if TYPE_CHECKING:
    from bytenot.config.logging import BytenotLogger
    from bytenot.pipeline.contracts import ReadChannel

logger: BytenotLogger = get_logger(__name__)


class SourceStage(OutputSlotMixin, BaseStage):
    """Read an input channel until end-of-stream into the output slot.

    Args:
        channel (ReadChannel): Binary input channel (e.g. ``sys.stdin.buffer``).
        chunk_size (int): Maximum number of bytes requested per read.
    """

    def __init__(self, channel: ReadChannel, *, chunk_size: int = DEFAULT_CHUNK_SIZE) -> None:
        super().__init__(name="source")
        if chunk_size < 1:
            raise ValueError(f"chunk_size must be >= 1 (got {chunk_size})")
        self._channel = channel
        self.chunk_size = chunk_size
        self._output = bytearray()

    def read_chunk(self) -> bytes:
        """Read a single batch from the channel.

        Used by the streaming coordinator; the output slot is not touched.

        Returns:
            bytes: Up to ``chunk_size`` bytes; ``b""`` at end-of-stream.

        Raises:
            BlockingIOError: If a non-blocking channel has no data available.
        """
        chunk: bytes | None = self._channel.read(self.chunk_size)
        if chunk is None:
            raise BlockingIOError(errno.EAGAIN, "read would block")
        logger.trace("SourceStage: read %d byte(s)", len(chunk))
        return chunk

    def run(self) -> None:
        """Append every byte up to end-of-stream to the output slot."""
        while chunk := self.read_chunk():
            self._output += chunk
        logger.debug("SourceStage: end-of-stream after %d byte(s)", len(self._output))
