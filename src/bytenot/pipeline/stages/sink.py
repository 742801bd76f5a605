# topmark:header:start
#
#   project      : ByteNot
#   file         : sink.py
#   file_relpath : src/bytenot/pipeline/stages/sink.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Sink stage for committing a buffer to an output channel.

The whole input buffer is written as one logical write: partial writes are
continued with the remainder until every byte is accepted, then the channel is
flushed so the content has reached the destination when ``process()`` returns.

A channel that accepts zero bytes of a non-empty remainder can never complete
the write; that is reported as ``OSError(EIO)``. Any `OSError` raised by the
channel itself (e.g. `BrokenPipeError`) propagates unchanged.
"""

from __future__ import annotations

import errno
from typing import TYPE_CHECKING

from bytenot.config.logging import get_logger
from bytenot.pipeline.stages.base import BaseStage, InputSlotMixin

if TYPE_CHECKING:
    from bytenot.config.logging import BytenotLogger
    from bytenot.pipeline.contracts import WriteChannel

logger: BytenotLogger = get_logger(__name__)


def write_all(channel: WriteChannel, data: bytes | bytearray) -> int:
    """Write all of ``data`` to ``channel``, continuing after partial writes.

    Args:
        channel (WriteChannel): Binary output channel.
        data (bytes | bytearray): Bytes to write, in order.

    Returns:
        int: Number of bytes written (always ``len(data)``).

    Raises:
        BlockingIOError: If a non-blocking channel reports it would block.
        OSError: If the channel accepts no bytes of a non-empty remainder, or
            if the channel itself raises.
    """
    total: int = len(data)
    offset: int = 0
    with memoryview(data) as view:
        while offset < total:
            n: int | None = channel.write(view[offset:])
            if n is None:
                raise BlockingIOError(errno.EAGAIN, "write would block", offset)
            if n == 0:
                raise OSError(errno.EIO, f"short write: {offset} of {total} byte(s) written")
            if n < total - offset:
                logger.trace("write_all: partial write of %d byte(s) at offset %d", n, offset)
            offset += n
    channel.flush()
    return total


class SinkStage(InputSlotMixin, BaseStage):
    """Write the input buffer verbatim to an output channel.

    Args:
        channel (WriteChannel): Binary output channel (e.g. ``sys.stdout.buffer``).

    Attributes:
        bytes_written (int): Byte count of the last successful ``process()``.
    """

    def __init__(self, channel: WriteChannel) -> None:
        super().__init__(name="sink")
        self._channel = channel
        self._input = bytearray()
        self.bytes_written: int = 0

    def run(self) -> None:
        """Write the whole input buffer and flush the channel."""
        self.bytes_written = 0
        self.bytes_written = write_all(self._channel, self._input)
        logger.debug("SinkStage: wrote %d byte(s)", self.bytes_written)
