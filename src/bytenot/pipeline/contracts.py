# topmark:header:start
#
#   project      : ByteNot
#   file         : contracts.py
#   file_relpath : src/bytenot/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline stages and their channels (coordinator-facing).

Stages are driven by a coordinator that calls ``stage.process()`` and moves
buffers between them; no stage ever reads another stage's buffer directly.

Lifecycle
---------
1) The coordinator hands an input buffer to a stage (``set_input``) where the
   stage has an input slot.
2) It calls ``stage.process()``. On an I/O failure the stage raises
   `OSError` and the coordinator stops the run.
3) It drains the stage's output slot (``take_output``), which returns the
   buffer and leaves a fresh empty one behind.

Channels are the minimal file-like surfaces the source and sink are bound to.
``sys.stdin.buffer`` and ``sys.stdout.buffer`` satisfy them, as does
`io.BytesIO`.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Stage(Protocol):
    """Protocol for a single pipeline stage.

    Attributes:
        name (str): Short, stable identifier used in logs and run reports
            (``"source"``, ``"transform"``, ``"sink"``).
    """

    name: str

    def process(self) -> None:
        """Run the stage to completion.

        Raises:
            OSError: If the underlying channel fails. The error is not retried.
        """
        ...


class ReadChannel(Protocol):
    """Binary input channel (e.g. ``sys.stdin.buffer``)."""

    def read(self, size: int = -1, /) -> bytes | None:
        """Read up to ``size`` bytes; an empty result means end-of-stream.

        ``None`` signals a non-blocking channel with no data available yet.
        """
        ...


class WriteChannel(Protocol):
    """Binary output channel (e.g. ``sys.stdout.buffer``)."""

    def write(self, data: bytes | bytearray | memoryview, /) -> int | None:
        """Write ``data`` and return the number of bytes accepted.

        ``None`` signals a non-blocking channel that would block.
        """
        ...

    def flush(self) -> None:
        """Push buffered bytes to the destination."""
        ...
