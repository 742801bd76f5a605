# topmark:header:start
#
#   project      : ByteNot
#   file         : base.py
#   file_relpath : src/bytenot/pipeline/stages/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class and buffer-slot mixins for pipeline stages.

The coordinator invokes ``stage.process()``. `BaseStage` implements the common
lifecycle around the stage-specific ``run()``:

    stage.process()  # internally: log start → run() → log outcome

Buffers move between stages through two slot mixins:

- `InputSlotMixin.set_input` replaces the stage's input buffer.
- `OutputSlotMixin.take_output` hands the output buffer over and leaves a
  fresh, empty `bytearray` in its place, in the same call. Nothing keeps a
  reference to a buffer after it has been taken, so a buffer never has two
  owners.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from bytenot.config.logging import get_logger

if TYPE_CHECKING:
    from bytenot.config.logging import BytenotLogger

logger: BytenotLogger = get_logger(__name__)


@dataclass
class BaseStage:
    """Reusable foundation for pipeline stages.

    Subclass this to implement a concrete stage by overriding ``run()``. Do not
    override ``process()`` unless you need custom lifecycle behavior.

    Attributes:
        name (str): Stable stage identifier for logs and run reports.
    """

    name: str

    def process(self) -> None:
        """Invoke the stage lifecycle: log → run → log.

        Raises:
            OSError: Propagated unchanged from ``run()`` when the channel fails.
        """
        logger.trace("Stage %s: running", self.name)
        try:
            self.run()
        except OSError as exc:
            logger.debug("Stage %s: failed: %s", self.name, exc)
            raise
        logger.trace("Stage %s: done", self.name)

    def run(self) -> None:
        """Perform the stage's primary work.

        Subclasses must implement this method.
        """
        raise NotImplementedError(f"{type(self).__name__}.run() is not implemented")


class InputSlotMixin:
    """Adds a replaceable input buffer slot to a stage."""

    _input: bytearray

    def set_input(self, buf: bytes | bytearray) -> None:
        """Replace the current input buffer.

        A `bytearray` is adopted as-is (ownership moves to the stage); any other
        bytes-like value is copied into a new `bytearray`.

        Args:
            buf (bytes | bytearray): The new input buffer.
        """
        self._input = buf if isinstance(buf, bytearray) else bytearray(buf)

    @property
    def input_size(self) -> int:
        """Number of bytes currently held in the input slot."""
        return len(self._input)


class OutputSlotMixin:
    """Adds a drainable output buffer slot to a stage."""

    _output: bytearray

    def take_output(self) -> bytearray:
        """Return the accumulated output and reset the slot to an empty buffer.

        Calling this twice without an intervening ``process()`` yields an empty
        buffer the second time.

        Returns:
            bytearray: The buffer previously held in the output slot.
        """
        out, self._output = self._output, bytearray()
        return out
