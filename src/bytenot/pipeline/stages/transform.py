# topmark:header:start
#
#   project      : ByteNot
#   file         : transform.py
#   file_relpath : src/bytenot/pipeline/stages/transform.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Transform stage: bitwise complement of every byte.

The transform is pure, stateless and total over 0..255: ``b -> 255 - b``.
It is applied through a 256-entry translation table, which maps each byte
independently and therefore preserves length and order.
"""

from __future__ import annotations

from typing import Final

from bytenot.pipeline.stages.base import BaseStage, InputSlotMixin, OutputSlotMixin

COMPLEMENT_TABLE: Final[bytes] = bytes(255 - b for b in range(256))


def complement_byte(b: int) -> int:
    """Return the bitwise complement of a single byte value.

    Args:
        b (int): Byte value in 0..255.

    Returns:
        int: ``255 - b``.

    Raises:
        ValueError: If ``b`` is outside 0..255.
    """
    if not 0 <= b <= 255:
        raise ValueError(f"byte value out of range: {b}")
    return 255 - b


def complement(data: bytes | bytearray | memoryview) -> bytes:
    """Complement every byte of ``data``.

    Args:
        data (bytes | bytearray | memoryview): Input bytes.

    Returns:
        bytes: A new object of the same length with each byte complemented.
    """
    return bytes(data).translate(COMPLEMENT_TABLE)


class TransformStage(InputSlotMixin, OutputSlotMixin, BaseStage):
    """Map the input buffer through `complement` into the output slot.

    ``process()`` performs no I/O and cannot fail; it keeps the uniform stage
    signature so the coordinator can drive all stages the same way.
    """

    def __init__(self) -> None:
        super().__init__(name="transform")
        self._input = bytearray()
        self._output = bytearray()

    def run(self) -> None:
        """Replace the output slot with the complemented input."""
        self._output = self._input.translate(COMPLEMENT_TABLE)
