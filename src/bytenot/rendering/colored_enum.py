# topmark:header:start
#
#   project      : ByteNot
#   file         : colored_enum.py
#   file_relpath : src/bytenot/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for human-facing rendering.

`ColoredStrEnum` stores a textual value while attaching a colorizer (a callable
that decorates strings, typically a `yachalk.ChalkBuilder`). The enum ``.value``
remains a plain string; the colorizer is exposed via ``.color``.

Example:
    ```python
    from yachalk import chalk

    class Light(ColoredStrEnum):
        GO   = ("go", chalk.green)
        STOP = ("stop", chalk.red_bright)

    print(Light.GO.value)            # 'go'
    print(Light.GO.color("hello"))   # green "hello"
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol


class Colorizer(Protocol):
    """Callable that decorates a string for display.

    Compatible with `yachalk.ChalkBuilder.__call__`, which accepts a variadic
    list of arguments and a `sep` keyword.
    """

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate provided arguments into a display string.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values
                are provided. Defaults to a single space.

        Returns:
            str: The colorized and concatenated output string.
        """
        ...


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a string and that carries an associated colorizer."""

    _value_: str
    _color: Colorizer

    def __new__(cls, text: str, color: Colorizer) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The textual value for the enum member (stored in `_value_`).
            color (Colorizer): A callable used to colorize text for display.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the textual value of the enum member."""
        return self._value_

    @property
    def color(self) -> Colorizer:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, *, enable_color: bool = True) -> str:
        """Return the member's text, colorized unless ``enable_color`` is False.

        Args:
            enable_color (bool): Whether to apply the member's colorizer.

        Returns:
            str: The (optionally colorized) textual value.
        """
        return self._color(self._value_) if enable_color else self._value_
