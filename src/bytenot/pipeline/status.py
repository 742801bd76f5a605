# topmark:header:start
#
#   project      : ByteNot
#   file         : status.py
#   file_relpath : src/bytenot/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run-state machine for ByteNot coordinators.

A buffered run walks ``IDLE → READING → TRANSFORMING → WRITING → DONE``.
``FAILED`` is terminal and reachable from any of the three working states.
The streaming coordinator additionally loops ``WRITING → READING`` once per
chunk; that edge is opt-in via ``allow_loop``.

Values are human-readable strings used in CLI summaries; prefer equality
(``==``) over identity checks.
"""

from __future__ import annotations

from typing import Final

from yachalk import chalk

from bytenot.rendering.colored_enum import ColoredStrEnum


class RunState(ColoredStrEnum):
    """Lifecycle state of a single coordinator run."""

    IDLE = ("idle", chalk.gray)
    READING = ("reading", chalk.blue)
    TRANSFORMING = ("transforming", chalk.blue)
    WRITING = ("writing", chalk.blue)
    DONE = ("done", chalk.green)
    FAILED = ("failed", chalk.red_bright)

    @property
    def is_terminal(self) -> bool:
        """Whether no further transition may leave this state."""
        return self in (RunState.DONE, RunState.FAILED)


_TRANSITIONS: Final[dict[RunState, frozenset[RunState]]] = {
    RunState.IDLE: frozenset({RunState.READING}),
    RunState.READING: frozenset({RunState.TRANSFORMING, RunState.FAILED}),
    RunState.TRANSFORMING: frozenset({RunState.WRITING, RunState.FAILED}),
    RunState.WRITING: frozenset({RunState.DONE, RunState.FAILED}),
    RunState.DONE: frozenset(),
    RunState.FAILED: frozenset(),
}


def can_transition(current: RunState, target: RunState, *, allow_loop: bool = False) -> bool:
    """Return whether ``current → target`` is a legal edge.

    Args:
        current (RunState): The state the run is in.
        target (RunState): The requested next state.
        allow_loop (bool): Permit ``WRITING → READING`` (streaming runs only).

    Returns:
        bool: True if the transition is allowed.
    """
    if allow_loop and current == RunState.WRITING and target == RunState.READING:
        return True
    return target in _TRANSITIONS[current]
