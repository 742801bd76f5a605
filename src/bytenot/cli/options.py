# topmark:header:start
#
#   project      : ByteNot
#   file         : options.py
#   file_relpath : src/bytenot/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for ByteNot.

This module centralizes reusable options (verbosity, color, pipeline and config
selection) and their resolution logic, so the group and commands can stay thin.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from pathlib import Path
from typing import Callable, ParamSpec, TypeVar

import click

from bytenot.cli.cli_types import EnumChoiceParam
from bytenot.cli.errors import BytenotUsageError
from bytenot.config.model import PipelineMode

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: ``verbose_count`` when positive, ``-quiet_count`` when quiet,
            ``0`` (terse) otherwise.

    Raises:
        BytenotUsageError: If both verbose and quiet flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise BytenotUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    return verbose_count or -quiet_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (prints a run summary on stderr).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress non-error messages.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(*, cli_mode: ColorMode | None, stderr_isatty: bool | None = None) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        stderr_isatty (bool | None): Whether stderr is a TTY; if None, auto-detected.

    Returns:
        bool: True if color output should be enabled, False otherwise.

    Behavior:
        Honors --color and --no-color CLI flags, then the FORCE_COLOR and
        NO_COLOR environment variables, then enables color if stderr (where
        diagnostics go) is a TTY.
    """
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stderr_isatty is None:
        stderr_isatty = sys.stderr.isatty()
    return bool(stderr_isatty)


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def validate_chunk_size(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter,  # pylint: disable=unused-argument
    value: int | None,
) -> int | None:
    """Reject non-positive ``--chunk-size`` values with a usage error."""
    if value is not None and value < 1:
        raise BytenotUsageError(f"--chunk-size must be >= 1 (got {value}).")
    return value


def pipeline_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --mode and --chunk-size options to a command.

    Both default to ``None`` so configuration files can supply the value.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--mode",
        "mode",
        type=EnumChoiceParam(PipelineMode),
        default=None,
        help="Pipeline mode: buffered (default, whole input in memory) or streaming.",
    )(f)
    f = click.option(
        "--chunk-size",
        "chunk_size",
        type=int,
        default=None,
        callback=validate_chunk_size,
        metavar="N",
        help="Bytes per read (and per chunk when streaming). Must be >= 1.",
    )(f)
    return f


def config_file_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config and --no-config options to a command.

    Args:
        f (Callable[P, R]): The Click command function to decorate.

    Returns:
        Callable[P, R]: The decorated function.
    """
    f = click.option(
        "--config",
        "config_files",
        type=click.Path(dir_okay=False, path_type=Path),
        multiple=True,
        help="Extra TOML config file(s), applied after the project config. Repeatable.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not look for bytenot.toml / pyproject.toml in the current directory.",
    )(f)
    return f
