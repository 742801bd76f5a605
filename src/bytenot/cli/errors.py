# topmark:header:start
#
#   project      : ByteNot
#   file         : errors.py
#   file_relpath : src/bytenot/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for ByteNot CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Click catches them, calls `show()` and exits with
    ``exit_code``.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from bytenot.core.exit_codes import ExitCode


class BytenotError(click.ClickException):
    """Base class for all ByteNot CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:
        """Return the plain error message text.

        Notes:
            Unlike Click's default, this method does not add color; colorization
            is applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx: click.Context | None = click.get_current_context(silent=True)
        console: Any = ctx.obj.get("console") if ctx and isinstance(ctx.obj, dict) else None
        if console is None:
            super().show(file)
            return
        console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))


class BytenotUsageError(BytenotError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BytenotConfigError(BytenotError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class BytenotPermissionDeniedError(BytenotError):
    """Error when the OS refuses access to stdin or stdout."""

    exit_code = ExitCode.PERMISSION_DENIED


class BytenotIOError(BytenotError):
    """Error for I/O errors reading stdin or writing stdout."""

    exit_code = ExitCode.IO_ERROR


_ERRORS_BY_CODE: dict[ExitCode, type[BytenotError]] = {
    ExitCode.USAGE_ERROR: BytenotUsageError,
    ExitCode.CONFIG_ERROR: BytenotConfigError,
    ExitCode.PERMISSION_DENIED: BytenotPermissionDeniedError,
    ExitCode.IO_ERROR: BytenotIOError,
}


def error_for_exit_code(code: ExitCode, message: str) -> BytenotError:
    """Return the CLI exception matching an engine exit code.

    Args:
        code (ExitCode): Exit code reported by the engine.
        message (str): User-facing error message.

    Returns:
        BytenotError: An exception instance whose ``exit_code`` is ``code``
            (the generic `BytenotError` for codes without a dedicated class).
    """
    cls: type[BytenotError] = _ERRORS_BY_CODE.get(code, BytenotError)
    return cls(message)
