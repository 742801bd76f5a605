# topmark:header:start
#
#   project      : ByteNot
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the ByteNot test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, and provides in-memory channel doubles shared by the pipeline, engine
and CLI tests.

Notes:
    Tests should respect the immutable/mutable configuration split: build configs
    using `bytenot.config.MutableConfig`, then `freeze()` into a
    `bytenot.config.Config` before handing them to the engine.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from bytenot.config import MutableConfig, logging

if TYPE_CHECKING:
    from pathlib import Path

    from bytenot.config import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_bytenot_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ByteNot's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("BYTENOT_LOG_LEVEL", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so failures come with detailed output.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL, use_color=False)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty temporary directory.

    Project config discovery looks in the current directory, so this keeps any
    ``bytenot.toml`` / ``pyproject.toml`` of the developer's checkout out of the
    test.

    Args:
        tmp_path (Path): The pytest-provided temporary directory for the test.
        monkeypatch (pytest.MonkeyPatch): Fixture to change the working directory.

    Returns:
        Path: The isolated working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): Keyword overrides applied to the mutable builder before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


# --- Channel doubles ---


class FailingReader:
    """Readable channel that yields ``data`` and then raises ``error``."""

    def __init__(self, error: OSError, data: bytes = b"") -> None:
        self.error = error
        self._pending = data
        self.reads = 0

    def read(self, size: int = -1, /) -> bytes:
        self.reads += 1
        if self._pending:
            chunk, self._pending = self._pending, b""
            return chunk
        raise self.error


class RecordingWriter:
    """Writable channel that records writes and flushes.

    Args:
        max_per_write (int | None): Accept at most this many bytes per call
            (simulates partial writes); ``None`` accepts everything.
        results (list[int | None] | None): Scripted return values for the first
            calls (``0`` and ``None`` simulate short and blocked writes).
        error (OSError | None): Raise this on the first write.
    """

    def __init__(
        self,
        *,
        max_per_write: int | None = None,
        results: list[int | None] | None = None,
        error: OSError | None = None,
    ) -> None:
        self.max_per_write = max_per_write
        self.results = list(results or [])
        self.error = error
        self.data = bytearray()
        self.calls: list[int] = []
        self.flushes = 0

    def write(self, data: bytes | bytearray | memoryview, /) -> int | None:
        if self.error is not None:
            raise self.error
        self.calls.append(len(data))
        if self.results:
            scripted: int | None = self.results.pop(0)
            if scripted:
                self.data += bytes(data[:scripted])
            return scripted
        n: int = len(data) if self.max_per_write is None else min(len(data), self.max_per_write)
        self.data += bytes(data[:n])
        return n

    def flush(self) -> None:
        self.flushes += 1
