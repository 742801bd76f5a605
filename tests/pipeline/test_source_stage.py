# topmark:header:start
#
#   project      : ByteNot
#   file         : test_source_stage.py
#   file_relpath : tests/pipeline/test_source_stage.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for `SourceStage`."""

from __future__ import annotations

import errno
import io

import pytest

from bytenot.pipeline.stages.source import SourceStage
from tests.conftest import FailingReader, mark_pipeline, parametrize


@mark_pipeline
@parametrize("chunk_size", [1, 3, 7, 65536])
def test_reads_until_eof_in_order(chunk_size: int) -> None:
    payload: bytes = bytes(range(256)) * 3
    stage = SourceStage(io.BytesIO(payload), chunk_size=chunk_size)

    stage.process()

    assert stage.take_output() == bytearray(payload)


@mark_pipeline
def test_empty_stream() -> None:
    stage = SourceStage(io.BytesIO(b""))

    stage.process()

    assert stage.take_output() == bytearray()


@mark_pipeline
def test_take_output_twice_returns_empty_second_time() -> None:
    stage = SourceStage(io.BytesIO(b"\x01\x02\x03"))
    stage.process()

    assert stage.take_output() == bytearray(b"\x01\x02\x03")
    assert stage.take_output() == bytearray()


@mark_pipeline
def test_read_error_propagates_unchanged() -> None:
    error = OSError(errno.EIO, "device gone")
    reader = FailingReader(error, data=b"partial")
    stage = SourceStage(reader, chunk_size=4)

    with pytest.raises(OSError) as excinfo:
        stage.process()

    assert excinfo.value is error
    # One successful read, one failing read, no retry
    assert reader.reads == 2


@mark_pipeline
def test_read_chunk_does_not_touch_output_slot() -> None:
    stage = SourceStage(io.BytesIO(b"abcdef"), chunk_size=4)

    assert stage.read_chunk() == b"abcd"
    assert stage.read_chunk() == b"ef"
    assert stage.read_chunk() == b""
    assert stage.take_output() == bytearray()


@mark_pipeline
@parametrize("chunk_size", [0, -5])
def test_rejects_non_positive_chunk_size(chunk_size: int) -> None:
    with pytest.raises(ValueError, match="chunk_size"):
        SourceStage(io.BytesIO(b""), chunk_size=chunk_size)


class _WouldBlockReader:
    """Non-blocking reader with no data available yet."""

    def read(self, size: int = -1, /) -> bytes | None:
        return None


@mark_pipeline
def test_would_block_read_raises_blocking_io_error() -> None:
    stage = SourceStage(_WouldBlockReader())

    with pytest.raises(BlockingIOError) as excinfo:
        stage.process()

    assert excinfo.value.errno == errno.EAGAIN
    assert stage.take_output() == bytearray()
