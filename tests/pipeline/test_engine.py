# topmark:header:start
#
#   project      : ByteNot
#   file         : test_engine.py
#   file_relpath : tests/pipeline/test_engine.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `run_pipeline` (engine layer): reports and exit-code mapping."""

from __future__ import annotations

import errno
import io

from bytenot.config.model import PipelineMode
from bytenot.core.exit_codes import ExitCode
from bytenot.pipeline.coordinator import Coordinator
from bytenot.pipeline.engine import build_coordinator, exit_code_for, run_pipeline
from bytenot.pipeline.status import RunState
from bytenot.pipeline.streaming import StreamingCoordinator
from tests.conftest import FailingReader, RecordingWriter, make_config, mark_pipeline, parametrize


@mark_pipeline
@parametrize("mode", list(PipelineMode))
def test_successful_run_report(mode: PipelineMode) -> None:
    out = io.BytesIO()

    report, code = run_pipeline(
        make_config(mode=mode, chunk_size=2), stdin=io.BytesIO(b"\x0f\xaa"), stdout=out
    )

    assert code is None
    assert report.ok
    assert report.state == RunState.DONE
    assert report.mode == mode
    assert (report.bytes_in, report.bytes_out) == (2, 2)
    assert report.failed_stage is None
    assert report.error is None
    assert out.getvalue() == b"\xf0\x55"


@mark_pipeline
def test_write_failure_maps_to_io_error() -> None:
    error = OSError(errno.EIO, "I/O error")

    report, code = run_pipeline(
        make_config(), stdin=io.BytesIO(b"abc"), stdout=RecordingWriter(error=error)
    )

    assert code == ExitCode.IO_ERROR
    assert not report.ok
    assert report.state == RunState.FAILED
    assert report.failed_stage == "sink"
    assert report.error is error
    assert report.bytes_in == 3
    assert report.bytes_out == 0


@mark_pipeline
def test_read_failure_reports_source() -> None:
    error = PermissionError(errno.EACCES, "Permission denied")

    report, code = run_pipeline(
        make_config(), stdin=FailingReader(error), stdout=RecordingWriter()
    )

    assert code == ExitCode.PERMISSION_DENIED
    assert report.failed_stage == "source"
    assert report.error is error


class _WouldBlockReader:
    def read(self, size: int = -1, /) -> bytes | None:
        return None


@mark_pipeline
@parametrize("mode", [PipelineMode.BUFFERED, PipelineMode.STREAMING])
def test_would_block_stdin_maps_to_io_error(mode: PipelineMode) -> None:
    writer = RecordingWriter()

    report, code = run_pipeline(make_config(mode=mode), stdin=_WouldBlockReader(), stdout=writer)

    assert code == ExitCode.IO_ERROR
    assert report.failed_stage == "source"
    assert isinstance(report.error, BlockingIOError)
    assert report.state == RunState.FAILED
    assert writer.data == bytearray()


@mark_pipeline
@parametrize(
    "error, expected",
    [
        (BrokenPipeError(errno.EPIPE, "Broken pipe"), ExitCode.IO_ERROR),
        (PermissionError(errno.EACCES, "Permission denied"), ExitCode.PERMISSION_DENIED),
        (OSError(errno.ENOSPC, "No space left on device"), ExitCode.IO_ERROR),
        (BlockingIOError(errno.EAGAIN, "write would block", 0), ExitCode.IO_ERROR),
    ],
)
def test_exit_code_mapping(error: OSError, expected: ExitCode) -> None:
    assert exit_code_for(error) == expected


@mark_pipeline
def test_build_coordinator_picks_mode() -> None:
    src, dst = io.BytesIO(), io.BytesIO()

    buffered = build_coordinator(make_config(), src, dst)
    streaming = build_coordinator(make_config(mode=PipelineMode.STREAMING), src, dst)

    assert type(buffered) is Coordinator
    assert isinstance(streaming, StreamingCoordinator)
    assert streaming.source.chunk_size == 64 * 1024
