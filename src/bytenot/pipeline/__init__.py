# topmark:header:start
#
#   project      : ByteNot
#   file         : __init__.py
#   file_relpath : src/bytenot/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot pipeline: stages, coordinators and the engine entry point."""

from __future__ import annotations

from bytenot.pipeline.coordinator import Coordinator
from bytenot.pipeline.engine import RunReport, run_pipeline
from bytenot.pipeline.status import RunState
from bytenot.pipeline.streaming import StreamingCoordinator

__all__ = ["Coordinator", "RunReport", "RunState", "StreamingCoordinator", "run_pipeline"]
