# topmark:header:start
#
#   project      : ByteNot
#   file         : __init__.py
#   file_relpath : src/bytenot/pipeline/stages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete pipeline stages: source (read), transform (complement), sink (write)."""

from __future__ import annotations

from bytenot.pipeline.stages.sink import SinkStage
from bytenot.pipeline.stages.source import SourceStage
from bytenot.pipeline.stages.transform import TransformStage

__all__ = ["SinkStage", "SourceStage", "TransformStage"]
