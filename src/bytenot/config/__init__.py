# topmark:header:start
#
#   project      : ByteNot
#   file         : __init__.py
#   file_relpath : src/bytenot/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration for ByteNot: model, TOML I/O and logging setup.

Build configs using `MutableConfig` (mutable), then `freeze()` into a
`Config` before handing it to the pipeline engine.
"""

from __future__ import annotations

from bytenot.config.io import ConfigError
from bytenot.config.model import Config, MutableConfig, PipelineMode

__all__ = ["Config", "ConfigError", "MutableConfig", "PipelineMode"]
