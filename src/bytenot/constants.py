# topmark:header:start
#
#   project      : ByteNot
#   file         : constants.py
#   file_relpath : src/bytenot/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

BYTENOT_VERSION: str = get_version("bytenot")

# Project-local config discovery (current working directory only):
BYTENOT_TOML_NAME: str = "bytenot.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"

# Name of the table holding ByteNot settings (``[tool.bytenot]`` in pyproject.toml):
CONFIG_SECTION: str = "bytenot"

# Environment variable consulted for the internal log level:
LOG_LEVEL_ENV_VAR: str = "BYTENOT_LOG_LEVEL"

# Batch size for channel reads (and chunk size in streaming mode):
DEFAULT_CHUNK_SIZE: int = 64 * 1024
