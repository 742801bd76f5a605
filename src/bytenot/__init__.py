# topmark:header:start
#
#   project      : ByteNot
#   file         : __init__.py
#   file_relpath : src/bytenot/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot package.

ByteNot is a small stream filter: it reads bytes from standard input, replaces
every byte with its bitwise complement (``255 - b``) and writes the result to
standard output. The work is split into three pipeline stages (source,
transform, sink) driven by a coordinator; see `bytenot.pipeline`.
"""

from __future__ import annotations
