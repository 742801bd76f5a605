# topmark:header:start
#
#   project      : ByteNot
#   file         : __init__.py
#   file_relpath : src/bytenot/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ByteNot.

Included modules:

- ``exit_codes``
  Centralized exit codes for the CLI and runtime, aligned with BSD-style
  ``sysexits`` where practical.
"""

from __future__ import annotations
