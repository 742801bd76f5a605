# topmark:header:start
#
#   project      : ByteNot
#   file         : __init__.py
#   file_relpath : src/bytenot/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click command-line interface for ByteNot.

The default action (no subcommand) runs the pipeline from stdin to stdout;
``version`` and ``dump-config`` are informational subcommands.
"""
