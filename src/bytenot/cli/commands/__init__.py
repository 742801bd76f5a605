# topmark:header:start
#
#   project      : ByteNot
#   file         : __init__.py
#   file_relpath : src/bytenot/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ByteNot CLI subcommands (``run``, ``version``, ``dump-config``)."""
