# topmark:header:start
#
#   project      : ByteNot
#   file         : __main__.py
#   file_relpath : src/bytenot/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ByteNot via ``python -m bytenot``.

It delegates directly to :func:`bytenot.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ByteNot is launched.

Examples:
    Complement a file through the module interface::

        python -m bytenot < input.bin > output.bin
"""

from __future__ import annotations

from bytenot.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
