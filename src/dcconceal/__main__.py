# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : __main__.py
#   file_relpath : src/dcconceal/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DoubleColonConceal via ``python -m dcconceal``.

It delegates directly to :func:`dcconceal.cli.main.cli`, the same entry point
as the ``dcconceal`` console script.

Examples:
    Render a note with concealed separators::

        python -m dcconceal render notes/today.md
"""

from __future__ import annotations

from dcconceal.cli.main import cli

if __name__ == "__main__":
    cli()
