# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : __init__.py
#   file_relpath : src/dcconceal/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the ``dcconceal`` CLI."""
