# topmark:header:start
#
#   project      : CMDA
#   file         : __init__.py
#   file_relpath : src/cmda/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMDA CLI subcommands."""

from __future__ import annotations
