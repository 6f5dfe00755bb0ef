# topmark:header:start
#
#   project      : CMDA
#   file         : __init__.py
#   file_relpath : src/cmda/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for CMDA."""

from __future__ import annotations
