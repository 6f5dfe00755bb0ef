# topmark:header:start
#
#   project      : CMDA
#   file         : __main__.py
#   file_relpath : src/cmda/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CMDA via ``python -m cmda``.

Delegates directly to :func:`cmda.cli.main.cli` so there is a single CLI
entry point regardless of how CMDA is launched.

Examples:
    Analyze a directory of objects::

        python -m cmda analyze --source-dir objects --output-dir out
"""

from __future__ import annotations

from cmda.cli.main import cli

if __name__ == "__main__":
    cli()
