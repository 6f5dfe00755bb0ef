# topmark:header:start
#
#   project      : CMDA
#   file         : __init__.py
#   file_relpath : src/cmda/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CMDA package.

CMDA (Content Model Derivation Analyzer) streams a set of digital objects,
groups them into content models using a pluggable classifier, and writes one
serialized content model plus one membership list per distinct model.
"""

from __future__ import annotations
