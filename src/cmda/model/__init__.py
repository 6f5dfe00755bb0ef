# topmark:header:start
#
#   project      : CMDA
#   file         : __init__.py
#   file_relpath : src/cmda/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Value types for input objects and the content models derived from them."""

from __future__ import annotations

from .cmodel import ContentModel, DatastreamSpec
from .objects import Datastream, DigitalObject, Disseminator

__all__ = [
    "ContentModel",
    "Datastream",
    "DatastreamSpec",
    "DigitalObject",
    "Disseminator",
]
