# topmark:header:start
#
#   project      : CMDA
#   file         : keys.py
#   file_relpath : src/cmda/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for CMDA configuration.

Keys defined here are the external configuration API; renaming or removing
one is a breaking change. CLI option names are kept separate.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by CMDA configuration."""

    # Root
    KEY_OUTPUT_DIR: Final[str] = "output_dir"
    KEY_ENCODING: Final[str] = "encoding"

    # Component sections: [classifier], [object_source], [serializer]
    SECTION_CLASSIFIER: Final[str] = "classifier"
    SECTION_OBJECT_SOURCE: Final[str] = "object_source"
    SECTION_SERIALIZER: Final[str] = "serializer"

    # Component name within a section; all other keys are factory options.
    KEY_NAME: Final[str] = "name"

    # [object_source] options of the built-in "dir" source
    KEY_DIR: Final[str] = "dir"
    KEY_PATTERN: Final[str] = "pattern"
