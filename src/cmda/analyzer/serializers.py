# topmark:header:start
#
#   project      : CMDA
#   file         : serializers.py
#   file_relpath : src/cmda/analyzer/serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Serializers that persist a content model to a byte stream.

Each serializer declares the file ``suffix`` of the artifacts it produces; the
analyzer names artifacts ``cmodel-<n><suffix>``.

TOML has no ``null`` value; `ContentModel.to_dict` never emits ``None``, so the
TOML output is a faithful rendering of the same structure the JSON output has.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, BinaryIO, Protocol

import tomlkit

from cmda.constants import DEFAULT_ENCODING

if TYPE_CHECKING:
    from cmda.model.cmodel import ContentModel


class Serializer(Protocol):
    """Protocol for content model serializers."""

    suffix: str

    def serialize(
        self,
        cmodel: ContentModel,
        out: BinaryIO,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Write ``cmodel`` to ``out`` as a self-contained document.

        Args:
            cmodel (ContentModel): The content model to write.
            out (BinaryIO): Destination byte stream (not closed by the serializer).
            encoding (str): Text encoding of the document.
        """
        ...


class JsonSerializer:
    """Serialize content models as JSON documents."""

    suffix: str = ".json"

    def __init__(self, *, indent: int = 2) -> None:
        self.indent: int = indent

    def serialize(
        self,
        cmodel: ContentModel,
        out: BinaryIO,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Write ``cmodel`` as JSON, newline-terminated."""
        text: str = json.dumps(cmodel.to_dict(), indent=self.indent, ensure_ascii=False)
        out.write((text + "\n").encode(encoding))


class TomlSerializer:
    """Serialize content models as TOML documents (via tomlkit)."""

    suffix: str = ".toml"

    def serialize(
        self,
        cmodel: ContentModel,
        out: BinaryIO,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        """Write ``cmodel`` as TOML."""
        out.write(tomlkit.dumps(cmodel.to_dict()).encode(encoding))
