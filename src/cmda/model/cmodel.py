# topmark:header:start
#
#   project      : CMDA
#   file         : cmodel.py
#   file_relpath : src/cmda/model/cmodel.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content models: the class descriptors produced by a classifier.

A `ContentModel` is both the grouping key used by the analyzer and the
content that gets serialized for each distinct class. Equality and hashing
are computed from the structural signature only (`datastreams`, `bdef_pids`
and `declared`); `pid` and `label` are descriptive and excluded from comparison,
so two independently built models with the same structure group together.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, order=True)
class DatastreamSpec:
    """Structural description of one required datastream."""

    id: str
    mime_type: str = ""
    format_uri: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return a plain mapping, omitting empty attributes."""
        out: dict[str, Any] = {"id": self.id}
        if self.mime_type:
            out["mime_type"] = self.mime_type
        if self.format_uri:
            out["format_uri"] = self.format_uri
        return out


@dataclass(frozen=True)
class ContentModel:
    """Class descriptor for a group of structurally similar objects.

    Attributes:
        datastreams (tuple[DatastreamSpec, ...]): Sorted datastream requirements.
        bdef_pids (tuple[str, ...]): Sorted behavior definitions the members implement.
        declared (tuple[str, ...]): Sorted content-model PIDs the members already declare.
        pid (str): Identifier assigned by the classifier; not part of equality.
        label (str): Human-readable label; not part of equality.
    """

    datastreams: tuple[DatastreamSpec, ...] = ()
    bdef_pids: tuple[str, ...] = ()
    declared: tuple[str, ...] = ()
    pid: str = field(default="", compare=False)
    label: str = field(default="", compare=False)

    def __post_init__(self) -> None:
        # Normalize ordering so equality does not depend on construction order.
        object.__setattr__(self, "datastreams", tuple(sorted(set(self.datastreams))))
        object.__setattr__(self, "bdef_pids", tuple(sorted(set(self.bdef_pids))))
        object.__setattr__(self, "declared", tuple(sorted(set(self.declared))))

    def to_dict(self) -> dict[str, Any]:
        """Return the plain structure written by serializers.

        Returns:
            dict[str, Any]: Mapping with ``pid``, ``label`` and the structural
            signature; empty sections are omitted.
        """
        out: dict[str, Any] = {"pid": self.pid, "label": self.label}
        if self.declared:
            out["declared"] = list(self.declared)
        if self.bdef_pids:
            out["bdef_pids"] = list(self.bdef_pids)
        if self.datastreams:
            out["datastreams"] = [ds.to_dict() for ds in self.datastreams]
        return out
