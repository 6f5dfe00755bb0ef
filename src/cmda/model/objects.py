# topmark:header:start
#
#   project      : CMDA
#   file         : objects.py
#   file_relpath : src/cmda/model/objects.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Digital objects: the records CMDA classifies.

A digital object is read-only once constructed. Object sources build them from
plain mappings (decoded JSON or TOML) via `DigitalObject.from_dict`, e.g.::

    {
        "pid": "demo:1",
        "label": "Sample image",
        "content_models": ["demo:ImageModel"],
        "datastreams": [
            {"id": "DC", "control_group": "X", "mime_type": "text/xml"},
            {"id": "IMG", "mime_type": "image/jpeg"}
        ],
        "disseminators": [
            {"id": "DISS1", "bdef_pid": "demo:BDef1", "bmech_pid": "demo:BMech1"}
        ]
    }
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Final

from cmda.core.errors import ObjectLoadError

CONTROL_GROUPS: Final[frozenset[str]] = frozenset({"X", "M", "E", "R"})


def _require_str(data: Mapping[str, Any], key: str, what: str) -> str:
    value: Any = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ObjectLoadError(f"{what}: missing or empty '{key}'")
    return value


def _optional_str(data: Mapping[str, Any], key: str, default: str | None = None) -> str | None:
    value: Any = data.get(key, default)
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _list_of_tables(data: Mapping[str, Any], key: str, what: str) -> list[Mapping[str, Any]]:
    value: Any = data.get(key, [])
    if not isinstance(value, list) or not all(isinstance(v, Mapping) for v in value):
        raise ObjectLoadError(f"{what}: '{key}' must be a list of tables")
    return list(value)


@dataclass(frozen=True)
class Datastream:
    """A single datastream of a digital object.

    Attributes:
        id (str): Datastream identifier, unique within its object.
        control_group (str): One of ``X`` (inline XML), ``M`` (managed),
            ``E`` (external reference) or ``R`` (redirect).
        mime_type (str): MIME type of the current version.
        format_uri (str | None): Optional format identifier.
        label (str): Human-readable label.
    """

    id: str
    control_group: str = "M"
    mime_type: str = "application/octet-stream"
    format_uri: str | None = None
    label: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, owner: str) -> Datastream:
        """Build a datastream from a decoded mapping.

        Args:
            data (Mapping[str, Any]): Decoded datastream table.
            owner (str): PID of the owning object (used in error messages).

        Returns:
            Datastream: The constructed datastream.

        Raises:
            ObjectLoadError: If the id is missing or the control group is unknown.
        """
        ds_id: str = _require_str(data, "id", f"datastream of {owner}")
        control_group: str = (_optional_str(data, "control_group", "M") or "M").upper()
        if control_group not in CONTROL_GROUPS:
            raise ObjectLoadError(
                f"datastream {ds_id} of {owner}: unknown control group {control_group!r}"
            )
        return cls(
            id=ds_id,
            control_group=control_group,
            mime_type=_optional_str(data, "mime_type") or "application/octet-stream",
            format_uri=_optional_str(data, "format_uri"),
            label=_optional_str(data, "label") or "",
        )


@dataclass(frozen=True)
class Disseminator:
    """A behavior binding of a digital object (behavior definition + mechanism)."""

    id: str
    bdef_pid: str
    bmech_pid: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, owner: str) -> Disseminator:
        """Build a disseminator from a decoded mapping."""
        what = f"disseminator of {owner}"
        return cls(
            id=_require_str(data, "id", what),
            bdef_pid=_require_str(data, "bdef_pid", what),
            bmech_pid=_require_str(data, "bmech_pid", what),
        )


@dataclass(frozen=True)
class DigitalObject:
    """An input record.

    Attributes:
        pid (str): Persistent identifier; written verbatim to membership lists.
        label (str): Object label.
        content_models (tuple[str, ...]): Content-model PIDs the object already declares.
        datastreams (tuple[Datastream, ...]): Datastreams in document order.
        disseminators (tuple[Disseminator, ...]): Behavior bindings in document order.
    """

    pid: str
    label: str = ""
    content_models: tuple[str, ...] = ()
    datastreams: tuple[Datastream, ...] = ()
    disseminators: tuple[Disseminator, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DigitalObject:
        """Build a digital object from a decoded JSON/TOML mapping.

        Args:
            data (Mapping[str, Any]): Decoded object document.

        Returns:
            DigitalObject: The constructed object.

        Raises:
            ObjectLoadError: If the document is malformed.
        """
        if not isinstance(data, Mapping):
            raise ObjectLoadError("object document must be a table")
        pid: str = _require_str(data, "pid", "object")

        cmodels: Any = data.get("content_models", [])
        if not isinstance(cmodels, list) or not all(isinstance(c, str) for c in cmodels):
            raise ObjectLoadError(f"object {pid}: 'content_models' must be a list of strings")

        return cls(
            pid=pid,
            label=_optional_str(data, "label") or "",
            content_models=tuple(cmodels),
            datastreams=tuple(
                Datastream.from_dict(d, owner=pid)
                for d in _list_of_tables(data, "datastreams", f"object {pid}")
            ),
            disseminators=tuple(
                Disseminator.from_dict(d, owner=pid)
                for d in _list_of_tables(data, "disseminators", f"object {pid}")
            ),
        )
