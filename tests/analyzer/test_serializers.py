# topmark:header:start
#
#   project      : CMDA
#   file         : test_serializers.py
#   file_relpath : tests/analyzer/test_serializers.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for content model serializers."""

from __future__ import annotations

import io
import json
from typing import Any

import tomlkit

from cmda.analyzer.serializers import JsonSerializer, TomlSerializer
from cmda.model.cmodel import ContentModel, DatastreamSpec

CMODEL = ContentModel(
    datastreams=(
        DatastreamSpec(id="IMG", mime_type="image/jpeg"),
        DatastreamSpec(id="DC", mime_type="text/xml", format_uri="info:dc"),
    ),
    bdef_pids=("demo:BDef1",),
    pid="demo:CModel1",
    label="Images été",
)


def test_json_serializer_writes_model_dict() -> None:
    buf = io.BytesIO()
    JsonSerializer().serialize(CMODEL, buf, "UTF-8")

    data: dict[str, Any] = json.loads(buf.getvalue().decode("utf-8"))
    assert data == CMODEL.to_dict()
    assert data["datastreams"][0] == {"id": "DC", "mime_type": "text/xml", "format_uri": "info:dc"}
    assert buf.getvalue().endswith(b"\n")


def test_json_serializer_honors_encoding() -> None:
    buf = io.BytesIO()
    JsonSerializer().serialize(CMODEL, buf, "UTF-16")

    assert json.loads(buf.getvalue().decode("utf-16"))["label"] == "Images été"


def test_toml_serializer_round_trips_through_tomlkit() -> None:
    buf = io.BytesIO()
    TomlSerializer().serialize(CMODEL, buf)

    data: Any = tomlkit.parse(buf.getvalue().decode("utf-8")).unwrap()
    assert data == CMODEL.to_dict()


def test_suffixes() -> None:
    assert JsonSerializer.suffix == ".json"
    assert TomlSerializer.suffix == ".toml"
