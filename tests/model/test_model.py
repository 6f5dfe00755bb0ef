# topmark:header:start
#
#   project      : CMDA
#   file         : test_model.py
#   file_relpath : tests/model/test_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for digital object parsing and content model equality."""

from __future__ import annotations

import pytest

from cmda.core.errors import ObjectLoadError
from cmda.model.cmodel import ContentModel, DatastreamSpec
from cmda.model.objects import DigitalObject


def test_from_dict_full_document() -> None:
    obj = DigitalObject.from_dict(
        {
            "pid": "demo:1",
            "label": "Sample",
            "content_models": ["demo:Image"],
            "datastreams": [
                {"id": "DC", "control_group": "x", "mime_type": "text/xml"},
                {"id": "IMG", "mime_type": "image/jpeg", "format_uri": "info:jpeg"},
            ],
            "disseminators": [{"id": "D1", "bdef_pid": "demo:BDef", "bmech_pid": "demo:BMech"}],
        }
    )

    assert obj.pid == "demo:1"
    assert obj.content_models == ("demo:Image",)
    assert [ds.control_group for ds in obj.datastreams] == ["X", "M"]
    assert obj.datastreams[1].format_uri == "info:jpeg"
    assert obj.disseminators[0].bmech_pid == "demo:BMech"


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"pid": ""},
        {"pid": "a:1", "datastreams": "DC"},
        {"pid": "a:1", "datastreams": [{"mime_type": "text/xml"}]},
        {"pid": "a:1", "datastreams": [{"id": "DC", "control_group": "Q"}]},
        {"pid": "a:1", "disseminators": [{"id": "D1", "bdef_pid": "x"}]},
        {"pid": "a:1", "content_models": "demo:X"},
    ],
)
def test_from_dict_rejects_malformed(data: dict[str, object]) -> None:
    with pytest.raises(ObjectLoadError):
        DigitalObject.from_dict(data)


def test_content_model_equality_ignores_pid_and_label() -> None:
    a = ContentModel(
        datastreams=(DatastreamSpec(id="B"), DatastreamSpec(id="A")), pid="x:1", label="one"
    )
    b = ContentModel(
        datastreams=(DatastreamSpec(id="A"), DatastreamSpec(id="B")), pid="x:2", label="two"
    )

    assert a == b
    assert hash(a) == hash(b)
    assert len({a: 1, b: 2}) == 1


def test_content_model_to_dict_omits_empty_sections() -> None:
    assert ContentModel(pid="x:1", label="L").to_dict() == {"pid": "x:1", "label": "L"}
