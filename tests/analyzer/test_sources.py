# topmark:header:start
#
#   project      : CMDA
#   file         : test_sources.py
#   file_relpath : tests/analyzer/test_sources.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for object sources and object file loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from cmda.analyzer.sources import DirObjectSource, IterableObjectSource, load_object
from cmda.core.errors import ConfigurationError, ObjectLoadError
from tests.conftest import make_object, write_object_file

if TYPE_CHECKING:
    from pathlib import Path


def test_dir_source_yields_objects_in_sorted_path_order(tmp_path: Path) -> None:
    write_object_file(tmp_path, "b.json", {"pid": "demo:b"})
    write_object_file(tmp_path, "a.json", {"pid": "demo:a"})
    write_object_file(tmp_path, "sub/c.json", {"pid": "demo:c"})
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    assert [o.pid for o in DirObjectSource(tmp_path)] == ["demo:a", "demo:b", "demo:c"]


def test_dir_source_non_recursive(tmp_path: Path) -> None:
    write_object_file(tmp_path, "a.json", {"pid": "demo:a"})
    write_object_file(tmp_path, "sub/c.json", {"pid": "demo:c"})

    assert [o.pid for o in DirObjectSource(tmp_path, recursive=False)] == ["demo:a"]


def test_dir_source_is_single_pass(tmp_path: Path) -> None:
    write_object_file(tmp_path, "a.json", {"pid": "demo:a"})
    source = DirObjectSource(tmp_path)

    assert len(list(source)) == 1
    assert list(source) == []


def test_dir_source_reads_toml(tmp_path: Path) -> None:
    (tmp_path / "obj.toml").write_text(
        'pid = "demo:t"\nlabel = "From TOML"\n\n'
        '[[datastreams]]\nid = "DC"\nmime_type = "text/xml"\n',
        encoding="utf-8",
    )

    objs = list(DirObjectSource(tmp_path, pattern="*.toml"))

    assert len(objs) == 1
    assert objs[0].pid == "demo:t"
    assert objs[0].label == "From TOML"
    assert objs[0].datastreams[0].mime_type == "text/xml"


def test_dir_source_missing_directory(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="not found"):
        DirObjectSource(tmp_path / "missing")


def test_load_object_rejects_bad_json(tmp_path: Path) -> None:
    path: Path = tmp_path / "bad.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(ObjectLoadError, match="Cannot decode"):
        load_object(path)


def test_load_object_rejects_missing_pid(tmp_path: Path) -> None:
    path: Path = write_object_file(tmp_path, "nopid.json", {"label": "x"})

    with pytest.raises(ObjectLoadError, match="pid"):
        load_object(path)


def test_iterable_source_wraps_any_iterable() -> None:
    source = IterableObjectSource([make_object("a:1"), make_object("a:2")])

    assert next(source).pid == "a:1"
    assert [o.pid for o in source] == ["a:2"]
