# topmark:header:start
#
#   project      : CMDA
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the CMDA test suite.

Sets up logging for test runs and provides small builders for digital objects,
object files and test classifiers shared across the suite.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from cmda.config import logging
from cmda.model.cmodel import ContentModel, DatastreamSpec
from cmda.model.objects import DigitalObject

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_cmda_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure CMDA's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture.
    """
    monkeypatch.delenv("CMDA_LOG_LEVEL", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Log at TRACE level during the test run.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_object(pid: str, *ds_ids: str, mime_type: str = "text/plain") -> DigitalObject:
    """Build an object whose datastreams all share ``mime_type``."""
    return DigitalObject.from_dict(
        {
            "pid": pid,
            "datastreams": [{"id": ds, "mime_type": mime_type} for ds in ds_ids],
        }
    )


def write_object_file(directory: Path, name: str, data: Mapping[str, Any]) -> Path:
    """Write ``data`` as a JSON object file and return its path."""
    path: Path = directory / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


class KeyedClassifier:
    """Classifier that maps the part of the PID before ``:`` to a fresh descriptor.

    Each call builds a *new* `ContentModel` instance, so grouping depends on
    equality rather than identity. PIDs listed in ``fail_on`` raise.
    """

    def __init__(self, fail_on: tuple[str, ...] = ()) -> None:
        self.fail_on: tuple[str, ...] = fail_on
        self.calls: list[str] = []

    def get_content_model(self, obj: DigitalObject) -> ContentModel:
        self.calls.append(obj.pid)
        if obj.pid in self.fail_on:
            raise RuntimeError(f"cannot classify {obj.pid}")
        key: str = obj.pid.split(":", 1)[0]
        return ContentModel(
            datastreams=(DatastreamSpec(id=key.upper()),),
            pid=f"cm:{key}",
            label=f"instance for {obj.pid}",
        )

    def get_directives(self, cmodel_pid: str) -> str | None:
        return None
