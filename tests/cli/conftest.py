# topmark:header:start
#
#   project      : CMDA
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running CMDA in a controlled working directory."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from cmda.cli.main import cli
from tests.conftest import write_object_file

if TYPE_CHECKING:
    from pathlib import Path


def run_cli_in(tmp_path: Path, argv: Sequence[str]) -> Result:
    """Invoke the CLI with `tmp_path` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the command invocation.
        argv (Sequence[str]): CLI argument vector, e.g. ``["analyze", "cmda.toml"]``.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    runner = CliRunner()
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return runner.invoke(cli, list(argv))
    finally:
        os.chdir(cwd)


def write_sample_objects(directory: Path) -> None:
    """Write three objects: two images (one with a behavior) and one text object."""
    write_object_file(
        directory,
        "1.json",
        {
            "pid": "demo:1",
            "datastreams": [{"id": "IMG", "mime_type": "image/jpeg"}],
            "disseminators": [{"id": "D1", "bdef_pid": "demo:BDef", "bmech_pid": "demo:BMech"}],
        },
    )
    write_object_file(
        directory,
        "2.json",
        {"pid": "demo:2", "datastreams": [{"id": "TXT", "mime_type": "text/plain"}]},
    )
    write_object_file(
        directory,
        "3.json",
        {
            "pid": "demo:3",
            "datastreams": [{"id": "IMG", "mime_type": "image/jpeg"}],
            "disseminators": [{"id": "D9", "bdef_pid": "demo:BDef", "bmech_pid": "demo:BMech"}],
        },
    )
