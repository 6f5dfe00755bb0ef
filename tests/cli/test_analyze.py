# topmark:header:start
#
#   project      : CMDA
#   file         : test_analyze.py
#   file_relpath : tests/cli/test_analyze.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI `analyze` command: outputs and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import tomlkit

from cmda.core.exit_codes import ExitCode
from tests.cli.conftest import run_cli_in, write_sample_objects
from tests.conftest import write_object_file

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


def test_analyze_with_options(tmp_path: Path) -> None:
    write_sample_objects(tmp_path / "objects")

    result: Result = run_cli_in(
        tmp_path, ["analyze", "--source-dir", "objects", "--output-dir", "out"]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "cmodel-1.json  changeme:CModel1  2 members" in result.output
    assert "cmodel-2.json  changeme:CModel2  1 member" in result.output
    assert "Classified 3 object(s) into 2 content model(s)" in result.output

    out: Path = tmp_path / "out"
    assert (out / "cmodel-1.members.txt").read_text(encoding="utf-8") == "demo:1\ndemo:3\n"
    assert (out / "cmodel-2.members.txt").read_text(encoding="utf-8") == "demo:2\n"
    assert json.loads((out / "cmodel-1.json").read_text(encoding="utf-8"))["bdef_pids"] == [
        "demo:BDef"
    ]


def test_analyze_with_config_file(tmp_path: Path) -> None:
    write_sample_objects(tmp_path / "objects")
    (tmp_path / "cmda.toml").write_text(
        """\
output_dir = "out"

[classifier]
pid_prefix = "demo:CModel"

[object_source]
dir = "objects"

[serializer]
name = "toml"
""",
        encoding="utf-8",
    )

    result: Result = run_cli_in(tmp_path, ["analyze", "--summary", "cmda.toml"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "cmodel-1" not in result.output
    doc = tomlkit.parse((tmp_path / "out" / "cmodel-1.toml").read_text(encoding="utf-8"))
    assert doc["pid"] == "demo:CModel1"


def test_analyze_refuses_non_empty_output_dir(tmp_path: Path) -> None:
    write_sample_objects(tmp_path / "objects")
    (tmp_path / "out").mkdir()
    (tmp_path / "out" / "old.txt").write_text("x", encoding="utf-8")

    result: Result = run_cli_in(
        tmp_path, ["analyze", "--source-dir", "objects", "--output-dir", "out"]
    )

    assert result.exit_code == ExitCode.PRECONDITION_FAILED
    assert "not empty" in result.output
    assert [p.name for p in (tmp_path / "out").iterdir()] == ["old.txt"]


def test_analyze_requires_output_dir(tmp_path: Path) -> None:
    write_sample_objects(tmp_path / "objects")

    result: Result = run_cli_in(tmp_path, ["analyze", "--source-dir", "objects"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert "output_dir" in result.output


def test_analyze_missing_config_file(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["analyze", "missing.toml"])

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert not (tmp_path / "out").exists()


def test_analyze_missing_source_dir(tmp_path: Path) -> None:
    result: Result = run_cli_in(
        tmp_path, ["analyze", "--source-dir", "nowhere", "--output-dir", "out"]
    )

    assert result.exit_code == ExitCode.CONFIG_ERROR
    assert not (tmp_path / "out").exists()


def test_analyze_malformed_object_aborts(tmp_path: Path) -> None:
    write_sample_objects(tmp_path / "objects")
    write_object_file(tmp_path / "objects", "4.json", {"label": "no pid"})

    result: Result = run_cli_in(
        tmp_path, ["analyze", "--source-dir", "objects", "--output-dir", "out"]
    )

    assert result.exit_code == ExitCode.CLASSIFICATION_ERROR
    assert not list((tmp_path / "out").glob("cmodel-*.json"))


def test_verbose_and_quiet_are_exclusive(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["-v", "-q", "version"])

    assert result.exit_code == ExitCode.USAGE_ERROR


def test_version(tmp_path: Path) -> None:
    result: Result = run_cli_in(tmp_path, ["version"])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.strip()
