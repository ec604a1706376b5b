"""Tests for the record-synth CLI."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from record_synth.cli.app import app

runner = CliRunner()

POINT_SOURCE = """
#[derive(Constructor)]
struct Point {
    x: u8,
    #[unprolix(default)]
    y: u8,
}
"""


@pytest.fixture
def point_file(tmp_path: Path) -> Path:
    path = tmp_path / "point.rs"
    path.write_text(POINT_SOURCE)
    return path


@pytest.mark.parametrize(
    "args",
    [[], ["generate"], ["inspect"]],
    ids=["root", "generate", "inspect"],
)
def test_short_help_flag(args: list[str]) -> None:
    result = runner.invoke(app, [*args, "-h"])
    assert result.exit_code == 0
    assert "Usage" in result.output


def test_generate_prints_code(point_file: Path) -> None:
    result = runner.invoke(app, ["generate", str(point_file)])
    assert result.exit_code == 0
    assert "impl Point {" in result.output
    assert "pub fn new(x: u8) -> Point {" in result.output


def test_generate_forced_kind(point_file: Path) -> None:
    result = runner.invoke(app, ["generate", str(point_file), "--kind", "setters"])
    assert result.exit_code == 0
    assert "pub fn set_x(&mut self, v: u8) {" in result.output
    assert "pub fn new" not in result.output


def test_generate_writes_output_file(point_file: Path, tmp_path: Path) -> None:
    out = tmp_path / "out.rs"
    result = runner.invoke(app, ["generate", str(point_file), "-o", str(out), "--indent", "2"])
    assert result.exit_code == 0
    assert out.read_text().startswith("impl Point {\n  pub fn new(x: u8) -> Point {\n")


def test_generate_reports_errors(tmp_path: Path) -> None:
    bad = tmp_path / "bad.rs"
    bad.write_text("#[derive(Getters)]\nstruct Bad { #[unprolix(as_slice)] n: u8 }\n")
    result = runner.invoke(app, ["generate", str(bad)])
    assert result.exit_code == 1
    assert "Bad.n" in result.output


def test_generate_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["generate", str(tmp_path / "nope.rs")])
    assert result.exit_code == 1


def test_generate_rejects_unknown_kind(point_file: Path) -> None:
    result = runner.invoke(app, ["generate", str(point_file), "--kind", "builder"])
    assert result.exit_code != 0


def test_inspect_lists_records(point_file: Path) -> None:
    result = runner.invoke(app, ["inspect", str(point_file)])
    assert result.exit_code == 0
    assert "Point" in result.output
    assert "default" in result.output
    assert "(1 records)" in result.output


def test_inspect_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(app, ["inspect", str(tmp_path / "nope.rs")])
    assert result.exit_code == 1


def test_generate_reads_stdin() -> None:
    result = runner.invoke(app, ["generate", "-"], input=POINT_SOURCE)
    assert result.exit_code == 0
    assert "pub fn new(x: u8) -> Point {" in result.output


def test_inspect_reads_stdin() -> None:
    result = runner.invoke(app, ["inspect", "-"], input=POINT_SOURCE)
    assert result.exit_code == 0
    assert "Point" in result.output
    assert "(1 records)" in result.output


def test_invalid_indent_setting_exits_cleanly(point_file: Path) -> None:
    result = runner.invoke(app, ["generate", str(point_file)], env={"RECORD_SYNTH_INDENT": "two"})
    assert result.exit_code == 1
    assert "RECORD_SYNTH_INDENT" in result.output
    assert not isinstance(result.exception, ValueError)


def test_invalid_log_level_exits_cleanly(point_file: Path) -> None:
    result = runner.invoke(app, ["--log-level", "loud", "generate", str(point_file)])
    assert result.exit_code == 1
    assert "Unknown log level" in result.output
    assert not isinstance(result.exception, ValueError)


@pytest.mark.parametrize("width", ["0", "-2"])
def test_generate_rejects_non_positive_indent(point_file: Path, width: str) -> None:
    result = runner.invoke(app, ["generate", str(point_file), "--indent", width])
    assert result.exit_code == 2
