from __future__ import annotations

import pathlib
from typing import TYPE_CHECKING

from mdocgen import cli

if TYPE_CHECKING:
    from click.testing import CliRunner

_DESCRIPTION = """\
name: prog
description: A demonstration program.
author: Jane Doe
path: prog.1
header_path: prog.header
footer_path: prog.footer
flags:
  - {long: verbose, short: v, doc: Enable verbose output}
subcommands:
  - name: build
    description: Build things
"""


def _write_description(tmp_path: pathlib.Path, content: str = _DESCRIPTION) -> pathlib.Path:
    path = tmp_path / "prog.yaml"
    path.write_text(content)
    return path


def test_render_writes_files_next_to_description(
    runner: CliRunner, tmp_path: pathlib.Path
) -> None:
    desc = _write_description(tmp_path)

    result = runner.invoke(cli.cli, ["render", str(desc)])

    assert result.exit_code == 0, result.output
    body = (tmp_path / "prog.1").read_text()
    assert body.startswith(".Nm\n.Op Fl -verbose | -v\n")
    assert ".It Ic build\nBuild things.\n" in body
    assert (tmp_path / "prog.header").read_text().endswith(".Nd A demonstration program.")
    assert (tmp_path / "prog.footer").read_text() == ".Sh AUTHORS\nJane Doe"


def test_render_stdout_writes_no_files(runner: CliRunner, tmp_path: pathlib.Path) -> None:
    desc = _write_description(tmp_path)

    result = runner.invoke(cli.cli, ["render", str(desc), "--stdout"])

    assert result.exit_code == 0, result.output
    assert result.output.startswith(".Nm\n.Op Fl -verbose | -v\n")
    assert sorted(p.name for p in tmp_path.iterdir()) == ["prog.yaml"]


def test_render_command_line_paths_override_description(
    runner: CliRunner, tmp_path: pathlib.Path
) -> None:
    desc = _write_description(tmp_path, "name: prog\nauthor: Jane Doe\n")
    out_dir = tmp_path / "out"
    out_dir.mkdir()

    result = runner.invoke(
        cli.cli,
        [
            "render",
            str(desc),
            "--output",
            str(out_dir / "prog.1"),
            "--footer",
            str(out_dir / "footer"),
        ],
    )

    assert result.exit_code == 0, result.output
    assert sorted(p.name for p in out_dir.iterdir()) == ["footer", "prog.1"]


def test_render_without_outputs_fails(runner: CliRunner, tmp_path: pathlib.Path) -> None:
    desc = _write_description(tmp_path, "name: prog\n")

    result = runner.invoke(cli.cli, ["render", str(desc)])

    assert result.exit_code == 1
    assert "No output paths configured" in result.output


def test_render_body_failure_skips_header_and_footer(
    runner: CliRunner, tmp_path: pathlib.Path
) -> None:
    desc = _write_description(tmp_path)
    missing = tmp_path / "missing" / "prog.1"

    result = runner.invoke(cli.cli, ["render", str(desc), "--output", str(missing)])

    assert result.exit_code == 1
    assert f"couldn't create {missing}" in result.output
    assert "skipped: header, footer" in result.output
    assert not (tmp_path / "prog.header").exists()
    assert not (tmp_path / "prog.footer").exists()


def test_render_keep_going_writes_other_targets(
    runner: CliRunner, tmp_path: pathlib.Path
) -> None:
    desc = _write_description(tmp_path)
    missing = tmp_path / "missing" / "prog.1"

    result = runner.invoke(
        cli.cli, ["render", str(desc), "--output", str(missing), "--keep-going"]
    )

    assert result.exit_code == 1
    assert (tmp_path / "prog.header").exists()
    assert (tmp_path / "prog.footer").exists()


def test_render_invalid_description_shows_tip(runner: CliRunner, tmp_path: pathlib.Path) -> None:
    desc = _write_description(tmp_path, "name: prog\nunknown_key: 1\n")

    result = runner.invoke(cli.cli, ["render", str(desc)])

    assert result.exit_code == 1
    assert "unknown_key" in result.output
    assert "Tip: Run 'mdocgen schema'" in result.output


def test_render_missing_description(runner: CliRunner, tmp_path: pathlib.Path) -> None:
    result = runner.invoke(cli.cli, ["render", str(tmp_path / "nope.yaml")])

    assert result.exit_code == 1
    assert "file not found" in result.output
