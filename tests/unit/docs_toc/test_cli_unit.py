from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from docs_toc import __version__, cli
from docs_toc.config import GroupMode, SortMode
from docs_toc.exceptions import InvalidOptionError

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@pytest.mark.unit
def test_parse_args_parses_modes_and_patterns() -> None:
    settings = cli.parse_args(
        [
            "--dir",
            "handbook",
            "--sort",
            "size",
            "--group-by",
            "type",
            "--include",
            "*.md,*.txt",
            "--exclude",
            "DRAFT.md",
            "--max-depth",
            "2",
            "--snippet-length",
            "80",
            "--title",
            "Handbook",
            "--simple",
            "--quiet",
        ],
    )

    assert settings.directory == Path("handbook")
    assert settings.sort is SortMode.SIZE
    assert settings.group_by is GroupMode.TYPE
    assert settings.include == ["*.md", "*.txt"]
    assert settings.exclude == ["DRAFT.md"]
    assert settings.max_depth == 2
    assert settings.snippet_length == 80
    assert settings.title == "Handbook"
    assert settings.simple is True
    assert settings.quiet is True


@pytest.mark.unit
def test_parse_args_repeatable_patterns() -> None:
    settings = cli.parse_args(["--exclude", "a.md", "--exclude", "b.md"])

    assert settings.exclude == ["a.md", "b.md"]


@pytest.mark.unit
def test_parse_args_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.parse_args(["--version"])

    assert exc_info.value.code == 0
    assert __version__ in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.parametrize("argv", [["--sort", "random"], ["--group-by", "author"]])
def test_parse_args_rejects_unknown_modes(argv: list[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        cli.parse_args(argv)

    assert exc_info.value.code == 2


@pytest.mark.unit
def test_parse_args_rejects_bad_max_depth() -> None:
    with pytest.raises(InvalidOptionError) as exc_info:
        cli.parse_args(["--max-depth", "0"])

    assert exc_info.value.option == "max_depth"


@pytest.mark.unit
def test_main_missing_directory_fails_without_output(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = tmp_path / "toc.md"

    exit_code = cli.main(["--dir", str(tmp_path / "missing"), "--output", str(output)])

    assert exit_code == 1
    assert not output.exists()
    assert "Documentation directory not found" in capsys.readouterr().err


@pytest.mark.unit
def test_main_writes_to_stdout_by_default(docs_tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = cli.main(["--dir", str(docs_tree), "--simple"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("# Documentation Table of Contents\n")
    assert "Table of contents generated" not in out


@pytest.mark.unit
def test_main_reports_written_file_unless_quiet(docs_tree: Path, capsys: pytest.CaptureFixture[str]) -> None:
    output = docs_tree.parent / "toc.md"

    assert cli.main(["--dir", str(docs_tree), "--output", str(output)]) == 0
    assert f"Table of contents generated: {output}" in capsys.readouterr().out

    assert cli.main(["--dir", str(docs_tree), "--output", str(output), "--quiet"]) == 0
    assert capsys.readouterr().out == ""


@pytest.mark.unit
def test_main_uses_generate_pipeline(tmp_path: Path, mocker: MockerFixture) -> None:
    generate = mocker.patch.object(cli, "generate", return_value="# TOC\n")
    output = tmp_path / "toc.md"

    exit_code = cli.main(["--output", str(output), "--quiet"])

    assert exit_code == 0
    generate.assert_called_once()
    assert output.read_text(encoding="utf-8") == "# TOC\n"
