from datetime import date
from pathlib import Path

import pytest
from pydantic import ValidationError

from docs_toc.config import FileEntry, title_from_filename


@pytest.mark.unit
@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("fallback-test.md", "Fallback Test"),
        ("getting-started.md", "Getting Started"),
        ("API-reference.md", "API Reference"),
        ("notes.v2.md", "Notes.v2"),
        ("plain", "Plain"),
    ],
)
def test_title_from_filename(name: str, expected: str) -> None:
    assert title_from_filename(name) == expected


@pytest.mark.unit
def test_title_from_directory_name_keeps_dots() -> None:
    assert title_from_filename("release-1.2", strip_extension=False) == "Release 1.2"


@pytest.mark.unit
def test_file_entry_derived_fields() -> None:
    entry = FileEntry(path=Path("docs/fallback-test.md"), rel="fallback-test.md")

    assert entry.extension == "md"
    assert entry.is_markdown
    assert entry.title == "Fallback Test"
    assert entry.link == "docs/fallback-test.md"


@pytest.mark.unit
def test_file_entry_prefers_heading() -> None:
    entry = FileEntry(path=Path("docs/readme.md"), rel="readme.md", heading="Main Documentation")

    assert entry.title == "Main Documentation"


@pytest.mark.unit
def test_file_entry_without_extension() -> None:
    entry = FileEntry(path=Path("docs/Makefile"), rel="Makefile", size=3, mod_time=date(2024, 1, 1))

    assert entry.extension == "no-extension"
    assert not entry.is_markdown
    assert entry.title == "Makefile"


@pytest.mark.unit
def test_file_entry_is_immutable() -> None:
    entry = FileEntry(path=Path("docs/a.md"), rel="a.md")

    with pytest.raises(ValidationError):
        entry.heading = "changed"
