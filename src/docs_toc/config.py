from __future__ import annotations

from datetime import date  # noqa: TC003
from enum import StrEnum, auto
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, computed_field

DEFAULT_DIRECTORY = "docs"
DEFAULT_TITLE = "Documentation Table of Contents"
DEFAULT_SNIPPET_LENGTH = 200
NO_EXTENSION = "no-extension"
MARKDOWN_EXTENSION = "md"


class SortMode(StrEnum):
    """Order in which enumerated files are listed.

    - NAME: lexicographic path order, ascending.
    - DATE: modification time, newest first.
    - SIZE: byte size, largest first.
    """

    NAME = auto()
    DATE = auto()
    SIZE = auto()


class GroupMode(StrEnum):
    """How file entries are bucketed before rendering."""

    DIRECTORY = auto()
    TYPE = auto()
    NONE = auto()


def title_from_filename(name: str, *, strip_extension: bool = True) -> str:
    """Derive a display title from a file or directory name.

    The last extension is stripped, hyphens become spaces and the first letter of
    each word is upper-cased (the rest of the word is left untouched).

    Args:
        name (str): a file name such as ``getting-started.md`` or a directory name
        strip_extension (bool): drop the last suffix first (off for directory names)

    Returns:
        str: the title, e.g. ``Getting Started``; the raw name if nothing is left
    """
    stem = Path(name).stem if strip_extension else name
    words = stem.replace("-", " ").split()
    title = " ".join(w[:1].upper() + w[1:] for w in words)
    return title or name


class FileEntry(BaseModel):
    """One discovered documentation file, as listed in the table of contents.

    Attributes:
        path: Path as enumerated (scan root joined with the relative path).
        rel: Path relative to the scan root, with POSIX separators.
        heading: First level-1/level-2 heading of a markdown file ("" if none).
        snippet: Markdown-stripped excerpt of the first prose lines ("" if none).
        size: File size in bytes, only resolved for full-mode rendering.
        mod_time: Modification date, resolved together with ``size``.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    path: Path = Field(..., description="File path as enumerated")
    rel: str = Field(..., description="File path relative to the scan root")
    heading: str = Field("", description="Extracted heading")
    snippet: str = Field("", description="Extracted content excerpt")
    size: int | None = Field(default=None, ge=0, description="File size in bytes")
    mod_time: date | None = Field(default=None, description="Modification date")

    @computed_field
    @property
    def extension(self) -> str:
        """Final suffix of the file name without the dot, or ``no-extension``."""
        return self.path.suffix[1:] or NO_EXTENSION

    @computed_field
    @property
    def is_markdown(self) -> bool:
        """Whether the file is a markdown document."""
        return self.extension == MARKDOWN_EXTENSION

    @computed_field
    @property
    def title(self) -> str:
        """Display title: the heading, else a name derived from the file name."""
        if self.heading:
            return self.heading
        if self.is_markdown:
            return title_from_filename(self.path.name)
        return self.path.name

    @property
    def link(self) -> str:
        """Link target used in the rendered document."""
        return self.path.as_posix()


class Group(BaseModel):
    """A named bucket of file entries.

    Attributes:
        key: Grouping discriminator (relative directory, lower-cased extension, or "").
        label: Human readable group name used in the group heading.
        depth: Nesting level of a directory group below the scan root.
        entries: Entries in enumeration order.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: str
    label: str = ""
    depth: int = Field(default=0, ge=0)
    entries: list[FileEntry] = Field(default_factory=list)
