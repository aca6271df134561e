from __future__ import annotations

import os
from pathlib import Path

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, ConfigDict, Field, computed_field

from docs_toc.config import DEFAULT_DIRECTORY, DEFAULT_SNIPPET_LENGTH, DEFAULT_TITLE, GroupMode, SortMode

ENV_FILE = find_dotenv(usecwd=True)
if ENV_FILE:
    load_dotenv(ENV_FILE)


class Settings(BaseModel):
    """Configuration settings for one docs_toc run.

    Built once (usually by ``cli.parse_args``) and passed explicitly to every
    pipeline stage.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    directory: Path = Field(
        default_factory=lambda: Path(os.environ.get("DOCS_TOC_DIRECTORY", DEFAULT_DIRECTORY)),
        description="Documentation root to scan.",
    )
    output: Path | None = Field(default=None, description="Output file (stdout when unset).")
    include: list[str] = Field(default_factory=list, description="Include patterns.")
    exclude: list[str] = Field(default_factory=list, description="Exclude patterns.")
    max_depth: int | None = Field(default=None, ge=1, description="Maximum directory depth.")
    sort: SortMode = Field(default=SortMode.NAME, description="File sort order.")
    group_by: GroupMode = Field(default=GroupMode.DIRECTORY, description="Grouping mode.")
    snippet_length: int = Field(
        default=DEFAULT_SNIPPET_LENGTH,
        ge=1,
        description="Maximum snippet length in characters.",
    )
    no_snippets: bool = Field(default=False, description="Do not extract snippets.")
    title: str = Field(
        default_factory=lambda: os.environ.get("DOCS_TOC_TITLE", DEFAULT_TITLE),
        description="Document title.",
    )
    simple: bool = Field(default=False, description="Only paths and titles, no metadata.")
    quiet: bool = Field(default=False, description="Suppress progress messages.")
    log_file: str = Field(default="", description="Log file path.")

    @computed_field
    @property
    def include_snippets(self) -> bool:
        """Whether snippets are extracted and rendered."""
        return not self.no_snippets and not self.simple
