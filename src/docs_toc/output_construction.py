from __future__ import annotations

import io
from datetime import date
from typing import TYPE_CHECKING

from docs_toc.aggregation import TOP_HEADING_LEVEL, heading_level
from docs_toc.config import GroupMode
from docs_toc.file_manipulation import format_size

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docs_toc.config import FileEntry, Group
    from docs_toc.settings import Settings

CLOSED_FOLDER = "📁"
OPEN_FOLDER = "📂"
FILE_GLYPH = "📄"


def group_heading(group: Group, group_by: GroupMode) -> str:
    """Render the heading line of a group (without trailing newline).

    Args:
        group (Group): the group
        group_by (GroupMode): the grouping mode that produced the group

    Returns:
        str: the heading, or "" when groups are not titled (``GroupMode.NONE``)
    """
    if group_by is GroupMode.NONE:
        return ""
    if group_by is GroupMode.TYPE:
        return f"{'#' * TOP_HEADING_LEVEL} {FILE_GLYPH} {group.label}"
    glyph = CLOSED_FOLDER if group.depth == 0 else OPEN_FOLDER
    return f"{'#' * heading_level(group.depth)} {glyph} {group.label}"


def simple_entry(entry: FileEntry) -> str:
    return f"- [{entry.title}]({entry.link})\n"


def full_entry(entry: FileEntry, *, include_snippets: bool) -> str:
    """Render a full-mode entry: bold title, optional snippet, metadata line.

    Markdown entries are linked and show size and modification date; other
    files show a plain bold name and their size only.
    """
    size = format_size(entry.size or 0)
    if not entry.is_markdown:
        return f"- **{entry.title}**  \n  *{size}*\n\n"

    out = io.StringIO()
    out.write(f"- **[{entry.title}]({entry.link})**  \n")
    if include_snippets and entry.snippet:
        out.write(f"  {entry.snippet}  \n")
    modified = entry.mod_time.isoformat() if entry.mod_time else ""
    out.write(f"  *{size} • Modified: {modified}*\n\n")
    return out.getvalue()


def build_toc(
    groups: Sequence[Group],
    *,
    settings: Settings,
    generated: date | None = None,
) -> str:
    """Build the table of contents markdown document.

    The document starts with the title; full mode adds the generation date, a
    file count summary and a separator. Each group gets a heading (except in
    ``none`` grouping) followed by its entries, rendered either as a one-line
    link list (simple mode) or as bold titles with snippet and metadata.

    Args:
        groups (Sequence[Group]): the aggregated groups, in display order
        settings (Settings): configuration settings, including:
            - title: the document title
            - simple: whether to render the reduced link list
            - group_by: the grouping mode used to build `groups`
            - include_snippets: whether snippets are shown
        generated (date | None): generation date for the header; today when None

    Returns:
        str: the generated markdown document, ending with a single newline
    """
    out = io.StringIO()
    out.write(f"# {settings.title}\n\n")

    if not settings.simple:
        entries = [e for g in groups for e in g.entries]
        md_count = sum(1 for e in entries if e.is_markdown)
        out.write(f"Generated: {(generated or date.today()).isoformat()}\n\n")  # noqa: DTZ011
        out.write(f"Total files: {len(entries)} ({md_count} markdown files)\n\n")
        out.write("---\n\n")

    for group in groups:
        heading = group_heading(group, settings.group_by)
        if heading:
            out.write(f"{heading}\n\n")
        for entry in group.entries:
            if settings.simple:
                out.write(simple_entry(entry))
            else:
                out.write(full_entry(entry, include_snippets=settings.include_snippets))
        out.write("\n")

    return out.getvalue().rstrip() + "\n"
