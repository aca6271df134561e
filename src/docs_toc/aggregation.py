from __future__ import annotations

from typing import TYPE_CHECKING

from docs_toc.config import NO_EXTENSION, FileEntry, Group, GroupMode, title_from_filename
from docs_toc.exceptions import InvalidOptionError
from docs_toc.extraction import extract_from_file
from docs_toc.file_manipulation import relpath, resolve_metadata
from docs_toc.logging import logger

if TYPE_CHECKING:
    from collections.abc import Sequence
    from pathlib import Path

    from docs_toc.settings import Settings

TOP_HEADING_LEVEL = 2
NESTED_HEADING_OFFSET = 3
MAX_HEADING_LEVEL = 6
ROOT_KEY = "."


def heading_level(depth: int) -> int:
    """Map a directory nesting depth to a markdown heading level.

    Depth 0 (the scan root and its direct sub-directories) is a level-2 heading;
    deeper directories use ``depth + 3``, capped at level 6.

    Args:
        depth (int): number of separators in the directory path relative to the scan root

    Raises:
        ValueError: if `depth` is negative

    Returns:
        int: a heading level between 2 and 6 inclusive
    """
    if depth < 0:
        msg = f"depth must be >= 0, got {depth}"
        raise ValueError(msg)
    if depth == 0:
        return TOP_HEADING_LEVEL
    return min(depth + NESTED_HEADING_OFFSET, MAX_HEADING_LEVEL)


def make_entry(path: Path, root: Path, settings: Settings) -> FileEntry:
    """Build the FileEntry of one file.

    Markdown files are read once for their heading (and snippet when snippets are
    shown); size and date are only looked up for full-mode rendering.

    Args:
        path (Path): the enumerated file
        root (Path): the scan root
        settings (Settings): the run configuration

    Returns:
        FileEntry: the populated entry
    """
    heading = snippet = ""
    if path.suffix == ".md":
        heading, snippet = extract_from_file(
            path,
            snippet_length=settings.snippet_length,
            collect_snippet=settings.include_snippets,
        )
    size = mod_time = None
    if not settings.simple:
        size, mod_time = resolve_metadata(path)
    return FileEntry(
        path=path,
        rel=relpath(path, root),
        heading=heading,
        snippet=snippet,
        size=size,
        mod_time=mod_time,
    )


def directory_key(entry: FileEntry) -> str:
    """Relative directory of an entry, ``"."`` for files directly under the root."""
    parent, sep, _ = entry.rel.rpartition("/")
    return parent if sep else ROOT_KEY


def directory_label(key: str, root: Path) -> str:
    name = root.resolve().name if key == ROOT_KEY else key.rsplit("/", 1)[-1]
    return title_from_filename(name, strip_extension=False)


def group_by_directory(entries: Sequence[FileEntry], root: Path) -> list[Group]:
    """Group entries by containing directory, in order of first appearance.

    Args:
        entries (Sequence[FileEntry]): entries in enumeration order
        root (Path): the scan root, used to label the root group

    Returns:
        list[Group]: one group per directory
    """
    groups: dict[str, Group] = {}
    for entry in entries:
        key = directory_key(entry)
        group = groups.get(key)
        if group is None:
            depth = 0 if key == ROOT_KEY else key.count("/")
            group = Group(key=key, label=directory_label(key, root), depth=depth)
            groups[key] = group
        group.entries.append(entry)
    return list(groups.values())


def type_label(key: str) -> str:
    return "No Extension" if key == NO_EXTENSION else key.upper()


def group_by_type(entries: Sequence[FileEntry]) -> list[Group]:
    """Group entries by lower-cased extension, groups sorted by extension.

    Args:
        entries (Sequence[FileEntry]): entries in enumeration order

    Returns:
        list[Group]: one group per extension; entries keep their relative order
    """
    groups: dict[str, Group] = {}
    for entry in entries:
        key = entry.extension.lower()
        if key not in groups:
            groups[key] = Group(key=key, label=type_label(key))
        groups[key].entries.append(entry)
    return [groups[k] for k in sorted(groups)]


def group_flat(entries: Sequence[FileEntry]) -> list[Group]:
    return [Group(key="", entries=list(entries))]


def aggregate(paths: Sequence[Path], root: Path, settings: Settings) -> list[Group]:
    """Build entries for `paths` and bucket them according to ``settings.group_by``.

    Args:
        paths (Sequence[Path]): the ordered files from the enumerator
        root (Path): the scan root
        settings (Settings): the run configuration

    Raises:
        InvalidOptionError: if the grouping mode is not supported

    Returns:
        list[Group]: the groups to render, each file in exactly one group
    """
    mode = settings.group_by
    if mode not in set(GroupMode):
        raise InvalidOptionError(option="group_by", value=mode)

    entries = [make_entry(p, root, settings) for p in paths]
    logger.info("aggregating entries", entries=len(entries), group_by=str(mode))

    if mode is GroupMode.TYPE:
        return group_by_type(entries)
    if mode is GroupMode.NONE:
        return group_flat(entries)
    return group_by_directory(entries, root)
