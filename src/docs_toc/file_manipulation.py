from __future__ import annotations

import fnmatch
import os
from datetime import date, datetime
from pathlib import Path
from typing import TYPE_CHECKING

from docs_toc.config import SortMode
from docs_toc.exceptions import DocsDirectoryNotFoundError
from docs_toc.logging import logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from docs_toc.settings import Settings

KIB = 1024
MIB = 1024 * 1024


def relpath(path: Path, root: Path) -> str:
    """Send the relative path of path from root.

    Args:
        path (Path): the path to "relativise"
        root (Path): the root to relativise from

    Returns:
        str: the relative path from root to path, with POSIX separators.
            If path is not under root, returns the original path as a string.
    """
    try:
        return path.relative_to(root).as_posix()
    except ValueError:
        return path.as_posix()


def ensure_directory(root: Path) -> None:
    """Raise DocsDirectoryNotFoundError unless ``root`` is an existing directory."""
    if not root.is_dir():
        raise DocsDirectoryNotFoundError(directory=root)


def walk_files(root: Path, max_depth: int | None = None) -> list[Path]:
    """Walk the directory tree rooted at `root` and return a list of all files.

    Directories and files are visited in sorted order so that repeated runs over
    an unchanged tree enumerate files identically. A file directly under `root`
    has depth 1, a file in a sub-directory depth 2, and so on.

    Args:
        root (Path): the root directory to walk
        max_depth (int | None): deepest file level to keep; None means unlimited

    Raises:
        DocsDirectoryNotFoundError: if `root` does not exist or is not a directory

    Returns:
        list[Path]: the files found, joined onto `root` (not resolved)
    """
    ensure_directory(root)
    results: list[Path] = []
    for dirpath, dirs, files in os.walk(root):
        current = Path(dirpath)
        depth = len(current.relative_to(root).parts) + 1
        if max_depth is not None and depth >= max_depth:
            dirs[:] = []
        else:
            dirs.sort()
        for name in sorted(files):
            p = current / name
            if p.is_file():
                results.append(p)
    return results


def normalize_patterns(patterns: Sequence[str]) -> list[str]:
    """Normalize include/exclude patterns.

    Strip whitespace, drop empty patterns and replace backslashes with forward slashes.

    Args:
        patterns (Sequence[str]): the patterns to normalize

    Returns:
        list[str]: the normalized patterns
    """
    out: list[str] = []
    for pat in patterns:
        pat2 = (pat or "").strip()
        if not pat2:
            continue
        out.append(pat2.replace("\\", "/"))
    return out


def matches_pattern(path: Path, pattern: str) -> bool:
    """Check a path against one include/exclude pattern.

    Two matching modes coexist: a plain substring test against the full POSIX
    path (``api/`` matches ``docs/api/index.md``) and a glob test against the
    basename only (``*.json`` matches ``docs/config.json``).

    Args:
        path (Path): the candidate file path
        pattern (str): the pattern

    Returns:
        bool: True if either mode matches
    """
    return pattern in path.as_posix() or fnmatch.fnmatch(path.name, pattern)


def match_any_pattern(path: Path, patterns: Sequence[str]) -> bool:
    return any(matches_pattern(path, pat) for pat in patterns)


def apply_filters(
    files: Sequence[Path],
    includes: Sequence[str],
    excludes: Sequence[str],
) -> list[Path]:
    """Apply include/exclude patterns to a list of files.

    - A file matching any exclude pattern is dropped, even if it is also included.
    - If `includes` is non-empty, a file must match at least one include pattern.
    - If `includes` is empty, every non-excluded file is kept.

    Args:
        files (Sequence[Path]): the list of file paths to filter
        includes (Sequence[str]): include patterns
        excludes (Sequence[str]): exclude patterns

    Returns:
        list[Path]: the surviving files, in their original order
    """
    inc = normalize_patterns(includes)
    exc = normalize_patterns(excludes)

    out: list[Path] = []
    for f in files:
        if exc and match_any_pattern(f, exc):
            continue
        if inc and not match_any_pattern(f, inc):
            continue
        out.append(f)
    return out


def sort_files(files: Sequence[Path], sort_mode: SortMode) -> list[Path]:
    """Order files for the table of contents.

    Files are first put in path order; the date and size modes then apply a
    stable descending sort on top, so ties keep path order.

    Args:
        files (Sequence[Path]): the files to sort
        sort_mode (SortMode): NAME (path ascending), DATE (newest first) or SIZE (largest first)

    Returns:
        list[Path]: the sorted files
    """
    by_name = sorted(files, key=lambda p: p.as_posix())
    if sort_mode is SortMode.DATE:
        return sorted(by_name, key=lambda p: p.stat().st_mtime, reverse=True)
    if sort_mode is SortMode.SIZE:
        return sorted(by_name, key=lambda p: p.stat().st_size, reverse=True)
    return by_name


def enumerate_files(settings: Settings) -> list[Path]:
    """Walk, filter and sort the documentation files selected by `settings`.

    Args:
        settings (Settings): the run configuration

    Raises:
        DocsDirectoryNotFoundError: if the documentation directory does not exist

    Returns:
        list[Path]: the ordered candidate files
    """
    root = settings.directory
    found = walk_files(root, max_depth=settings.max_depth)
    selected = apply_filters(found, includes=settings.include, excludes=settings.exclude)
    ordered = sort_files(selected, settings.sort)
    logger.info(
        "enumerated files",
        directory=str(root),
        found=len(found),
        selected=len(ordered),
        sort=str(settings.sort),
    )
    return ordered


def resolve_metadata(path: Path) -> tuple[int, date]:
    """Return the size in bytes and the local modification date of a file.

    Args:
        path (Path): the file to inspect

    Returns:
        tuple[int, date]: the byte size and the calendar date of the last modification
    """
    st = path.stat()
    return st.st_size, datetime.fromtimestamp(st.st_mtime).date()  # noqa: DTZ006


def format_size(size: int) -> str:
    """Format a byte count as ``<n>B``, ``<n>KB`` or ``<n>MB`` (integer division).

    Args:
        size (int): the size in bytes

    Returns:
        str: the human readable size
    """
    if size < KIB:
        return f"{size}B"
    if size < MIB:
        return f"{size // KIB}KB"
    return f"{size // MIB}MB"
