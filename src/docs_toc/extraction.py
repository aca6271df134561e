"""Heading and snippet extraction for markdown documents.

Lines are classified by a handful of small predicates; the extractor walks a
file once, taking the first ``#``/``##`` heading as the title and collecting
the first prose lines, stripped of inline markdown, as a snippet.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from docs_toc.config import DEFAULT_SNIPPET_LENGTH
from docs_toc.logging import logger

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

# Order matters: bold before italic so that ``**`` pairs are consumed first.
_INLINE_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"\*\*([^*]*)\*\*"), r"\1"),
    (re.compile(r"\*([^*]*)\*"), r"\1"),
    (re.compile(r"__([^_]*)__"), r"\1"),
    (re.compile(r"_([^_]*)_"), r"\1"),
    (re.compile(r"`([^`]*)`"), r"\1"),
    (re.compile(r"\[([^\]]*)\]\([^)]*\)"), r"\1"),
    (re.compile(r"<[^>]*>"), ""),
]

_HEADING_CANDIDATE = re.compile(r"^#{1,2} (.+)$")
_HORIZONTAL_RULE = re.compile(r"^---+$")
_ORDERED_ITEM = re.compile(r"^[0-9]+\.")
_METADATA_LINE = re.compile(r"^\*\*.*:\*\*")
_HEADING_MARKERS = ("**", "*", "`", "_")
_MARKDOWN_CHARS = frozenset("*_`[<")

ELLIPSIS = "..."


def strip_markdown(text: str) -> str:
    """Remove inline markdown syntax from a line, keeping the readable text.

    Bold, italic (both ``*`` and ``_`` flavours), inline code and links are
    unwrapped; raw HTML tags are dropped. Unbalanced markers are left as-is.

    Args:
        text (str): a single line of markdown

    Returns:
        str: the line without inline markdown syntax
    """
    for pattern, repl in _INLINE_PATTERNS:
        text = pattern.sub(repl, text)
    return text


def clean_heading(text: str) -> str:
    """Delete emphasis and code marker characters from a heading text."""
    for marker in _HEADING_MARKERS:
        text = text.replace(marker, "")
    return text.strip()


def heading_text(line: str) -> str | None:
    """Return the text of a level-1 or level-2 heading line, or None."""
    m = _HEADING_CANDIDATE.match(line)
    return m.group(1) if m else None


def is_heading_candidate(line: str) -> bool:
    return heading_text(line) is not None


def is_blank(line: str) -> bool:
    return not line.strip()


def is_horizontal_rule(line: str) -> bool:
    return _HORIZONTAL_RULE.match(line) is not None


def is_list_item(line: str) -> bool:
    return line.startswith(("-", "*")) or _ORDERED_ITEM.match(line) is not None


def is_metadata_line(line: str) -> bool:
    """Bold label lines such as ``**Status:** draft``."""
    return _METADATA_LINE.match(line) is not None


def is_heading_line(line: str) -> bool:
    return line.startswith("#")


def needs_stripping(line: str) -> bool:
    return any(ch in _MARKDOWN_CHARS for ch in line)


SKIP_PREDICATES = (
    is_blank,
    is_horizontal_rule,
    is_list_item,
    is_metadata_line,
    is_heading_line,
)


def is_skipped(line: str) -> bool:
    """Whether a line never contributes to a snippet."""
    return any(pred(line) for pred in SKIP_PREDICATES)


def truncate_snippet(text: str, max_chars: int) -> str:
    """Trim a collected snippet and cut it to ``max_chars`` plus an ellipsis.

    Args:
        text (str): the raw collected text
        max_chars (int): maximum number of characters kept

    Returns:
        str: the trimmed snippet, suffixed with ``...`` only if it was cut
    """
    snippet = text.strip()
    if len(snippet) > max_chars:
        return snippet[:max_chars] + ELLIPSIS
    return snippet


def extract_heading_and_snippet(
    lines: Iterable[str],
    *,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
    collect_snippet: bool = True,
) -> tuple[str, str]:
    """Extract the heading and a content snippet in a single pass over ``lines``.

    The first line of the form ``# text`` or ``## text`` is the heading; it is
    never part of the snippet. Every other line, from the first one on, is a
    snippet candidate unless a skip predicate matches. Collection stops once the
    buffer holds ``snippet_length`` characters, so ``lines`` is consumed lazily.

    With ``collect_snippet=False`` only the heading is searched and the pass
    ends at the first match.

    Args:
        lines (Iterable[str]): the lines of a document, with or without line endings
        snippet_length (int): maximum snippet length before truncation
        collect_snippet (bool): whether to build a snippet at all

    Returns:
        tuple[str, str]: the heading ("" if none) and the snippet ("" if none)
    """
    heading = ""
    found_heading = False
    parts: list[str] = []
    collected = 0

    for raw in lines:
        line = raw.rstrip("\r\n")

        if not found_heading:
            text = heading_text(line)
            if text is not None:
                heading = clean_heading(text)
                found_heading = True
                if not collect_snippet:
                    break
                continue

        if not collect_snippet:
            continue
        if collected >= snippet_length:
            break
        if is_skipped(line):
            continue

        clean = strip_markdown(line) if needs_stripping(line) else line
        if is_blank(clean):
            continue
        parts.append(clean)
        collected += len(clean) + 1

    return heading, truncate_snippet(" ".join(parts), snippet_length)


def extract_from_file(
    path: Path,
    *,
    snippet_length: int = DEFAULT_SNIPPET_LENGTH,
    collect_snippet: bool = True,
) -> tuple[str, str]:
    """Open ``path`` once and run :func:`extract_heading_and_snippet` over it.

    I/O errors are not caught; an unreadable file aborts the run.
    """
    with path.open(encoding="utf-8", errors="ignore") as f:
        heading, snippet = extract_heading_and_snippet(
            f,
            snippet_length=snippet_length,
            collect_snippet=collect_snippet,
        )
    logger.debug("extracted", path=str(path), heading=heading, snippet_chars=len(snippet))
    return heading, snippet
