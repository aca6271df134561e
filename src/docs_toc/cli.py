"""docs_toc: generate a table of contents for a documentation directory.

Usage
-----
Run `python -m docs_toc.cli --help` for full options. Common examples:
    - Print the table of contents of ./docs:
        docs-toc

    - Write it to a file, grouped by file type, newest files first:
        docs-toc --output docs/INDEX.md --group-by type --sort date

    - Minimal link list of markdown files, skipping drafts:
        docs-toc --simple --include "*.md" --exclude DRAFT.md
"""

from __future__ import annotations

import argparse
import sys
from typing import TYPE_CHECKING

from pydantic import ValidationError

from docs_toc import __version__
from docs_toc.aggregation import aggregate
from docs_toc.config import GroupMode, SortMode
from docs_toc.exceptions import DocsTocError, InvalidOptionError
from docs_toc.file_manipulation import enumerate_files
from docs_toc.logging import logger, setup_logging
from docs_toc.output_construction import build_toc
from docs_toc.settings import Settings

if TYPE_CHECKING:
    from collections.abc import Sequence


class _PatternListAction(argparse.Action):
    """Append comma separated patterns, so ``--exclude a,b`` equals ``--exclude a --exclude b``."""

    def __call__(self, parser, namespace, values, option_string=None) -> None:  # noqa: ANN001, ARG002
        items = list(getattr(namespace, self.dest, None) or [])
        items.extend(v.strip() for v in str(values).split(",") if v.strip())
        setattr(namespace, self.dest, items)


def parse_args(argv: Sequence[str] | None = None) -> Settings:
    p = argparse.ArgumentParser(
        prog="docs-toc",
        description="Generate a table of contents for all documentation files.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-d", "--dir", dest="directory", type=str, default=None, help="Documentation directory (default: docs).")
    p.add_argument("-o", "--output", type=str, default=None, help="Write output to FILE instead of stdout.")
    p.add_argument("-s", "--simple", action="store_true", help="Simple mode (only paths and titles, no metadata).")
    p.add_argument(
        "--include",
        action=_PatternListAction,
        default=[],
        help="Include pattern: path substring or basename glob (repeatable).",
    )
    p.add_argument(
        "--exclude",
        action=_PatternListAction,
        default=[],
        help="Exclude pattern, wins over --include (repeatable).",
    )
    p.add_argument("--max-depth", type=int, default=None, help="Maximum directory depth to scan.")
    p.add_argument(
        "--sort",
        choices=[m.value for m in SortMode],
        default=SortMode.NAME.value,
        help="Sort files by name, date (newest first) or size (largest first).",
    )
    p.add_argument(
        "--group-by",
        choices=[m.value for m in GroupMode],
        default=GroupMode.DIRECTORY.value,
        help="Group files by directory, by type, or not at all.",
    )
    p.add_argument("--snippet-length", type=int, default=None, help="Maximum snippet length (default: 200).")
    p.add_argument("--no-snippets", action="store_true", help="Only extract headings.")
    p.add_argument("--title", type=str, default=None, help="Custom document title.")
    p.add_argument("-q", "--quiet", action="store_true", help="Suppress progress messages.")
    p.add_argument("--log-file", type=str, default="", help="Log file path.")
    args = p.parse_args(argv)

    # unset options fall back to the Settings defaults (which read the environment)
    values = {k: v for k, v in vars(args).items() if v is not None}
    try:
        return Settings(**values)
    except ValidationError as e:
        err = e.errors()[0]
        option = str(err["loc"][0]) if err["loc"] else "settings"
        raise InvalidOptionError(option=option, value=err.get("input"), message=err["msg"]) from e


def generate(settings: Settings) -> str:
    """Run the whole pipeline (enumerate, aggregate, render) for `settings`.

    Args:
        settings (Settings): the run configuration

    Raises:
        DocsDirectoryNotFoundError: if the documentation directory does not exist

    Returns:
        str: the table of contents document
    """
    logger.info("scanning documentation", directory=str(settings.directory))
    files = enumerate_files(settings)
    groups = aggregate(files, settings.directory, settings)
    return build_toc(groups, settings=settings)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = parse_args(argv)
        setup_logging(settings.log_file or None, quiet=settings.quiet, force=True)
        content = generate(settings)
    except DocsTocError as e:
        logger.error("table of contents generation failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if settings.output is None:
        sys.stdout.write(content)
        return 0

    settings.output.write_text(content, encoding="utf-8")
    logger.info("wrote table of contents", output=str(settings.output))
    if not settings.quiet:
        print(f"Table of contents generated: {settings.output}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
