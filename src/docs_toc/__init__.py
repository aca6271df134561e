"""docs_toc: build a markdown table of contents for a documentation tree."""

from docs_toc.config import FileEntry, Group, GroupMode, SortMode

__version__ = "0.1.0"
__all__ = ["FileEntry", "Group", "GroupMode", "SortMode", "__version__"]
