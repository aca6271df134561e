from pathlib import Path

import pytest


@pytest.fixture
def docs_tree(tmp_path: Path) -> Path:
    """A small documentation tree: three markdown files, one JSON file, one sub-directory."""
    root = tmp_path / "docs"
    (root / "getting-started").mkdir(parents=True)
    (root / "README.md").write_text(
        "# Main Documentation\n\nWelcome to the project documentation.\n",
        encoding="utf-8",
    )
    (root / "DRAFT.md").write_text("# Draft\n\nWork in progress.\n", encoding="utf-8")
    (root / "config.json").write_text('{"debug": true}\n', encoding="utf-8")
    (root / "getting-started" / "installation.md").write_text(
        "# Installation\n\nRun `pip install docs-toc` to get started.\n",
        encoding="utf-8",
    )
    return root
