"""Root test configuration: a throwaway ADR content tree"""

from pathlib import Path

import pytest


TEMPLATE = "<nav>{{LIST_ADRS}}</nav><main>{{ADR_CONTENT}}</main>"


@pytest.fixture(name="content_dir")
def content_dir_fixture(tmp_path) -> Path:
    """content/{src,files,template.html} with an index and two ADRs."""
    root = tmp_path / "content"
    src = root / "src"
    files = root / "files"
    src.mkdir(parents=True)
    files.mkdir()

    (root / "template.html").write_text(TEMPLATE)
    (files / "style.css").write_text("body { margin: 0; }\n")
    (src / "index.md").write_text("# ADRs\n")
    (src / "b.md").write_text("# B\n\nStatus: Superseded\n\nDate: 2024-03-27\n")
    (src / "a.md").write_text("# A\n\nStatus: Accepted\n\nDate: 2024-03-26\n\nSome **context**.\n")
    return root
