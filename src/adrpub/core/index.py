"""Navigation index: sorted <ul> list of every ADR except the index document"""

from typing import Iterable

from adrpub.core.models import IndexEntry, ParsedDocument
from adrpub.core.utils.names import strip_ext, swap_ext


INDEX_NAME = 'index.md'


def build_index_entries(
    docs: Iterable[ParsedDocument],
    index_name: str = INDEX_NAME,
    source_ext: str = '.md',
    output_ext: str = '.html',
    ) -> list[IndexEntry]:
    """One IndexEntry per document, sorted case-sensitively by name, index document skipped."""
    return [
        IndexEntry(
            display_name=strip_ext(doc.name, source_ext),
            href=swap_ext(doc.name, source_ext, output_ext),
            status=doc.status,
        )
        for doc in sorted(docs, key=lambda d: d.name)
        if doc.name != index_name
    ]


def render_index(entries: Iterable[IndexEntry]) -> str:
    items = ''.join(
        f'<li><a href="{e.href}">[{e.status}]{e.display_name}</a></li>' for e in entries
    )
    return f'<ul>{items}</ul>'


def build_index(
    docs: Iterable[ParsedDocument],
    index_name: str = INDEX_NAME,
    source_ext: str = '.md',
    output_ext: str = '.html',
    ) -> str:
    """Render the shared index fragment for a set of parsed documents."""
    return render_index(build_index_entries(docs, index_name, source_ext, output_ext))
