"""Shared fixtures for core unit tests"""

import pytest

from adrpub.core.models import ParsedDocument
from adrpub.core.tree import make_parser


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser("commonmark")


@pytest.fixture(name="gfm_parser")
def gfm_parser_fixture():
    return make_parser("gfm-like")


@pytest.fixture(name="adrs")
def adrs_fixture():
    """Unsorted documents, including the index document in the middle."""
    return [
        ParsedDocument(name="b.md", status="Superseded", date="26-03-2024"),
        ParsedDocument(name="index.md"),
        ParsedDocument(name="a.md", status="Accepted", date="26-03-2024"),
        ParsedDocument(name="c.md", status="Rejected", date="26-03-2024"),
    ]
