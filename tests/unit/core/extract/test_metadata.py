"""Unit tests for core/extract/metadata.py"""

import pytest

from adrpub.core.extract.metadata import extract_date, extract_field, extract_metadata, extract_status
from adrpub.core.models import ExtractedMetadata


def test_extract_status_from_content():
    """status label is captured, trimmed, and removed with its whitespace."""
    status, body = extract_status("some values status:     Accepted")
    assert status == "Accepted"
    assert body == "some values"


@pytest.mark.parametrize("content", [
    "some values StaTus:     Accepted",
    "some values STATUS: Accepted",
    "some values status:Accepted   ",
])
def test_extract_status_case_insensitive(content):
    """Label matching ignores case and surrounding whitespace."""
    status, body = extract_status(content)
    assert status == "Accepted"
    assert body == "some values"


def test_extract_status_with_pattern_characters():
    """A value holding a markdown link is removed as a literal unit."""
    content = (
        "some values Status: superseded by "
        "[0015-slo-as-code-usage-revised](0015-slo-as-code-usage-revised)"
    )
    status, body = extract_status(content)
    assert status == "superseded by [0015-slo-as-code-usage-revised](0015-slo-as-code-usage-revised)"
    assert body == "some values"


def test_extract_status_removes_only_labeled_occurrence():
    """Identical text elsewhere in the document is left alone."""
    content = "see (a+b)* here\n\nstatus: (a+b)*\n\nmore (a+b)*"
    status, body = extract_status(content)
    assert status == "(a+b)*"
    assert body == "see (a+b)* here\n\n\n\nmore (a+b)*"


def test_extract_status_first_occurrence_only():
    """Only the first status declaration is honored and stripped."""
    status, body = extract_status("Status: Proposed\nStatus: Accepted")
    assert status == "Proposed"
    assert body == "Status: Accepted"


@pytest.mark.parametrize("content", [
    "# Title\n\nNo metadata here.\n",
    "  leading and trailing whitespace stays  \n",
    "",
])
def test_extract_without_label_is_noop(content):
    """Missing labels return None and the text byte-for-byte."""
    assert extract_status(content) == (None, content)
    assert extract_date(content) == (None, content)


def test_extract_date_from_content():
    date, body = extract_date("some values date: 26-03-2024")
    assert date == "26-03-2024"
    assert body == "some values"


def test_extract_date_case_insensitive():
    date, body = extract_date("some values Date:     26-03-2024")
    assert date == "26-03-2024"
    assert body == "some values"


def test_extract_field_value_ends_at_line_boundary():
    """The captured value stops at the end of its line."""
    value, body = extract_field("status", "Status: Accepted\n\n## Context\n")
    assert value == "Accepted"
    assert body == "## Context"


def test_extract_field_empty_value():
    """A bare label at the end of the text yields an empty value and is removed."""
    value, body = extract_field("status", "Intro\n\nstatus:")
    assert value == ""
    assert body == "Intro"


def test_extract_metadata_both_fields_any_order():
    """Status is extracted before date; source order does not matter."""
    content = "# T\n\nDate: 2024-03-26\n\n## Status\n\nStatus: Accepted\n\n## Context\n\nx"
    meta, body = extract_metadata(content)
    assert meta == ExtractedMetadata(status="Accepted", date="2024-03-26")
    assert body == "# T\n\n\n\n## Status\n\n\n\n## Context\n\nx"


def test_extract_metadata_missing_fields():
    """Absent fields are None, never an error."""
    meta, body = extract_metadata("# Just a title")
    assert meta == ExtractedMetadata()
    assert body == "# Just a title"
