"""Inline status/date extraction from raw ADR text"""

import re
from typing import Optional

from adrpub.core.models import ExtractedMetadata


STATUS_LABEL = 'status'
DATE_LABEL = 'date'


def extract_field(label: str, content: str) -> tuple[Optional[str], str]:
    """Find the first case-insensitive `<label>: value` and strip that occurrence.

    The value runs to the end of its line and is trimmed. It is escaped before
    building the removal pattern, so values holding markup such as
    `[link](target)` are removed as a literal unit. Returns (value, remaining
    text trimmed), or (None, content) unchanged when the label is absent.
    """
    match = re.search(rf'(?i){re.escape(label)}:\s*(.*)', content)
    if match is None:
        return None, content

    value = match.group(1).strip()
    pattern = re.compile(rf'(?i){re.escape(label)}:\s*{re.escape(value)}')
    return value, pattern.sub('', content, count=1).strip()


def extract_status(content: str) -> tuple[Optional[str], str]:
    return extract_field(STATUS_LABEL, content)


def extract_date(content: str) -> tuple[Optional[str], str]:
    return extract_field(DATE_LABEL, content)


def extract_metadata(content: str) -> tuple[ExtractedMetadata, str]:
    """Strip status, then date, from content. Returns (metadata, body)."""
    status, body = extract_status(content)
    date, body = extract_date(body)
    return ExtractedMetadata(status=status, date=date), body
