"""Data models for the ADR transformation pipeline"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict


class RawDocument(BaseModel):
    """A source document as read from disk: file name (with extension) and text."""
    model_config = ConfigDict(frozen=True)

    name: str
    content: str


class OutputDocument(BaseModel):
    """A rendered document ready to be written verbatim under its output name."""
    model_config = ConfigDict(frozen=True)

    name: str
    content: str


@dataclass(frozen=True)
class ExtractedMetadata:
    status: Optional[str] = None
    date:   Optional[str] = None


@dataclass(frozen=True)
class ParsedDocument:
    """Source document with its status/date lines removed. Sorted by name in the pipeline."""
    name:   str
    body:   str = ""    # content with metadata removed, trimmed
    status: str = ""    # "" when the document declares no status
    date:   str = ""


@dataclass(frozen=True)
class IndexEntry:
    display_name: str   # name without the source extension
    href:         str   # name with the output extension
    status:       str
