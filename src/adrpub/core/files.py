"""Filesystem collaborators: source discovery, template loading, output writing"""

import logging
import shutil
from pathlib import Path
from typing import Iterable

from adrpub.core.models import OutputDocument, RawDocument


log = logging.getLogger(__name__)


def discover_sources(src_dir: Path, source_ext: str = '.md') -> list[Path]:
    """Return sorted source files directly under src_dir; subdirectories are skipped."""
    return sorted(p for p in src_dir.iterdir() if p.is_file() and p.suffix == source_ext)


def read_sources(src_dir: Path, source_ext: str = '.md') -> list[RawDocument]:
    """Read every source document under src_dir as UTF-8."""
    docs = []
    for p in discover_sources(src_dir, source_ext):
        docs.append(RawDocument(name=p.name, content=p.read_text(encoding='utf-8')))
        log.debug("Read %s", p)
    return docs


def read_template(path: Path) -> str:
    return path.read_text(encoding='utf-8')


def prepare_output_dir(out_dir: Path, files_dir: Path) -> None:
    """Create out_dir and copy the contents of files_dir into it, overwriting."""
    out_dir.mkdir(parents=True, exist_ok=True)
    if not files_dir.is_dir():
        log.warning("Static files directory %s not found; nothing copied", files_dir)
        return
    log.info("Copying static files from %s to %s", files_dir, out_dir)
    shutil.copytree(files_dir, out_dir, dirs_exist_ok=True)


def write_outputs(out_dir: Path, docs: Iterable[OutputDocument]) -> list[Path]:
    """Write each document to out_dir / doc.name. Returns the written paths."""
    written = []
    for doc in docs:
        path = out_dir / doc.name
        path.write_text(doc.content, encoding='utf-8')
        log.info("Wrote file: %s", doc.name)
        written.append(path)
    return written
