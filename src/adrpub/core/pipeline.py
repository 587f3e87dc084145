"""Pipeline step functions: parse, render + compose, and the full build"""

import logging
from pathlib import Path
from typing import Iterable

from adrpub.config import Settings
from adrpub.core.compose import compose
from adrpub.core.extract.metadata import extract_metadata
from adrpub.core.files import prepare_output_dir, read_sources, read_template, write_outputs
from adrpub.core.index import INDEX_NAME, build_index
from adrpub.core.models import OutputDocument, ParsedDocument, RawDocument
from adrpub.core.render import render_markdown
from adrpub.core.tree import ParseError, make_parser
from adrpub.core.utils.names import swap_ext


log = logging.getLogger(__name__)


def parse_document(raw: RawDocument) -> ParsedDocument:
    """Extract status and date from a raw document."""
    meta, body = extract_metadata(raw.content)
    return ParsedDocument(
        name=raw.name,
        body=body,
        status=meta.status or '',
        date=meta.date or '',
    )


def parse_documents(raws: Iterable[RawDocument]) -> list[ParsedDocument]:
    """Phase one: ParsedDocuments for all inputs, sorted case-sensitively by name."""
    return sorted((parse_document(r) for r in raws), key=lambda d: d.name)


def process_documents(
    raws: Iterable[RawDocument],
    template: str,
    index_name: str = INDEX_NAME,
    source_ext: str = '.md',
    output_ext: str = '.html',
    parser_config: str = 'commonmark',
    ) -> list[OutputDocument]:
    """Phase two: render every body and compose it with the shared index.

    A ParseError on any document aborts the whole run; it is re-raised with the
    document name.
    """
    parsed = parse_documents(raws)
    list_adrs = build_index(parsed, index_name, source_ext, output_ext)
    parser = make_parser(parser_config)

    results = []
    for doc in parsed:
        try:
            html = render_markdown(doc.body, parser)
        except ParseError as e:
            raise ParseError(f"Failed to render {doc.name}: {e}") from e
        log.debug("Rendered %s (status=%r, date=%r)", doc.name, doc.status, doc.date)
        results.append(OutputDocument(
            name=swap_ext(doc.name, source_ext, output_ext),
            content=compose(template, html, list_adrs),
        ))
    return results


def run_build(settings: Settings) -> list[Path]:
    """Prepare the output dir, read sources + template, render, and write. Returns written paths."""
    out_dir = Path(settings.out_dir)

    log.info("Preparing output directory %s", out_dir)
    prepare_output_dir(out_dir, Path(settings.files_dir))

    log.info("Reading files from %s", settings.src_dir)
    raws = read_sources(Path(settings.src_dir), settings.source_ext)

    log.info("Compiling %d file(s)", len(raws))
    template = read_template(Path(settings.template_path))
    outputs = process_documents(
        raws, template,
        index_name=settings.index_name,
        source_ext=settings.source_ext,
        output_ext=settings.output_ext,
        parser_config=settings.parser_config,
    )

    log.info("Writing files to %s", out_dir)
    return write_outputs(out_dir, outputs)
