"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer

from adrpub._logging import configure_logging
from adrpub.config import Settings, load_config
from adrpub.core.extract.metadata import extract_metadata
from adrpub.core.files import read_sources
from adrpub.core.pipeline import parse_documents, run_build
from adrpub.core.render import render_markdown
from adrpub.core.tree import ParseError, make_parser


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config and configure logging with standard CLI error handling."""
    try:
        settings = load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))
    configure_logging(settings.log_level)
    return settings


def build_cmd(
    src: Annotated[Optional[str], typer.Option("--src-dir", help="Directory of ADR markdown files")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    files: Annotated[Optional[str], typer.Option("--files-dir", help="Static files copied to the output directory")] = None,
    template: Annotated[Optional[str], typer.Option("--template", help="HTML template path")] = None,
    index_name: Annotated[Optional[str], typer.Option("--index-name", help="Document left out of the index")] = None,
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Render every ADR into the template and write the HTML files."""
    settings = _settings(overrides={
        "src_dir": src, "out_dir": out, "files_dir": files,
        "template_path": template, "index_name": index_name, "parser_config": parser,
    })
    try:
        written = run_build(settings)
    except (ParseError, OSError, UnicodeDecodeError) as e:
        _fail("Build failed", e)
    for path in written:
        typer.echo(f"  {path}")
    typer.echo(f"Wrote {len(written)} document(s) to {settings.out_dir}/")


def list_cmd(
    src: Annotated[Optional[str], typer.Option("--src-dir", help="Directory of ADR markdown files")] = None,
    ):
    """List ADRs with their extracted status and date."""
    settings = _settings(overrides={"src_dir": src})
    try:
        raws = read_sources(Path(settings.src_dir), settings.source_ext)
    except (OSError, UnicodeDecodeError) as e:
        _fail("Cannot read sources", e)
    docs = [d for d in parse_documents(raws) if d.name != settings.index_name]
    if not docs:
        typer.echo("No ADRs found.")
        raise typer.Exit(1)
    for d in docs:
        typer.echo(f"{d.name}\t{d.status or '-'}\t{d.date or '-'}")


def render_cmd(
    path: Annotated[Path, typer.Argument(exists=True, dir_okay=False, readable=True, help="Markdown file to render")],
    parser: Annotated[Optional[str], typer.Option("--parser-config", help="MarkdownIt preset name")] = None,
    ):
    """Print the HTML fragment and extracted metadata of a single ADR."""
    settings = _settings(overrides={"parser_config": parser})
    try:
        meta, body = extract_metadata(path.read_text(encoding="utf-8"))
        html = render_markdown(body, make_parser(settings.parser_config))
    except (ParseError, OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot render {path}", e)
    typer.echo(f"status: {meta.status or '-'}")
    typer.echo(f"date: {meta.date or '-'}")
    typer.echo(html)
