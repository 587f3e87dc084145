"""CLI entrypoint: Typer app definition and command registration"""

import typer

from adrpub.cli.commands import build_cmd, list_cmd, render_cmd


app = typer.Typer(name="adrpub", no_args_is_help=True, help="Architecture Decision Records to HTML")

app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="render")(render_cmd)
