"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdpeek.cli.commands import meta_cmd, render_cmd


app = typer.Typer(name="mdpeek", no_args_is_help=True, help="Markdown preview renderer with scroll-sync annotations")

app.command(name="render")(render_cmd)
app.command(name="meta")(meta_cmd)
