"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mhcms.cli.commands import outline_cmd, parse_cmd, render_cmd


app = typer.Typer(name="mhcms", no_args_is_help=True, help="Article document parser")

app.command(name="parse")(parse_cmd)
app.command(name="outline")(outline_cmd)
app.command(name="render")(render_cmd)
