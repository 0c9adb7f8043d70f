"""CLI entrypoint: Typer app definition and command registration"""

import typer

from mdposts.cli.commands import export_cmd, list_cmd, show_cmd


app = typer.Typer(name="mdposts", no_args_is_help=True, help="Markdown blog post catalog and renderer")

app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="export")(export_cmd)
