"""CLI entrypoint: Typer app definition and command registration"""

import typer

from docpipe.cli.commands import build_cmd, doc_cmd, nav_cmd, post_cmd, slugs_cmd


app = typer.Typer(name="docpipe", no_args_is_help=True, help="Docs and blog content preprocessing pipeline")

app.command(name="build")(build_cmd)
app.command(name="doc")(doc_cmd)
app.command(name="nav")(nav_cmd)
app.command(name="post")(post_cmd)
app.command(name="slugs")(slugs_cmd)
