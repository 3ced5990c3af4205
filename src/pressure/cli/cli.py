"""CLI entrypoint: Typer app definition and command registration"""

import typer

from pressure.cli.commands import check_cmd, list_cmd, page_cmd, show_cmd, terms_cmd


app = typer.Typer(name="pressure", no_args_is_help=True, help="Browse a pressure site's posts and pages")

app.command(name="list")(list_cmd)
app.command(name="show")(show_cmd)
app.command(name="page")(page_cmd)
app.command(name="check")(check_cmd)
app.command(name="terms")(terms_cmd)
