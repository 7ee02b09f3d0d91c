"""CLI entrypoint: Typer app definition and command registration"""

import typer

from writings.cli.commands import (
    build_cmd,
    groups_cmd,
    list_cmd,
    related_cmd,
    search_cmd,
    show_cmd,
    tags_cmd,
)


app = typer.Typer(name="writings", no_args_is_help=True, help="Markdown writings: posts, tag groups, and search")

app.command(name="build")(build_cmd)
app.command(name="list")(list_cmd)
app.command(name="tags")(tags_cmd)
app.command(name="groups")(groups_cmd)
app.command(name="search")(search_cmd)
app.command(name="related")(related_cmd)
app.command(name="show")(show_cmd)
