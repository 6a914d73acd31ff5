"""Parse Typer app factory - print the native path of a directory:// URI."""

from typing import Annotated

import typer

from qmpo.api.uri.cmd_parse import cmd_parse
from qmpo.cli._handle_stage_result import _handle_stage_result


def parse() -> typer.Typer:
    """Create and configure the parse Typer app."""
    app = typer.Typer(
        name="parse",
        help="Convert a directory:// URI to a native path without opening it",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        uri: Annotated[str | None, typer.Argument(help="Directory URI, e.g. directory://C:/Users")] = None,
    ) -> None:
        """Convert a directory:// URI to a native path."""
        if uri is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        _handle_stage_result(cmd_parse)(uri)

    return app
