"""Open Typer app factory - show a directory:// URI in the file manager."""

from typing import Annotated

import typer

from qmpo.api.open.cmd import cmd
from qmpo.cli._handle_stage_result import _handle_stage_result


def open_app() -> typer.Typer:
    """Create and configure the open Typer app."""
    app = typer.Typer(
        name="open",
        help="Open a directory:// URI in the file manager",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(
        ctx: typer.Context,
        uri: Annotated[str | None, typer.Argument(help="Directory URI, e.g. directory:///home/user")] = None,
    ) -> None:
        """Open the directory named by a directory:// URI.

        Files are shown selected inside their parent directory.
        """
        if uri is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit(2)

        _handle_stage_result(cmd)(uri)

    return app
