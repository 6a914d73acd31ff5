"""Handler Typer app factory."""

from pathlib import Path

import typer

from qmpo.api.handler.cmd_register import cmd_register
from qmpo.api.handler.cmd_status import cmd_status
from qmpo.api.handler.cmd_unregister import cmd_unregister
from qmpo.cli._handle_stage_result import _handle_stage_result


def handler() -> typer.Typer:
    """Create and configure the handler Typer app."""
    app = typer.Typer(
        name="handler",
        help="Register qmpo as the directory:// URI handler",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Handler operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="register")
    def register_cmd(
        path: Path | None = typer.Option(  # noqa: B008
            None, "--path", help="Path to qmpo executable (auto-detected if not specified)"
        ),
    ) -> None:
        """Register qmpo as the directory:// URI handler."""
        _handle_stage_result(cmd_register)(path=path)

    @app.command(name="unregister")
    def unregister_cmd() -> None:
        """Unregister qmpo as the directory:// URI handler."""
        _handle_stage_result(cmd_unregister)()

    @app.command(name="status")
    def status_cmd() -> None:
        """Show registration status."""
        _handle_stage_result(cmd_status)()

    return app
