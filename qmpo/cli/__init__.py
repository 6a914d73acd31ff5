"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from qmpo.cli._create_app import _create_app
    from qmpo.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"qmpo {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv)
        return 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
