"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from snapaio.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from snapaio.api.config.cmd_version import cmd_version

        result = cmd_version().drain()
        tool_version = result.output.get("tool_version", "")
        suffix = f" (snapraid {tool_version})" if tool_version else ""
        print(f"snapaio {result.output.get('version', 'unknown')}{suffix}")
        return 0 if result.success else 1

    app = _create_app()
    try:
        rv = app(argv, prog_name="snapaio", standalone_mode=False)
        return rv if isinstance(rv, int) else 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except typer.Exit as e:
        return e.exit_code
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e}", err=True)
        return 2
    except click.exceptions.Abort:
        return 1
