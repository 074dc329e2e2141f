"""Counter Typer app factory."""

import typer

from snapaio.api.counter.cmd_clear import cmd_clear
from snapaio.api.counter.cmd_show import cmd_show
from snapaio.cli._handle_stage_result import handle_stage_result


def counter() -> typer.Typer:
    """Create and configure the counter Typer app."""
    app = typer.Typer(
        name="counter",
        help="Persisted sync-warning and scrub-delay counters",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Counter operations - shows available commands."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=True)
            raise typer.Exit()

    @app.command(name="show")
    def show_cmd() -> None:
        """Show current counter values."""
        handle_stage_result(cmd_show)()

    @app.command(name="clear")
    def clear_cmd(
        kind: str = typer.Argument("", help="sync_warn or scrub_delay; both when omitted"),
    ) -> None:
        """Clear a counter, resetting its streak."""
        handle_stage_result(cmd_clear)(kind=kind)

    return app
