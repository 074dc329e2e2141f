"""Run Typer app factory."""

import typer

from snapaio.api.run.cmd_run import cmd_run
from snapaio.cli._handle_stage_result import handle_stage_result


def run() -> typer.Typer:
    """Create and configure the run Typer app."""
    app = typer.Typer(
        name="run",
        help="Run the scheduled maintenance (DIFF, SYNC, SCRUB, report)",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Run one maintenance cycle."""
        if ctx.invoked_subcommand is None:
            handle_stage_result(cmd_run)()

    return app
