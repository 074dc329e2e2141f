"""Run command - one full maintenance run."""

from collections.abc import Iterator

from ...utils.configure_logging import configure_logging
from ..config.SnapConfig import SnapConfig
from ..RunAbort import RunAbort
from ..StageResult import StageResult
from .._output_schemas.run import RunOutput
from .RunCoordinator import RunCoordinator


def cmd_run() -> StageResult:
    """Run DIFF, SYNC and SCRUB as the thresholds allow, then report.

    Fails (exit 1) only on a fatal precondition: missing configuration,
    missing content/parity file, or DIFF output without all change counts.
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.01, "Loading configuration...")
        coordinator: RunCoordinator | None = None
        try:
            config = SnapConfig.load()
            configure_logging(level=config.log.level)
            coordinator = RunCoordinator(config)
            yield from coordinator.iter_run()
        except (RunAbort, OSError) as e:
            ctx = coordinator.ctx if coordinator is not None else None
            result_obj.result = f"Run aborted: {e}"
            result_obj.output = _output(ctx, errors=[str(e)], subject=ctx.subject if ctx else "")
            result_obj.success = False
            yield (1.0, "Aborted")
            return

        ctx = coordinator.ctx
        result_obj.result = ctx.subject
        result_obj.output = _output(ctx, errors=[], subject=ctx.subject)
        result_obj.success = True

    return StageResult(announce="Starting SnapRAID maintenance run...", progress_callback=do_work)


def _output(ctx, errors: list[str], subject: str) -> dict:
    if ctx is None:
        return RunOutput(
            errors=errors,
            warnings=[],
            subject=subject,
            jobs=[],
            counts={},
            sync_decision="",
            scrub_decision="",
            outcome={},
            notified=False,
        ).model_dump(mode="python")
    return RunOutput(
        errors=errors,
        warnings=list(ctx.warnings),
        subject=subject,
        jobs=list(ctx.outcome.jobs),
        counts=ctx.summary.to_dict() if ctx.summary else {},
        sync_decision=ctx.sync_verdict.decision.value if ctx.sync_verdict else "",
        scrub_decision=ctx.scrub_verdict.decision.value if ctx.scrub_verdict else "",
        outcome=ctx.outcome.to_dict(),
        notified=ctx.notified,
    ).model_dump(mode="python")
