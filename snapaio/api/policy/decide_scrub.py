"""Scrub decision."""

from ..array.StepResult import StepResult
from ..config.ScrubConfig import ScrubConfig
from ..counter.CounterKind import CounterKind
from ..counter.CounterStore import CounterStore
from .ScrubDecision import ScrubDecision
from .ScrubVerdict import ScrubVerdict
from .SyncDecision import SyncDecision
from .SyncVerdict import SyncVerdict


def decide_scrub(
    scrub: ScrubConfig,
    sync_verdict: SyncVerdict,
    sync_result: StepResult | None,
    counters: CounterStore,
) -> ScrubVerdict:
    """Decide whether the scrub job may run.

    Args:
        scrub: Scrub configuration
        sync_verdict: The sync decision for this run
        sync_result: The sync step result, None if sync was not executed
        counters: Counter store holding the scrub delay count

    The delay counter is only consulted once parity is known to be in sync:
    sync skipped for lack of changes, or sync ran and printed its completion
    marker. Clearing the counter after a scrub executes is the caller's job.
    """
    if scrub.percent == 0:
        return ScrubVerdict(
            decision=ScrubDecision.SKIP_DISABLED,
            notes=(("INFO", "Scrub job is not enabled. Not running SCRUB job."),),
        )

    if sync_verdict.decision is SyncDecision.SKIP_WARN or (sync_verdict.runs and sync_result is None):
        return ScrubVerdict(
            decision=ScrubDecision.SKIP_OUT_OF_SYNC,
            notes=(
                (
                    "INFO",
                    "Scrub job is cancelled as parity info is out of sync"
                    " (deleted or changed files threshold has been breached).",
                ),
            ),
        )

    if sync_verdict.runs and sync_result is not None and not sync_result.saw_completion_marker:
        return ScrubVerdict(
            decision=ScrubDecision.SKIP_UNCONFIRMED,
            notes=(
                (
                    "WARN",
                    "**WARNING** - check output of SYNC job. Could not detect marker. Not proceeding with SCRUB job.",
                ),
            ),
        )

    notes: list[tuple[str, str]] = []
    delayed_runs = scrub.delayed_runs
    if delayed_runs:
        notes.append(("INFO", "Delayed scrub is enabled."))

    count = counters.read(CounterKind.SCRUB_DELAY)
    if count >= delayed_runs:
        if count:
            notes.append(
                ("INFO", f"Number of delayed runs has reached/exceeded threshold ({delayed_runs}). A SCRUB job will run.")
            )
        return ScrubVerdict(decision=ScrubDecision.RUN, delay_count=count, notes=tuple(notes))

    count = counters.increment(CounterKind.SCRUB_DELAY)
    last = count == delayed_runs
    if last:
        notes.append(("INFO", "This is the **last** run left before running scrub job next time."))
    else:
        notes.append(("INFO", f"{delayed_runs - count} runs until the next scrub. **NOT** proceeding with SCRUB job."))
    return ScrubVerdict(decision=ScrubDecision.SKIP_DELAYED, delay_count=count, last_deferred=last, notes=tuple(notes))
