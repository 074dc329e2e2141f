"""Sync decision."""

from ..config.ThresholdConfig import ThresholdConfig
from ..counter.CounterKind import CounterKind
from ..counter.CounterStore import CounterStore
from ..diff.ChangeSummary import ChangeSummary
from .SyncDecision import SyncDecision
from .SyncVerdict import SyncVerdict


def decide_sync(summary: ChangeSummary, thresholds: ThresholdConfig, counters: CounterStore) -> SyncVerdict:
    """Decide whether the sync job may run.

    No changes skip the sync. Counts under both thresholds run it. A breach
    consults ``sync_warn_threshold``: below zero the sync is held back
    indefinitely, zero forces it, N > 0 holds it back for N runs (persisting
    the warning count) and forces it on the next one.

    The warning counter is only incremented here. Clearing it is the job of
    whoever executes the sync.
    """
    if summary.total == 0:
        return SyncVerdict(
            decision=SyncDecision.SKIP,
            notes=(("INFO", "No change detected. Not running SYNC job."),),
        )

    notes: list[tuple[str, str]] = []
    delete_breach = summary.removed >= thresholds.delete_threshold
    update_breach = summary.updated >= thresholds.update_threshold

    if delete_breach:
        notes.append(
            ("WARN", f"**WARNING** Deleted files ({summary.removed}) reached/exceeded threshold ({thresholds.delete_threshold}).")
        )
    elif summary.removed:
        notes.append(
            (
                "INFO",
                f"There are deleted files. The number of deleted files ({summary.removed})"
                f" is below the threshold of ({thresholds.delete_threshold}).",
            )
        )
    if update_breach:
        notes.append(
            ("WARN", f"**WARNING** Updated files ({summary.updated}) reached/exceeded threshold ({thresholds.update_threshold}).")
        )
    elif summary.updated:
        notes.append(
            (
                "INFO",
                f"There are updated files. The number of updated files ({summary.updated})"
                f" is below the threshold of ({thresholds.update_threshold}).",
            )
        )

    if not (delete_breach or update_breach):
        return SyncVerdict(decision=SyncDecision.RUN, notes=tuple(notes))

    warn_threshold = thresholds.sync_warn_threshold

    def verdict(decision: SyncDecision, count: int = 0, last: bool = False) -> SyncVerdict:
        return SyncVerdict(
            decision=decision,
            delete_breach=delete_breach,
            update_breach=update_breach,
            warn_count=count,
            last_warning=last,
            notes=tuple(notes),
        )

    if warn_threshold < 0:
        notes.append(("INFO", "Forced sync is not enabled. **NOT** proceeding with SYNC job."))
        return verdict(SyncDecision.SKIP_WARN)

    if warn_threshold == 0:
        notes.append(("INFO", "Forced sync is enabled."))
        return verdict(SyncDecision.RUN_FORCED)

    notes.append(("INFO", "Sync after threshold warning(s) is enabled."))
    count = counters.read(CounterKind.SYNC_WARN)
    if count >= warn_threshold:
        notes.append(
            (
                "INFO",
                f"Number of threshold warning(s) ({count}) has reached/exceeded threshold ({warn_threshold})."
                " Forcing a SYNC job to run.",
            )
        )
        return verdict(SyncDecision.RUN_FORCED, count)

    count = counters.increment(CounterKind.SYNC_WARN)
    last = count == warn_threshold
    if last:
        notes.append(("INFO", "This is the **last** warning left. **NOT** proceeding with SYNC job."))
    else:
        notes.append(
            (
                "INFO",
                f"{warn_threshold - count} threshold warning(s) until the next forced sync."
                " **NOT** proceeding with SYNC job.",
            )
        )
    return verdict(SyncDecision.SKIP_WARN, count, last)
