"""Subject line classification for a finished run."""

from ..config.ThresholdConfig import ThresholdConfig
from ..diff.ChangeSummary import ChangeSummary
from ..policy.SyncVerdict import SyncVerdict
from ..run.RunOutcome import RunOutcome

PRE_SYNC_FAILED = "[WARNING] Pre-sync command failed, SYNC job did not run"
SYNC_UNCONFIRMED = "[WARNING] SYNC job ran but did not complete successfully"
SCRUB_UNCONFIRMED = "[WARNING] SCRUB job ran but did not complete successfully"


def _violation(verdict: SyncVerdict, summary: ChangeSummary, thresholds: ThresholdConfig) -> str:
    deleted = f"({summary.removed}) / ({thresholds.delete_threshold})"
    changed = f"({summary.updated}) / ({thresholds.update_threshold})"
    forced = verdict.runs

    if verdict.delete_breach and verdict.update_breach:
        detail = f"Deleted files {deleted} and changed files {changed}"
        return f"Sync forced with multiple violations - {detail}" if forced else f"Multiple violations - {detail}"
    if verdict.delete_breach:
        return f"Forced sync with deleted files {deleted} violation" if forced else f"Deleted files {deleted} violation"
    return f"Forced sync with changed files {changed} violation" if forced else f"Changed files {changed} violation"


def classify_subject(
    outcome: RunOutcome,
    verdict: SyncVerdict | None,
    summary: ChangeSummary | None,
    thresholds: ThresholdConfig,
    prefix: str,
) -> str:
    """Pick the subject for a completed run; the first matching rule wins.

    Threshold violations (forced or skipped, delete/update/both), then a sync
    or scrub that ran without printing its completion marker, then the plain
    list of completed jobs.
    """
    if outcome.pre_sync_failed:
        head = PRE_SYNC_FAILED
    elif verdict is not None and summary is not None and verdict.breached:
        head = f"[WARNING] {_violation(verdict, summary, thresholds)}"
    elif outcome.ran_sync and not outcome.sync_succeeded:
        head = SYNC_UNCONFIRMED
    elif outcome.ran_scrub and not outcome.scrub_succeeded:
        head = SCRUB_UNCONFIRMED
    else:
        head = f"[COMPLETED] {outcome.jobs_label} Jobs"
    return f"{head} {prefix}".rstrip()
