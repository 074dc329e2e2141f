"""Unit tests for snapaio.api.report.classify_subject."""

import pytest

from snapaio.api.config.ThresholdConfig import ThresholdConfig
from snapaio.api.diff.ChangeSummary import ChangeSummary
from snapaio.api.policy.SyncDecision import SyncDecision
from snapaio.api.policy.SyncVerdict import SyncVerdict
from snapaio.api.report.classify_subject import (
    PRE_SYNC_FAILED,
    SCRUB_UNCONFIRMED,
    SYNC_UNCONFIRMED,
    classify_subject,
)
from snapaio.api.run.RunOutcome import RunOutcome

pytestmark = pytest.mark.report

PREFIX = "(SnapRAID on test)"
THRESHOLDS = ThresholdConfig(delete_threshold=500, update_threshold=400)
CHANGES = ChangeSummary(added=0, removed=600, updated=450, moved=0, copied=0)


def outcome(**kwargs) -> RunOutcome:
    result = RunOutcome(ran_diff=True, jobs=["DIFF"])
    for key, value in kwargs.items():
        setattr(result, key, value)
    return result


@pytest.mark.parametrize(
    ("decision", "delete", "update", "expected"),
    [
        (
            SyncDecision.RUN_FORCED,
            True,
            True,
            "Sync forced with multiple violations - Deleted files (600) / (500) and changed files (450) / (400)",
        ),
        (
            SyncDecision.SKIP_WARN,
            True,
            True,
            "Multiple violations - Deleted files (600) / (500) and changed files (450) / (400)",
        ),
        (SyncDecision.RUN_FORCED, True, False, "Forced sync with deleted files (600) / (500) violation"),
        (SyncDecision.SKIP_WARN, True, False, "Deleted files (600) / (500) violation"),
        (SyncDecision.RUN_FORCED, False, True, "Forced sync with changed files (450) / (400) violation"),
        (SyncDecision.SKIP_WARN, False, True, "Changed files (450) / (400) violation"),
    ],
)
def test_violation_subjects(decision, delete, update, expected):
    verdict = SyncVerdict(decision=decision, delete_breach=delete, update_breach=update)
    subject = classify_subject(outcome(), verdict, CHANGES, THRESHOLDS, PREFIX)
    assert subject == f"[WARNING] {expected} {PREFIX}"


def test_violation_wins_over_unconfirmed_sync():
    verdict = SyncVerdict(decision=SyncDecision.RUN_FORCED, delete_breach=True)
    subject = classify_subject(outcome(ran_sync=True, sync_succeeded=False), verdict, CHANGES, THRESHOLDS, PREFIX)
    assert subject.startswith("[WARNING] Forced sync with deleted files")


def test_unconfirmed_sync():
    verdict = SyncVerdict(decision=SyncDecision.RUN)
    subject = classify_subject(outcome(ran_sync=True), verdict, CHANGES, THRESHOLDS, PREFIX)
    assert subject == f"{SYNC_UNCONFIRMED} {PREFIX}"


def test_unconfirmed_scrub():
    verdict = SyncVerdict(decision=SyncDecision.SKIP)
    subject = classify_subject(outcome(ran_scrub=True), verdict, CHANGES, THRESHOLDS, PREFIX)
    assert subject == f"{SCRUB_UNCONFIRMED} {PREFIX}"


def test_pre_sync_failure_comes_first():
    verdict = SyncVerdict(decision=SyncDecision.RUN_FORCED, delete_breach=True)
    subject = classify_subject(outcome(pre_sync_failed=True), verdict, CHANGES, THRESHOLDS, PREFIX)
    assert subject == f"{PRE_SYNC_FAILED} {PREFIX}"


def test_completed_lists_jobs_in_order():
    done = outcome(ran_sync=True, sync_succeeded=True, ran_scrub=True, scrub_succeeded=True)
    done.jobs = ["DIFF", "SYNC", "SCRUB"]
    subject = classify_subject(done, SyncVerdict(decision=SyncDecision.RUN), CHANGES, THRESHOLDS, PREFIX)
    assert subject == f"[COMPLETED] DIFF + SYNC + SCRUB Jobs {PREFIX}"


def test_empty_prefix_leaves_no_trailing_space():
    subject = classify_subject(outcome(), SyncVerdict(decision=SyncDecision.SKIP), CHANGES, THRESHOLDS, "")
    assert subject == "[COMPLETED] DIFF Jobs"
