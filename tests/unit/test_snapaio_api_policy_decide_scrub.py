"""Unit tests for snapaio.api.policy.decide_scrub."""

from pathlib import Path

import pytest

from snapaio.api.array.StepResult import StepResult
from snapaio.api.config.ScrubConfig import ScrubConfig
from snapaio.api.counter.CounterKind import CounterKind
from snapaio.api.counter.CounterStore import CounterStore
from snapaio.api.policy.decide_scrub import decide_scrub
from snapaio.api.policy.ScrubDecision import ScrubDecision
from snapaio.api.policy.SyncDecision import SyncDecision
from snapaio.api.policy.SyncVerdict import SyncVerdict

pytestmark = pytest.mark.policy

SKIP = SyncVerdict(decision=SyncDecision.SKIP)
RUN = SyncVerdict(decision=SyncDecision.RUN)
FORCED = SyncVerdict(decision=SyncDecision.RUN_FORCED, delete_breach=True)
WARNED = SyncVerdict(decision=SyncDecision.SKIP_WARN, delete_breach=True)

CONFIRMED = StepResult(name="sync", exit_status=0, output="Everything OK\n", saw_completion_marker=True)
UNCONFIRMED = StepResult(name="sync", exit_status=0, output="Syncing...\n", saw_completion_marker=False)


@pytest.fixture
def counters(tmp_path: Path) -> CounterStore:
    return CounterStore({CounterKind.SYNC_WARN: tmp_path / "warn", CounterKind.SCRUB_DELAY: tmp_path / "scrub"})


def test_zero_percent_disables_scrub(counters):
    verdict = decide_scrub(ScrubConfig(percent=0), SKIP, None, counters)
    assert verdict.decision is ScrubDecision.SKIP_DISABLED
    assert verdict.runs is False


@pytest.mark.parametrize("delayed_runs", [0, 1, 5])
def test_warned_sync_skips_scrub_regardless_of_delay(counters, delayed_runs):
    verdict = decide_scrub(ScrubConfig(delayed_runs=delayed_runs), WARNED, None, counters)
    assert verdict.decision is ScrubDecision.SKIP_OUT_OF_SYNC
    assert not counters.paths[CounterKind.SCRUB_DELAY].exists()


def test_sync_that_never_executed_skips_scrub(counters):
    verdict = decide_scrub(ScrubConfig(), RUN, None, counters)
    assert verdict.decision is ScrubDecision.SKIP_OUT_OF_SYNC


def test_unconfirmed_sync_skips_scrub_and_leaves_counter(counters):
    counters.write(CounterKind.SCRUB_DELAY, 1)

    verdict = decide_scrub(ScrubConfig(delayed_runs=3), FORCED, UNCONFIRMED, counters)

    assert verdict.decision is ScrubDecision.SKIP_UNCONFIRMED
    assert counters.read(CounterKind.SCRUB_DELAY) == 1


def test_confirmed_sync_runs_scrub_without_delay(counters):
    verdict = decide_scrub(ScrubConfig(), FORCED, CONFIRMED, counters)
    assert verdict.decision is ScrubDecision.RUN


def test_no_changes_count_as_in_sync(counters):
    verdict = decide_scrub(ScrubConfig(), SKIP, None, counters)
    assert verdict.runs is True


def test_delayed_scrub_defers_then_runs(counters):
    scrub = ScrubConfig(delayed_runs=2)

    first = decide_scrub(scrub, SKIP, None, counters)
    assert first.decision is ScrubDecision.SKIP_DELAYED
    assert first.delay_count == 1
    assert first.last_deferred is False

    second = decide_scrub(scrub, RUN, CONFIRMED, counters)
    assert second.decision is ScrubDecision.SKIP_DELAYED
    assert second.delay_count == 2
    assert second.last_deferred is True

    third = decide_scrub(scrub, SKIP, None, counters)
    assert third.decision is ScrubDecision.RUN
    assert third.delay_count == 2
