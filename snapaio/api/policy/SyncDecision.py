"""Outcomes of the sync decision."""

from enum import Enum


class SyncDecision(str, Enum):
    SKIP = "skip"  # no changes
    RUN = "run"
    RUN_FORCED = "run_forced"  # breach overridden by the warning policy
    SKIP_WARN = "skip_warn"  # breach, sync held back
