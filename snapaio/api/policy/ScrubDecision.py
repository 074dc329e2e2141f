"""Outcomes of the scrub decision."""

from enum import Enum


class ScrubDecision(str, Enum):
    RUN = "run"
    SKIP_DISABLED = "skip_disabled"
    SKIP_OUT_OF_SYNC = "skip_out_of_sync"
    SKIP_UNCONFIRMED = "skip_unconfirmed"
    SKIP_DELAYED = "skip_delayed"
