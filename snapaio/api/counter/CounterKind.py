"""The persisted counters."""

from enum import Enum


class CounterKind(str, Enum):
    """Counter identities.

    SYNC_WARN counts consecutive runs that skipped sync because of a breach.
    SCRUB_DELAY counts consecutive eligible runs that deferred scrub.
    """

    SYNC_WARN = "sync_warn"
    SCRUB_DELAY = "scrub_delay"
