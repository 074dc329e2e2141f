"""Comparison output could not be turned into a ChangeSummary."""

from ..RunAbort import RunAbort


class ParseFailure(RunAbort):
    """One or more change counts are missing from the DIFF output."""

    subject = "[WARNING] Unable to proceed with SYNC/SCRUB job(s). Check DIFF job output."

    def __init__(self, message: str, missing: list[str]):
        super().__init__(message)
        self.missing = missing
