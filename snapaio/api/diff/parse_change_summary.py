"""Extract change counts from the comparison step output."""

import re

from .ChangeSummary import ChangeSummary
from .ParseFailure import ParseFailure

FIELDS = ("added", "removed", "updated", "moved", "copied")

# "   12 added" - optional leading blanks, an integer, one space, the keyword
_PATTERNS = {name: re.compile(rf"^[ \t]*(\d+) {name}\b", re.MULTILINE) for name in FIELDS}


def parse_change_summary(text: str) -> ChangeSummary:
    """Parse the DIFF output into a ChangeSummary.

    The first matching line wins for each field.

    Raises:
        ParseFailure: If any of the five counts is absent
    """
    counts: dict[str, int] = {}
    missing: list[str] = []
    for name, pattern in _PATTERNS.items():
        match = pattern.search(text)
        if match is None:
            missing.append(name)
            continue
        counts[name] = int(match.group(1))

    if missing:
        raise ParseFailure(
            f"Failed to get one or more count values ({', '.join(missing)}). Unable to proceed.",
            missing=missing,
        )
    return ChangeSummary(**counts)
