"""A rendered notification."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Report:
    subject: str
    text: str
    html: str
