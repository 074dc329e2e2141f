"""Drop verbose tool output from the report body."""

# (start, end) line prefixes; lines strictly between them are removed
_SECTIONS = (
    ("Running TOUCH job to timestamp", "TOUCH finished"),
    ("### SnapRAID DIFF", "DIFF finished"),
)


def trim_log(text: str) -> str:
    """Remove the DIFF listing and TOUCH output, keeping the bracketing lines."""
    kept: list[str] = []
    closing: str | None = None
    for line in text.splitlines():
        if closing is not None:
            if line.startswith(closing):
                kept.append(line)
                closing = None
            continue
        kept.append(line)
        for start, end in _SECTIONS:
            if line.startswith(start):
                closing = end
                break
    return "\n".join(kept) + ("\n" if kept else "")
