"""Render the markdown-flavoured run log as simple HTML."""

import re

import markdown

from ...utils.render_template import render_template

_DROPPED = re.compile(r"^\s*$|^ -*$")
_FENCE = "```"

_TEMPLATE = """\
<html>
<body>
{{ body | safe }}
</body>
</html>
"""


def _prepare(text: str) -> str:
    """Drop blank and dash-only lines, force hard breaks outside code."""
    lines: list[str] = []
    in_code = False
    for line in text.splitlines():
        if _DROPPED.match(line):
            continue
        if line.strip() == _FENCE:
            in_code = not in_code
            # fences stand in their own block so the code renders outside any paragraph
            lines.extend(["", _FENCE] if in_code else [_FENCE, ""])
            continue
        if in_code:
            lines.append(line)
            continue
        if line == "----":
            # a ruler directly under text would read as a setext heading
            lines.append("")
        lines.append(f"{line}  ")
    return "\n".join(lines)


def render_html(text: str) -> str:
    body = markdown.markdown(_prepare(text), extensions=["fenced_code"])
    body = body.replace("<pre><code>", "<pre>").replace("</code></pre>", "</pre>")
    return render_template(_TEMPLATE, {"body": body})
