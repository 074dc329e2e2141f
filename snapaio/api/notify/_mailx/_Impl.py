"""mailx notification transport."""

import subprocess

from .._AbstractImpl import _AbstractImpl
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Pipe the HTML report into the local mail program."""

    def __init__(self, data: _Data):
        self._data = data

    def send(self, recipient: str, subject: str, text: str, html: str) -> None:  # noqa: ARG002
        try:
            subprocess.run(
                [self._data.binary, "-a", "Content-Type: text/html", "-s", subject, recipient],
                input=html,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"Mail program failed ({e.returncode}): {e.stderr.strip()}") from e
