"""SMTP notification transport."""

import smtplib
from email.message import EmailMessage

from .._AbstractImpl import _AbstractImpl
from ._Data import _Data


class _Impl(_AbstractImpl):
    """Send reports through an SMTP relay as multipart text/html mail."""

    def __init__(self, data: _Data):
        self._data = data

    def send(self, recipient: str, subject: str, text: str, html: str) -> None:
        msg = EmailMessage()
        msg["Subject"] = subject
        msg["From"] = self._data.sender
        msg["To"] = recipient
        msg.set_content(text)
        msg.add_alternative(html, subtype="html")

        with smtplib.SMTP(self._data.host, self._data.port, timeout=self._data.timeout_secs) as server:
            if self._data.starttls:
                server.starttls()
            if self._data.username:
                server.login(self._data.username, self._data.password)
            server.send_message(msg)
