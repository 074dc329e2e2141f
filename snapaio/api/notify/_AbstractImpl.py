"""Abstract base class for notification transports."""

from abc import ABC, abstractmethod


class _AbstractImpl(ABC):
    """A way of delivering a subject and body to one recipient."""

    @abstractmethod
    def send(self, recipient: str, subject: str, text: str, html: str) -> None:
        """Deliver a report.

        Args:
            recipient: Destination address
            subject: Subject line
            text: Plain text body
            html: HTML rendering of the same body

        Raises:
            OSError or RuntimeError when the transport fails
        """
        pass
