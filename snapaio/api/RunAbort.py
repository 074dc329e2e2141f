"""Base class for fatal run conditions."""


class RunAbort(Exception):
    """A condition that stops a run before it completes.

    Attributes:
        subject: Notification subject classifying the failure (without prefix)
    """

    subject: str = "[ERROR] Run aborted"

    def __init__(self, message: str, subject: str | None = None):
        super().__init__(message)
        if subject is not None:
            self.subject = subject
