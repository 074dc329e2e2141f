"""Notifier public API - sends a report through the configured transport."""

from importlib import import_module

from ...utils.get_logger import get_logger
from .NotifyConfig import _BACKEND_REGISTRY, NotifyConfig
from ._AbstractImpl import _AbstractImpl


class Notifier:
    """Public API for notification delivery."""

    def __init__(self, notify_config: NotifyConfig):
        self.notify_config = notify_config
        self._impl: _AbstractImpl | None = None

    @property
    def enabled(self) -> bool:
        return bool(self.notify_config.recipient)

    def __enter__(self):
        backend_type = self.notify_config.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported notify type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = import_module(f"{__package__}._{backend_type}._Impl")
        self._impl = module._Impl(self.notify_config.data)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        return False

    def send(self, subject: str, text: str, html: str) -> bool:
        """Send a report. Returns False without sending when no recipient is configured."""
        if not self.enabled:
            return False
        if not self._impl:
            raise RuntimeError("Notifier not initialized. Use as context manager first.")
        get_logger("notify").info("Sending report to %s: %s", self.notify_config.recipient, subject)
        self._impl.send(self.notify_config.recipient, subject, text, html)
        return True
