"""Output schemas for all commands; importing this package registers them."""

from . import config, counter, run  # noqa: F401
