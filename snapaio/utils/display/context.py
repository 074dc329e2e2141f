"""Display selection."""

from .Display import Display


def get_display(mode: str = "cli") -> Display:
    """Return the display implementation for the requested mode."""
    if mode == "cli":
        from ...cli.display.CLIDisplay import CLIDisplay

        return CLIDisplay()
    raise ValueError(f"Unknown display mode: {mode!r} (supported: ['cli'])")
