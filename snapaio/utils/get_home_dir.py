"""Get snapaio home directory path or path under it."""

import os
from pathlib import Path

from ..constants import SNAPAIO_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get snapaio home directory path or path under it.

    If no parts are provided, returns the base home directory.
    If parts are provided, returns a path under the home directory.

    Checks SNAPAIO_HOME environment variable first, defaults to ~/.snapaio if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json", "snapraid.log")

    Returns:
        Absolute path to the home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/root/.snapaio")
        >>> get_home_dir("config.json")
        Path("/root/.snapaio/config.json")
    """
    home_env = os.environ.get("SNAPAIO_HOME")
    if home_env:
        home = Path(home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        user_home = os.environ.get("HOME")
        home = Path(user_home) / SNAPAIO_HOME_EXT if user_home else Path.home() / SNAPAIO_HOME_EXT

    return home / Path(*parts) if parts else home
