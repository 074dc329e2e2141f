import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .get_home_dir import get_home_dir

# Prevent multiple configurations
_CONFIGURED = False

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


def configure_logging(home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified snapaio logging.

    Args:
        home: Path to snapaio home directory. If None, derived from environment.
        level: One of DEBUG, INFO, WARN, ERROR
    """
    global _CONFIGURED
    if _CONFIGURED:
        logging.getLogger("snapaio").setLevel(_LEVELS.get(level.upper(), logging.INFO))
        return

    if home is None:
        home = get_home_dir()

    # Ensure directory exists
    home.mkdir(parents=True, exist_ok=True)
    log_file = home / "snapaio.log"

    root_logger = logging.getLogger("snapaio")
    root_logger.setLevel(_LEVELS.get(level.upper(), logging.INFO))

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True
