from datetime import datetime
from pathlib import Path

from ...constants import LOG_TIMESTAMP_FORMAT
from ...utils.get_logger import get_logger


def append_log(log_path: Path, domain: str, level: str, message: str) -> None:
    """Append a timestamped entry to the operator log.

    Format: ``[YYYY-MM-DD HH:MM:SS] [domain] LEVEL: message``. Failures are
    reported through the package logger and never raised.

    Args:
        log_path: Path to the logfile
        domain: Domain name (e.g., 'run', 'notify')
        level: Log level (DEBUG, INFO, WARN, ERROR)
        message: Log message
    """
    timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        with log_path.open("a", encoding="utf-8") as fh:
            fh.write(f"[{timestamp}] [{domain}] {level}: {message}\n")
    except OSError as e:
        get_logger("log").warning("Cannot append to operator log %s: %s", log_path, e)
