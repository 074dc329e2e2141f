"""Shared constants for snapaio state and log locations."""

SNAPAIO_HOME_EXT = ".snapaio"  # user-level state/config directory suffix

# Timestamp format of operator log entries
LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
