"""Fatal configuration error."""

from ..RunAbort import RunAbort


class ConfigMissing(RunAbort, ValueError):
    """Configuration is absent or invalid; raised before any array-tool invocation."""

    subject = "[ERROR] Configuration missing or invalid"
