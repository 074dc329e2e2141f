"""Top-level snapaio configuration."""

import json
from contextlib import suppress
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...utils.get_home_dir import get_home_dir
from ..notify.NotifyConfig import NotifyConfig
from .ArrayConfig import ArrayConfig
from .ConfigMissing import ConfigMissing
from .HooksConfig import HooksConfig
from .LogConfig import LogConfig
from .PostprocessConfig import PostprocessConfig
from .ReportConfig import ReportConfig
from .ScrubConfig import ScrubConfig
from .StateConfig import StateConfig
from .ThresholdConfig import ThresholdConfig


class SnapConfig(BaseModel):
    """Top-level configuration. Loaded once per invocation and read-only afterwards."""

    model_config = ConfigDict(extra="forbid")

    array: ArrayConfig = Field(default_factory=ArrayConfig)
    thresholds: ThresholdConfig = Field(default_factory=ThresholdConfig)
    scrub: ScrubConfig = Field(default_factory=ScrubConfig)
    hooks: HooksConfig = Field(default_factory=HooksConfig)
    postprocess: PostprocessConfig = Field(default_factory=PostprocessConfig)
    report: ReportConfig = Field(default_factory=ReportConfig)
    notify: NotifyConfig = Field(default_factory=NotifyConfig)
    state: StateConfig = Field(default_factory=StateConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on SNAPAIO_HOME or default to ~/.snapaio."""
        return get_home_dir("config.json")

    @classmethod
    def load(cls) -> "SnapConfig":
        """Load and validate config from file.

        Raises:
            ConfigMissing: If config file not found, invalid JSON, or validation error
        """
        path = cls.get_config_path()

        if not path.exists():
            raise ConfigMissing(f"Configuration file not found at {path}")

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ConfigMissing(f"Invalid JSON in config file {path}: {e}") from e

        try:
            return cls.model_validate(raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ConfigMissing(f"Configuration validation error: {detail}") from e

    def to_dict(self) -> dict[str, Any]:
        """Convert SnapConfig instance to a dictionary for serialization."""
        return {
            "array": self.array.model_dump(),
            "thresholds": self.thresholds.model_dump(),
            "scrub": self.scrub.model_dump(),
            "hooks": self.hooks.model_dump(),
            "postprocess": self.postprocess.model_dump(),
            "report": self.report.model_dump(),
            "notify": self.notify.model_dump(),
            "state": self.state.model_dump(),
            "log": self.log.model_dump(),
        }

    def save(self) -> None:
        """Save the current configuration to a JSON file.

        Uses atomic write (write to temp file, then rename) to prevent corruption.
        """
        path = self.get_config_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            with temp_path.open("w") as fh:
                json.dump(self.to_dict(), fh, indent=4)
            temp_path.replace(path)
        except OSError as e:
            with suppress(OSError):
                if temp_path.exists():
                    temp_path.unlink()
            raise RuntimeError(f"Failed to save config: {e}") from e
