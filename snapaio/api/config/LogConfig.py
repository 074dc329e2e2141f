"""Log configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.get_home_dir import get_home_dir


class LogConfig(BaseModel):
    """Log level and operator log location."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Logging level")
    operator_log: str = Field(
        default_factory=lambda: str(get_home_dir("snapraid.log")),
        description="Timestamped log of run messages",
    )

    @field_validator("operator_log")
    @classmethod
    def _expand(cls, v: str) -> str:
        return str(Path(v).expanduser())
