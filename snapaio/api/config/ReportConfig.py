"""Report configuration."""

import socket
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...utils.get_home_dir import get_home_dir


def _default_prefix() -> str:
    return f"(SnapRAID on {socket.gethostname()})"


class ReportConfig(BaseModel):
    """How the run report is captured and presented."""

    model_config = ConfigDict(extra="forbid")

    verbose: bool = Field(False, description="Keep DIFF and TOUCH output in the report")
    subject_prefix: str = Field(default_factory=_default_prefix, description="Suffix appended to every subject")
    output_file: str = Field(
        default_factory=lambda: str(get_home_dir("snapaio.out")),
        description="Captured output of the current run",
    )

    @field_validator("output_file")
    @classmethod
    def _expand(cls, v: str) -> str:
        return str(Path(v).expanduser())
