"""SMTP transport configuration data."""

import socket

from pydantic import BaseModel, ConfigDict, Field


class _Data(BaseModel):
    """SMTP relay settings."""

    model_config = ConfigDict(extra="forbid")

    host: str = Field("localhost", description="SMTP server")
    port: int = Field(25, ge=1, le=65535, description="SMTP port")
    sender: str = Field(default_factory=lambda: f"snapaio@{socket.gethostname()}", description="From address")
    starttls: bool = Field(False, description="Upgrade the connection with STARTTLS")
    username: str = Field("", description="Login user, empty to skip authentication")
    password: str = Field("", description="Login password")
    timeout_secs: float = Field(30.0, gt=0, description="Connection timeout")
