"""Notification configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ._mailx._Data import _Data as _MailxData
from ._smtp._Data import _Data as _SmtpData

# Registry: add new transports here (ONLY place transport types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "smtp": _SmtpData,
    "mailx": _MailxData,
}


class NotifyConfig(BaseModel):
    """Recipient plus transport-specific data. An empty recipient disables sending."""

    model_config = ConfigDict(extra="forbid")

    recipient: str = Field("", description="Address the report is sent to")
    type: str = Field("smtp", description="Transport type")
    data: BaseModel = Field(default_factory=_SmtpData, description="Transport-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            raise ValueError(f"notify config must be a dict, got {type(values).__name__}")
        values = dict(values)
        transport = values.get("type", "smtp")
        data_class = _BACKEND_REGISTRY.get(transport)
        if not data_class:
            raise ValueError(f"Unknown notify type: {transport!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data") or {}
        if isinstance(data, BaseModel):
            data = data.model_dump()
        values["data"] = data_class(**data)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
