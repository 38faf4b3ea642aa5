"""Attachment field model - a labeled title/value pair."""

from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator


class AttachmentField(BaseModel):
    """Field displayed inside an attachment, side-by-side with others when short."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Field label")
    value: str = Field(..., description="Field value")
    short: bool = Field(default=False, description="Render next to other short fields")

    @field_validator("short", mode="before")
    @classmethod
    def default_short(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("title", "value", mode="before")
    @classmethod
    def coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        return str(value)

    def to_payload(self) -> dict[str, Any]:
        return {"title": self.title, "value": self.value, "short": self.short}
