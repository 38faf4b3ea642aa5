"""Action model - link buttons rendered inside an attachment."""

from enum import Enum
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from slack_payload.utils.validation import check_http_url


class ActionType(str, Enum):
    """Supported action types."""
    BUTTON = "button"


class ActionStyle(str, Enum):
    """Button styles. DANGER is a rendering hint only."""
    DEFAULT = "default"
    PRIMARY = "primary"
    DANGER = "danger"


class Action(BaseModel):
    """Button linking to an external URL."""
    model_config = ConfigDict(frozen=True)

    type: ActionType = Field(default=ActionType.BUTTON, description="Action type")
    text: str = Field(..., description="Button label")
    url: str = Field(..., description="Absolute http(s) URL opened by the button")
    style: ActionStyle = Field(default=ActionStyle.DEFAULT, description="Button style")

    @field_validator("type", "style", mode="before")
    @classmethod
    def normalize_case(cls, value: Any) -> Any:
        # Enum members pass through, strings are matched case-insensitively
        if isinstance(value, str) and not isinstance(value, Enum):
            return value.lower()
        return value

    @field_validator("url")
    @classmethod
    def validate_url(cls, value: str) -> str:
        return check_http_url(value)

    def to_payload(self) -> dict[str, Any]:
        return {
            "type": self.type.value,
            "text": self.text,
            "url": self.url,
            "style": self.style.value,
        }
