"""Attachment model - a richer content block attached to a message."""

from enum import Enum
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from slack_payload.models.action import Action
from slack_payload.models.field import AttachmentField
from slack_payload.models.footer import Footer
from slack_payload.utils.validation import check_absolute_url, is_hex_color


class AttachmentColor(str, Enum):
    """Named border colors understood by Slack."""
    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


class Attachment(BaseModel):
    """
    Attachment owning its fields, actions and footer by value.

    Children are validated when they are built and are not checked again
    here. Field and action order is the order Slack renders them in.
    """
    model_config = ConfigDict(frozen=True)

    color: Optional[str] = Field(None, description="good, warning, danger, or #RRGGBB / #RGB")
    pretext: Optional[str] = Field(None, description="Text shown above the attachment")
    author_name: Optional[str] = None
    author_link: Optional[str] = None
    author_icon: Optional[str] = None
    title: Optional[str] = None
    title_link: Optional[str] = None
    text: Optional[str] = Field(None, description="Attachment body")
    fields: tuple[AttachmentField, ...] = Field(default_factory=tuple)
    actions: tuple[Action, ...] = Field(default_factory=tuple)
    image_url: Optional[str] = None
    thumb_url: Optional[str] = None
    footer: Optional[Footer] = None

    @field_validator("color", mode="before")
    @classmethod
    def validate_color(cls, value: Any) -> Any:
        if value is None:
            return None
        if isinstance(value, AttachmentColor):
            return value.value
        if not isinstance(value, str):
            raise ValueError(f"color must be a string, got {type(value).__name__}")
        if value.lower() in {color.value for color in AttachmentColor}:
            return value.lower()
        if is_hex_color(value):
            return value
        raise ValueError(f"color must be good, warning, danger or a hex color, got {value!r}")

    @field_validator("author_link", "author_icon", "title_link", "image_url", "thumb_url")
    @classmethod
    def validate_urls(cls, value: Optional[str]) -> Optional[str]:
        return check_absolute_url(value)

    def to_payload(self) -> dict[str, Any]:
        """Wire representation; unset keys and empty sequences are left out."""
        data: dict[str, Any] = {}

        for key in ("color", "pretext", "author_name", "author_link", "author_icon",
                    "title", "title_link", "text"):
            value = getattr(self, key)
            if value:
                data[key] = value

        if self.fields:
            data["fields"] = [field.to_payload() for field in self.fields]
        if self.actions:
            data["actions"] = [action.to_payload() for action in self.actions]

        if self.image_url:
            data["image_url"] = self.image_url
        if self.thumb_url:
            data["thumb_url"] = self.thumb_url

        if self.footer is not None:
            data.update(self.footer.to_payload())

        return data
