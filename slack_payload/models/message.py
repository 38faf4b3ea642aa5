"""Message model - the top-level incoming-webhook payload."""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field

from slack_payload.models.attachment import Attachment


class Message(BaseModel):
    """Incoming-webhook message."""
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., min_length=1, description="Message body, required even with attachments")
    username: Optional[str] = Field(None, description="Overrides the webhook's bot name")
    icon_emoji: Optional[str] = Field(None, description="Emoji code used as the bot icon, e.g. :bell:")
    channel: Optional[str] = Field(None, description="Channel or user override; absent means webhook default")
    attachments: tuple[Attachment, ...] = Field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        if self.username:
            data["username"] = self.username
        if self.icon_emoji:
            data["icon_emoji"] = self.icon_emoji
        if self.channel:
            data["channel"] = self.channel
        if self.attachments:
            data["attachments"] = [attachment.to_payload() for attachment in self.attachments]
        return data
