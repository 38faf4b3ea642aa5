"""Footer model - small text, icon and timestamp shown under an attachment."""

import math
from typing import Any, Optional
from datetime import datetime, timedelta, timezone
from pydantic import BaseModel, ConfigDict, Field, field_validator

from slack_payload.utils.validation import check_absolute_url

FOOTER_TEXT_MAX_LENGTH = 300

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_seconds(moment: datetime) -> int:
    """
    Convert a datetime to whole seconds since the Unix epoch.

    Sub-second precision is truncated toward zero, never rounded.
    Naive datetimes are taken to be UTC.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    seconds, remainder = divmod(moment - _EPOCH, timedelta(seconds=1))
    if seconds < 0 and remainder:
        seconds += 1
    return seconds


class Footer(BaseModel):
    """
    Attachment footer.

    The icon is only rendered by Slack when text is non-empty; that is left
    to the caller rather than rejected here.
    """
    model_config = ConfigDict(frozen=True)

    text: str = Field(..., max_length=FOOTER_TEXT_MAX_LENGTH, description="Footer text")
    icon_url: Optional[str] = Field(None, description="Absolute URL of the footer icon")
    timestamp: Optional[int] = Field(None, description="Seconds since the Unix epoch")

    @field_validator("icon_url")
    @classmethod
    def validate_icon_url(cls, value: Optional[str]) -> Optional[str]:
        return check_absolute_url(value)

    @field_validator("timestamp", mode="before")
    @classmethod
    def coerce_timestamp(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("timestamp must be a number of seconds or a datetime, got bool")
        if isinstance(value, datetime):
            return to_epoch_seconds(value)
        if isinstance(value, float):
            if not math.isfinite(value):
                raise ValueError(f"timestamp must be finite, got {value!r}")
            return int(value)
        return value

    def to_payload(self) -> dict[str, Any]:
        """Flat attachment-level keys: footer, footer_icon, ts."""
        data: dict[str, Any] = {}
        if self.text:
            data["footer"] = self.text
        if self.icon_url:
            data["footer_icon"] = self.icon_url
        if self.timestamp is not None:
            data["ts"] = self.timestamp
        return data
