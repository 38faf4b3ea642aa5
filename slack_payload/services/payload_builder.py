"""Builders for incoming-webhook payloads.

Each builder validates its inputs once and returns an immutable model.
Composition is leaves first: fields, footers and actions go into an
attachment, attachments go into a message.
"""

from datetime import datetime
from typing import Any, Iterable, Optional, Type, TypeVar, Union
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from slack_payload.models.action import Action, ActionStyle, ActionType
from slack_payload.models.attachment import Attachment, AttachmentColor
from slack_payload.models.field import AttachmentField
from slack_payload.models.footer import Footer
from slack_payload.models.message import Message
from slack_payload.utils.errors import ValidationError, format_pydantic_errors
from slack_payload.utils.logging import get_structured_logger, sanitize_message_text

logger = get_structured_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _construct(model: Type[ModelT], **values: Any) -> ModelT:
    """Instantiate a payload model, translating pydantic errors."""
    try:
        return model(**values)
    except PydanticValidationError as e:
        errors = e.errors(include_url=False)
        message = f"Invalid {model.__name__}: {format_pydantic_errors(errors)}"
        logger.warning(message, model=model.__name__, error_count=len(errors))
        raise ValidationError(message, errors=errors) from e


def build_field(title: Any, value: Any, short: bool = False) -> AttachmentField:
    """Build an attachment field. Title and value are coerced to text."""
    return _construct(AttachmentField, title=title, value=value, short=short)


def build_footer(
    text: str,
    icon_url: Optional[str] = None,
    timestamp: Optional[Union[int, datetime]] = None
) -> Footer:
    """
    Build an attachment footer.

    A datetime timestamp is stored as whole epoch seconds. Leaving it out
    produces no `ts` key at all.
    """
    return _construct(Footer, text=text, icon_url=icon_url, timestamp=timestamp)


def build_action(
    label: str,
    target_url: str,
    style: Union[str, ActionStyle] = "Default",
    kind: Union[str, ActionType] = "Button"
) -> Action:
    """Build a link button. `style` and `kind` are case-insensitive."""
    return _construct(Action, type=kind, text=label, url=target_url, style=style)


def build_attachment(
    border_color: Optional[Union[str, AttachmentColor]] = None,
    pretext: Optional[str] = None,
    author_name: Optional[str] = None,
    author_link: Optional[str] = None,
    author_icon: Optional[str] = None,
    title: Optional[str] = None,
    title_link: Optional[str] = None,
    body: Optional[str] = None,
    fields: Optional[Iterable[AttachmentField]] = None,
    actions: Optional[Iterable[Action]] = None,
    image_url: Optional[str] = None,
    thumb_url: Optional[str] = None,
    footer: Optional[Footer] = None
) -> Attachment:
    """Build an attachment from already-built fields, actions and footer."""
    return _construct(
        Attachment,
        color=border_color,
        pretext=pretext,
        author_name=author_name,
        author_link=author_link,
        author_icon=author_icon,
        title=title,
        title_link=title_link,
        text=body,
        fields=tuple(fields or ()),
        actions=tuple(actions or ()),
        image_url=image_url,
        thumb_url=thumb_url,
        footer=footer,
    )


def build_message(
    text: Optional[str],
    username: Optional[str] = None,
    icon_emoji: Optional[str] = None,
    channel: Optional[str] = None,
    attachments: Optional[Iterable[Attachment]] = None
) -> Message:
    """Build the top-level message. `text` is required even with attachments."""
    if text is None or text == "":
        logger.warning("Message text missing")
        raise ValidationError("Invalid Message: text is required")

    message = _construct(
        Message,
        text=text,
        username=username,
        icon_emoji=icon_emoji,
        channel=channel,
        attachments=tuple(attachments or ()),
    )
    logger.debug(
        "Built message",
        text_preview=sanitize_message_text(message.text),
        attachment_count=len(message.attachments),
        channel=message.channel,
    )
    return message
