"""Serialization of messages to the incoming-webhook JSON body."""

import json
from typing import Any

from slack_payload.models.message import Message


def to_payload(message: Message) -> dict[str, Any]:
    """Return the wire-shaped dict, for HTTP clients that encode JSON themselves."""
    return message.to_payload()


def serialize(message: Message) -> str:
    """
    Serialize a message to compact JSON.

    Key order follows the webhook schema and the output is byte-identical
    for equal messages.
    """
    return json.dumps(to_payload(message), separators=(",", ":"), ensure_ascii=False)
