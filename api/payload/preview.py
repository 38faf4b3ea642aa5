"""Payload preview endpoint - builds a webhook body without sending it."""

import json
from typing import Any

from slack_payload.services.payload_builder import (
    build_action,
    build_attachment,
    build_field,
    build_footer,
    build_message,
)
from slack_payload.services.payload_serializer import serialize
from slack_payload.utils.errors import RequestBodyError, ValidationError
from slack_payload.utils.logging import correlation_context, get_structured_logger, log_timing
from slack_payload.utils.logging_config import LoggingConfig

logger = get_structured_logger(__name__)
LoggingConfig.setup_logging()


def _response(status_code: int, body: str) -> dict:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": body,
    }


def _require_object(value: Any, what: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise RequestBodyError(f"{what} must be a JSON object, got {type(value).__name__}")
    return value


def _require_list(value: Any, what: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise RequestBodyError(f"{what} must be a JSON array, got {type(value).__name__}")
    return value


def _build_attachment(spec: Any):
    options = dict(_require_object(spec, "attachment"))
    fields = [build_field(**_require_object(field, "field"))
              for field in _require_list(options.pop("fields", None), "fields")]
    actions = [build_action(**_require_object(action, "action"))
               for action in _require_list(options.pop("actions", None), "actions")]
    footer_spec = options.pop("footer", None)
    footer = build_footer(**_require_object(footer_spec, "footer")) if footer_spec is not None else None
    return build_attachment(fields=fields, actions=actions, footer=footer, **options)


def build_from_request_body(body: dict[str, Any]) -> str:
    """
    Build and serialize a message described in builder terms.

    Example body:
        {"text": "New listing", "attachments": [
            {"border_color": "good", "fields": [{"title": "Price", "value": "$10"}]}
        ]}
    """
    options = dict(body)
    attachments = [_build_attachment(spec)
                   for spec in _require_list(options.pop("attachments", None), "attachments")]
    message = build_message(options.pop("text", None), attachments=attachments, **options)
    return serialize(message)


def handler(request):
    """Build a payload from the request body and return it as the response body."""
    headers = request.get("headers", {}) or {}
    with correlation_context(headers.get("x-correlation-id")):
        raw_body = request.get("body") or "{}"
        try:
            body = json.loads(raw_body) if isinstance(raw_body, (str, bytes)) else raw_body
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError are both ValueErrors
            logger.warning("Malformed preview request body", error=str(e))
            return _response(400, json.dumps({"error": f"Malformed JSON: {e}"}))

        if not isinstance(body, dict):
            return _response(400, json.dumps({"error": "Request body must be a JSON object"}))

        try:
            with log_timing("payload_preview", logger=logger):
                payload = build_from_request_body(body)
        except ValidationError as e:
            return _response(400, json.dumps({"error": str(e), "details": e.errors}, default=str))
        except RequestBodyError as e:
            logger.warning("Malformed preview request body", error=str(e))
            return _response(400, json.dumps({"error": str(e)}))
        except TypeError as e:
            # Unknown option names in the request body
            logger.warning("Unsupported preview option", error=str(e))
            return _response(400, json.dumps({"error": str(e)}))
        except Exception as e:
            logger.error(f"Error building payload preview: {e}", exc_info=True)
            return _response(500, json.dumps({"error": str(e)}))

        return _response(200, payload)
