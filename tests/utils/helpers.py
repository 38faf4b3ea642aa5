"""Test helper functions."""

import json
from typing import Dict, Any


def create_preview_request(
    body: Any = None,
    headers: Dict[str, str] = None
) -> Dict[str, Any]:
    """Create a serverless request object for the preview endpoint."""
    if body is None:
        body = {"text": "Test message"}

    if headers is None:
        headers = {
            "content-type": "application/json"
        }

    return {
        "method": "POST",
        "path": "/api/payload/preview",
        "headers": headers,
        "body": json.dumps(body) if isinstance(body, (dict, list)) else body,
        "query": {}
    }
