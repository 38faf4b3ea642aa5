"""Custom assertion helpers."""

from typing import Any, Dict
import json


def assert_no_empty_values(payload: Dict[str, Any]) -> None:
    """Assert that no key in a wire payload carries a null or empty placeholder."""
    for key, value in payload.items():
        assert value is not None, f"{key} is null"
        assert value != "", f"{key} is an empty string"
        assert value != [], f"{key} is an empty list"
        if key == "attachments":
            for attachment in value:
                assert_no_empty_values(attachment)


def assert_valid_response(response: Dict[str, Any], expected_status: int = 200) -> Dict[str, Any]:
    """Assert that a serverless function response is valid and return its parsed body."""
    assert 'statusCode' in response
    assert response['statusCode'] == expected_status
    assert 'headers' in response
    assert response['headers'].get('Content-Type') == 'application/json'
    assert 'body' in response

    try:
        return json.loads(response['body'])
    except json.JSONDecodeError:
        assert False, "Response body is not valid JSON"
