"""Tests for Action model."""

import pytest
from pydantic import ValidationError
from slack_payload.models.action import Action, ActionStyle, ActionType


@pytest.mark.unit
def test_action_defaults():
    """Test default type and style."""
    action = Action(text="Open", url="https://example.com")

    assert action.type == ActionType.BUTTON
    assert action.style == ActionStyle.DEFAULT


@pytest.mark.unit
@pytest.mark.parametrize("style, expected", [
    ("Default", ActionStyle.DEFAULT),
    ("PRIMARY", ActionStyle.PRIMARY),
    ("danger", ActionStyle.DANGER),
    (ActionStyle.PRIMARY, ActionStyle.PRIMARY),
])
def test_action_style_case_insensitive(style, expected):
    """Test that style is matched regardless of case."""
    action = Action(text="Open", url="https://example.com", style=style)

    assert action.style == expected


@pytest.mark.unit
def test_action_type_case_insensitive():
    """Test that type is matched regardless of case."""
    action = Action(type="Button", text="Open", url="https://example.com")

    assert action.to_payload()["type"] == "button"


@pytest.mark.unit
@pytest.mark.parametrize("field, value", [
    ("style", "secondary"),
    ("type", "select"),
])
def test_action_unsupported_enum_values(field, value):
    """Test that values outside the enums are rejected."""
    with pytest.raises(ValidationError):
        Action(text="Open", url="https://example.com", **{field: value})


@pytest.mark.unit
@pytest.mark.parametrize("url", [
    "example.com/listing",
    "/listings/123",
    "ftp://example.com/file",
    "mailto:agent@example.com",
    "",
])
def test_action_rejects_non_http_urls(url):
    """Test that only absolute http(s) URLs are accepted."""
    with pytest.raises(ValidationError):
        Action(text="Open", url=url)


@pytest.mark.unit
def test_action_url_stored_verbatim():
    """Test that valid URLs are not normalized or re-encoded."""
    url = "https://Example.com?q=a%20b&x=1"
    action = Action(text="Open", url=url)

    assert action.url == url


@pytest.mark.unit
def test_action_payload_lower_case():
    """Test that the wire form uses lower-case type and style."""
    action = Action(type="BUTTON", text="Delete", url="http://example.com/delete", style="Danger")

    assert action.to_payload() == {
        "type": "button",
        "text": "Delete",
        "url": "http://example.com/delete",
        "style": "danger",
    }


@pytest.mark.unit
@pytest.mark.parametrize("url", [" https://example.com", "https://example.com ", "\thttps://example.com"])
def test_action_rejects_untrimmed_urls(url):
    """Test that surrounding whitespace is not accepted into the stored URL."""
    with pytest.raises(ValidationError):
        Action(text="Open", url=url)
