"""Tests for AttachmentField model."""

import pytest
from pydantic import ValidationError
from slack_payload.models.field import AttachmentField


@pytest.mark.unit
def test_field_valid():
    """Test valid field creation."""
    field = AttachmentField(title="Price", value="$10", short=True)

    assert field.title == "Price"
    assert field.value == "$10"
    assert field.short is True


@pytest.mark.unit
def test_field_short_default():
    """Test that short defaults to False."""
    field = AttachmentField(title="Address", value="123 Main St")

    assert field.short is False


@pytest.mark.unit
@pytest.mark.parametrize("raw, expected", [
    (500000, "500000"),
    (0.25, "0.25"),
    (None, ""),
    (True, "True"),
])
def test_field_coerces_values_to_text(raw, expected):
    """Test that title and value are coerced to text."""
    field = AttachmentField(title=raw, value=raw)

    assert field.title == expected
    assert field.value == expected


@pytest.mark.unit
def test_field_payload_shape():
    """Test the wire representation of a field."""
    field = AttachmentField(title="Price", value="$10", short=True)

    assert field.to_payload() == {"title": "Price", "value": "$10", "short": True}


@pytest.mark.unit
def test_field_is_immutable():
    """Test that fields cannot be modified after creation."""
    field = AttachmentField(title="Price", value="$10")

    with pytest.raises(ValidationError):
        field.value = "$20"


@pytest.mark.unit
def test_field_short_none_defaults_to_false():
    """Test that an unset short flag falls back to False."""
    field = AttachmentField(title="Price", value="$10", short=None)

    assert field.short is False
