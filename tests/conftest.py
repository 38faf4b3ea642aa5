"""Shared pytest fixtures and configuration."""

import os
import pytest
from datetime import date
from freezegun import freeze_time

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
os.environ.setdefault("LOG_FORMAT", "text")


@pytest.fixture
def sample_field():
    """Sample short attachment field."""
    from slack_payload.services.payload_builder import build_field

    return build_field("Price", "$10", short=True)


@pytest.fixture
def sample_footer():
    """Sample footer with icon and timestamp."""
    from slack_payload.services.payload_builder import build_footer

    return build_footer(
        "Listings feed",
        icon_url="https://example.com/icon.png",
        timestamp=1733745600
    )


@pytest.fixture
def sample_action():
    """Sample primary button."""
    from slack_payload.services.payload_builder import build_action

    return build_action("View listing", "https://example.com/listings/123", style="Primary")


@pytest.fixture
def sample_attachment(sample_field, sample_action, sample_footer):
    """Sample attachment using every child type."""
    from slack_payload.services.payload_builder import build_attachment

    return build_attachment(
        border_color="good",
        title="123 Main St",
        title_link="https://example.com/listings/123",
        fields=[sample_field],
        actions=[sample_action],
        footer=sample_footer
    )


@pytest.fixture
def sample_listing():
    """Sample listing record from the listings feed."""
    from slack_payload.models.listing import Listing

    return Listing(
        listing_id="01ARZ3NDEKTSV4RRFFQ69G5FAV",
        type="SALE",
        status="ACTIVE",
        address_string="123 Main St",
        price=500000,
        assignee="Jane Doe",
        due_date=date(2024, 12, 15),
        progress=0.25,
        listing_url="https://example.com/listings/123",
        photo_url="https://example.com/photos/123.jpg"
    )


@pytest.fixture
def freeze_time_fixture():
    """Fixture for freezing time in tests."""
    with freeze_time("2024-12-09 12:00:00") as frozen_time:
        yield frozen_time
