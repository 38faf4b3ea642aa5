"""Mapping of upstream records into attachment fields.

The builders know nothing about record shapes. Callers either pass their
own `(record) -> fields` callable or an ordered list of `FieldSpec`
entries naming which attribute feeds which field.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterable, Optional, Sequence, Union
from pydantic import BaseModel, ConfigDict, Field

from slack_payload.models.attachment import Attachment
from slack_payload.models.field import AttachmentField
from slack_payload.models.listing import Listing
from slack_payload.services.payload_builder import build_attachment, build_field
from slack_payload.utils.logging import get_structured_logger

logger = get_structured_logger(__name__)


class FieldSpec(BaseModel):
    """One record attribute displayed as one attachment field."""
    model_config = ConfigDict(frozen=True)

    title: str = Field(..., description="Field label")
    attribute: str = Field(..., description="Attribute name or mapping key to read")
    short: bool = Field(default=True, description="Render side-by-side")
    formatter: Optional[Callable[[Any], Any]] = Field(None, description="Applied to non-empty values")


RecordMapping = Union[Callable[[Any], Iterable[AttachmentField]], Sequence[FieldSpec]]


def _read_attribute(record: Any, attribute: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(attribute)
    return getattr(record, attribute, None)


def fields_from_record(record: Any, mapping: RecordMapping) -> tuple[AttachmentField, ...]:
    """
    Map a record to attachment fields, preserving mapping order.

    Attributes that are missing or None are skipped rather than rendered
    as empty fields.
    """
    if callable(mapping):
        return tuple(mapping(record))

    fields = []
    skipped = []
    for spec in mapping:
        value = _read_attribute(record, spec.attribute)
        if value is None:
            skipped.append(spec.attribute)
            continue
        if spec.formatter is not None:
            value = spec.formatter(value)
        fields.append(build_field(spec.title, value, short=spec.short))

    if skipped:
        logger.debug("Skipped empty record attributes", skipped=skipped)
    return tuple(fields)


LISTING_FIELD_SPECS: tuple[FieldSpec, ...] = (
    FieldSpec(title="Address", attribute="address_string", short=False),
    FieldSpec(title="Type", attribute="type"),
    FieldSpec(title="Status", attribute="status"),
    FieldSpec(title="Price", attribute="price", formatter=lambda price: f"${price:,}"),
    FieldSpec(title="Assignee", attribute="assignee"),
    FieldSpec(title="Due", attribute="due_date", formatter=lambda due: due.isoformat()),
    FieldSpec(title="Progress", attribute="progress", formatter=lambda progress: f"{progress:.0%}"),
)


def listing_fields(listing: Listing) -> tuple[AttachmentField, ...]:
    """Default field mapping for a listing."""
    return fields_from_record(listing, LISTING_FIELD_SPECS)


def listing_attachment(listing: Listing, **options: Any) -> Attachment:
    """
    Build an attachment summarizing a listing.

    Title, title link and thumbnail come from the listing; any
    `build_attachment` option passed in takes precedence.
    """
    values: dict[str, Any] = {
        "title": listing.address_string,
        "title_link": listing.listing_url,
        "thumb_url": listing.photo_url,
        "fields": listing_fields(listing),
    }
    values.update(options)
    return build_attachment(**values)
