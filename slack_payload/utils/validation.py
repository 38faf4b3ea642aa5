"""Value checks shared by the payload models."""

import re
from typing import Optional
from pydantic import AnyUrl, HttpUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

HEX_COLOR_PATTERN = re.compile(r"#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6})")

_absolute_url = TypeAdapter(AnyUrl)
_http_url = TypeAdapter(HttpUrl)


def is_hex_color(value: str) -> bool:
    return HEX_COLOR_PATTERN.fullmatch(value) is not None


def _check_url(value: str, adapter: TypeAdapter, kind: str) -> str:
    # The parser trims whitespace, so untrimmed input would be stored untrimmed
    if value != value.strip():
        raise ValueError(f"URL must not have surrounding whitespace: {value!r}")
    try:
        adapter.validate_python(value)
    except PydanticValidationError:
        raise ValueError(f"not {kind}: {value!r}") from None
    return value


def check_absolute_url(value: Optional[str]) -> Optional[str]:
    """
    Check that value parses as an absolute URL.

    Returns the caller's string unchanged; pydantic's normalized form
    (trailing slashes, punycode) is only used for the check.
    """
    if value is None:
        return None
    return _check_url(value, _absolute_url, "an absolute URL")


def check_http_url(value: Optional[str]) -> Optional[str]:
    """Check that value is an absolute http or https URL, returned verbatim."""
    if value is None:
        return None
    return _check_url(value, _http_url, "an absolute http(s) URL")
