"""Boolean format checks over a single string.

All predicates answer False for None or empty input instead of raising.
Email and URL checks are syntactic only; no network lookups are made.
"""

import ipaddress
import re
import uuid
from datetime import datetime

from pydantic import EmailStr, HttpUrl, TypeAdapter, ValidationError

from stringext.conversion import parse_bounded_int
from stringext.utils.constants import Constants

_HEX = re.compile(r"[0-9a-fA-F]+")
_PHONE = re.compile(r"\+?[1-9][0-9]{1,14}")
_EMAIL_ADAPTER = TypeAdapter(EmailStr)
_HTTP_URL_ADAPTER = TypeAdapter(HttpUrl)


def is_null_or_empty(value: str | None) -> bool:
    return not value


def is_null_or_whitespace(value: str | None) -> bool:
    return value is None or not value.strip()


def is_integer(value: str | None) -> bool:
    """True when value parses as a 32-bit integer."""
    return parse_bounded_int(value, Constants.INT32_RANGE) is not None


def is_numeric(value: str | None) -> bool:
    """True when value parses as a finite or infinite float."""
    if not value:
        return False
    try:
        float(value)
    except ValueError:
        return False
    return True


def is_alpha(value: str | None) -> bool:
    return bool(value) and value.isalpha()


def is_alphanumeric(value: str | None) -> bool:
    return bool(value) and all(c.isalpha() or c.isdecimal() for c in value)


def is_lower(value: str | None) -> bool:
    """True when every character is a lowercase letter."""
    return bool(value) and all(c.islower() for c in value)


def is_upper(value: str | None) -> bool:
    """True when every character is an uppercase letter."""
    return bool(value) and all(c.isupper() for c in value)


def is_ascii(value: str | None) -> bool:
    return bool(value) and value.isascii()


def is_hex(value: str | None) -> bool:
    """True when value consists only of hexadecimal digits."""
    return bool(value) and _HEX.fullmatch(value) is not None


def is_guid(value: str | None) -> bool:
    if not value:
        return False
    try:
        uuid.UUID(value.strip())
    except ValueError:
        return False
    return True


def is_json(value: str | None) -> bool:
    """Cheap structural check: trimmed text is wrapped in {} or []."""
    if value is None or not value.strip():
        return False
    value = value.strip()
    return (value.startswith("{") and value.endswith("}")) or (
        value.startswith("[") and value.endswith("]")
    )


def is_palindrome(value: str | None) -> bool:
    """Compare letters and digits only, ignoring case."""
    if not value:
        return False
    cleaned = [c.lower() for c in value if c.isalpha() or c.isdecimal()]
    return cleaned == cleaned[::-1]


def is_phone_number(value: str | None) -> bool:
    """E.164-style number: optional '+', then 2 to 15 digits not starting with 0."""
    if value is None or not value.strip():
        return False
    return _PHONE.fullmatch(value) is not None


def is_date_time(value: str | None, date_format: str | None = None) -> bool:
    """Check value against an strptime format, or ISO 8601 when none is given."""
    if value is None or not value.strip():
        return False
    try:
        if date_format is None:
            datetime.fromisoformat(value.strip())
        else:
            datetime.strptime(value, date_format)
    except ValueError:
        return False
    return True


def is_ipv4(value: str | None) -> bool:
    """True for a dotted-quad IPv4 address."""
    if not value:
        return False
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def is_email_address(value: str | None) -> bool:
    """Syntactic email validation through pydantic's EmailStr."""
    if value is None or not value.strip():
        return False
    try:
        _EMAIL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def is_url(value: str | None) -> bool:
    """True for an absolute http or https URL."""
    if value is None or not value.strip():
        return False
    try:
        _HTTP_URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True


def has_length(value: str | None, length: int) -> bool:
    return value is not None and len(value) == length


def is_min_length(value: str | None, min_length: int) -> bool:
    return bool(value) and len(value) >= min_length


def is_max_length(value: str | None, max_length: int) -> bool:
    return bool(value) and len(value) <= max_length


def is_length(value: str | None, min_length: int, max_length: int) -> bool:
    return bool(value) and min_length <= len(value) <= max_length
