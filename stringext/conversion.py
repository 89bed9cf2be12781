"""Lenient string-to-value conversion.

Every converter returns a caller-supplied default instead of raising when the
text cannot be parsed.
"""

import re
import uuid
from collections.abc import Callable, Iterator
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import TypeVar

from stringext.utils.constants import Constants

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

_INTEGER = re.compile(r"\s*([+-]?)0*([1-9][0-9]*|0)\s*")


def parse_bounded_int(value: str | None, bounds: tuple[int, int]) -> int | None:
    """Parse a signed ASCII integer within bounds, or return None.

    Leading zeros are skipped, and digit runs longer than the widest bound are
    rejected before int() sees them, so arbitrarily long input cannot hit the
    interpreter's integer string conversion limit.
    """
    if value is None:
        return None
    match = _INTEGER.fullmatch(value)
    if match is None:
        return None
    sign, digits = match.groups()
    low, high = bounds
    if len(digits) > len(str(max(-low, high))):
        return None
    result = int(sign + digits)
    if not low <= result <= high:
        return None
    return result


def to_int(value: str | None, default: int = 0) -> int:
    """Parse a 32-bit integer; surrounding whitespace and a sign are allowed."""
    result = parse_bounded_int(value, Constants.INT32_RANGE)
    return default if result is None else result


def to_int16(value: str | None, default: int = 0) -> int:
    """Parse a 16-bit integer."""
    result = parse_bounded_int(value, Constants.INT16_RANGE)
    return default if result is None else result


def to_int64(value: str | None, default: int = 0) -> int:
    """Parse a 64-bit integer."""
    result = parse_bounded_int(value, Constants.INT64_RANGE)
    return default if result is None else result


def to_float(value: str | None, default: float = 0.0) -> float:
    """Parse a float, accepting the forms float() accepts."""
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def to_decimal(value: str | None, default: Decimal = Decimal(0)) -> Decimal:
    """Parse a finite decimal number."""
    if value is None:
        return default
    try:
        result = Decimal(value.strip())
    except InvalidOperation:
        return default
    return result if result.is_finite() else default


def to_bool(value: str | None, default: bool = False) -> bool:
    """Parse 'true' or 'false' (any case, surrounding whitespace ignored)."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized == "true":
        return True
    if normalized == "false":
        return False
    return default


def to_datetime(value: str | None, default: datetime | None = None) -> datetime | None:
    """Parse an ISO 8601 date or datetime."""
    if value is None or not value.strip():
        return default
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError:
        return default


def to_uuid(value: str | None) -> uuid.UUID:
    """Parse a UUID, returning the nil UUID when the text is not one."""
    if value is None:
        return uuid.UUID(int=0)
    try:
        return uuid.UUID(value.strip())
    except ValueError:
        return uuid.UUID(int=0)


def to_enum(value: str | None, enum_cls: type[E], default: E | None = None) -> E | None:
    """Look up an enum member by name, ignoring case.

    Args:
        value: Member name
        enum_cls: Enum class to search
        default: Returned when no member matches

    Returns:
        The matching member or default
    """
    if not value:
        return default
    wanted = value.strip().lower()
    for name, member in enum_cls.__members__.items():
        if name.lower() == wanted:
            return member
    return default


def split_to(
    value: str | None, separator: str, converter: Callable[[str], T] = str
) -> Iterator[T]:
    """Split value and lazily convert each part.

    Parts the converter rejects with ValueError or TypeError are skipped.

    Args:
        value: Text to split; None or empty yields nothing
        separator: Separator passed to str.split
        converter: Callable applied to each part

    Yields:
        Converted parts in order
    """
    if not value:
        return
    for item in value.split(separator):
        try:
            yield converter(item)
        except (ValueError, TypeError):
            continue
