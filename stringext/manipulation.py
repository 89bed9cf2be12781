"""Casing, slicing, padding and affix helpers."""

import re

from stringext.utils.constants import Constants

_WORD = re.compile(r"[^\s-]+")


def to_title_case(value: str | None) -> str | None:
    """Lowercase the text, then uppercase the first character of each word.

    Words are delimited by whitespace and hyphens ("hello-world" -> "Hello-World");
    apostrophes do not start a new word ("o'neil" -> "O'neil").
    """
    if value is None or not value.strip():
        return value
    return _WORD.sub(lambda m: m.group()[:1].upper() + m.group()[1:], value.lower())


def capitalize(value: str | None) -> str | None:
    """Title-case the lowered text, same as to_title_case."""
    return to_title_case(value)


def truncate(
    value: str | None, max_length: int, trailing_text: str = Constants.TRUNCATE_TRAILING_TEXT
) -> str | None:
    """Cut value to max_length characters and append trailing_text.

    The trailing text is not counted in max_length. Text that already fits,
    None, empty text and a negative max_length leave value unchanged.
    """
    if not value or max_length < 0:
        return value
    if len(value) <= max_length:
        return value
    return value[:max_length] + trailing_text


def left(value: str | None, length: int) -> str:
    """First length characters; empty string for empty input or length <= 0."""
    if not value or length <= 0:
        return ""
    return value[:length]


def right(value: str | None, length: int) -> str:
    """Last length characters; empty string for empty input or length <= 0."""
    if not value or length <= 0:
        return ""
    return value[-length:]


def first_character(value: str | None) -> str:
    return value[0] if value else Constants.NULL_CHARACTER


def last_character(value: str | None) -> str:
    return value[-1] if value else Constants.NULL_CHARACTER


def repeat(value: str | None, count: int) -> str:
    if not value or count <= 0:
        return ""
    return value * count


def _check_fill(padding_char: str) -> None:
    if len(padding_char) != 1:
        raise ValueError(f"padding_char must be a single character, got {padding_char!r}")


def pad_left(value: str | None, total_width: int, padding_char: str = " ") -> str:
    """Right-align value in total_width characters; None pads as empty.

    Raises:
        ValueError: If padding_char is not exactly one character
    """
    _check_fill(padding_char)
    return (value or "").rjust(total_width, padding_char)


def pad_right(value: str | None, total_width: int, padding_char: str = " ") -> str:
    """Left-align value in total_width characters; None pads as empty.

    Raises:
        ValueError: If padding_char is not exactly one character
    """
    _check_fill(padding_char)
    return (value or "").ljust(total_width, padding_char)


def surround_with(value: str | None, prefix: str | None, suffix: str | None) -> str:
    return (prefix or "") + (value or "") + (suffix or "")


def remove_prefix(value: str | None, prefix: str | None) -> str | None:
    if not value or not prefix:
        return value
    return value.removeprefix(prefix)


def remove_suffix(value: str | None, suffix: str | None) -> str | None:
    if not value or not suffix:
        return value
    return value.removesuffix(suffix)


def append_prefix_if_missing(value: str | None, prefix: str | None) -> str | None:
    if not value or not prefix:
        return value
    return value if value.startswith(prefix) else prefix + value


def append_suffix_if_missing(value: str | None, suffix: str | None) -> str | None:
    if not value or not suffix:
        return value
    return value if value.endswith(suffix) else value + suffix


def count_occurrences(value: str | None, substring: str | None) -> int:
    """Count non-overlapping, case-sensitive occurrences of substring."""
    if not value or not substring:
        return 0
    return value.count(substring)


def starts_with_ignore_case(value: str | None, prefix: str) -> bool:
    return value is not None and value.casefold().startswith(prefix.casefold())


def ends_with_ignore_case(value: str | None, suffix: str) -> bool:
    return value is not None and value.casefold().endswith(suffix.casefold())


def contains_ignore_case(value: str | None, substring: str | None) -> bool:
    if value is None or substring is None:
        return False
    return substring.casefold() in value.casefold()


def equals_ignore_case(value: str | None, other: str | None) -> bool:
    """Case-insensitive equality; two Nones are equal."""
    if value is None or other is None:
        return value is other
    return value.casefold() == other.casefold()


def does_not_start_with(value: str | None, prefix: str) -> bool:
    return not (value is not None and value.startswith(prefix))


def does_not_end_with(value: str | None, suffix: str) -> bool:
    return not (value is not None and value.endswith(suffix))


def empty_if_none(value: str | None) -> str:
    return value if value is not None else ""


def default_if_empty(value: str | None, default: str) -> str:
    return value if value else default


def length(value: str | None) -> int:
    """Number of code points, 0 for None."""
    return len(value) if value is not None else 0
