"""Unicode normalization, slugs and character-class filters."""

import re
import unicodedata

from stringext.utils.constants import Constants

_NON_SLUG_RUN = re.compile(r"[^a-z0-9]+")
_HYPHEN_RUN = re.compile(r"-+")
_WHITESPACE_RUN = re.compile(r"\s+")


def _is_blank(value: str | None) -> bool:
    """True for None, empty, or whitespace-only text."""
    return value is None or not value.strip()


def remove_diacritics(value: str | None) -> str | None:
    """Remove non-spacing combining marks while keeping base characters.

    The text is decomposed (NFD), every code point in category Mn is dropped,
    and the remainder is recomposed (NFC). Spacing marks and modifier letters
    are kept, so only accents that attach to a base character disappear.

    Args:
        value: Text to clean

    Returns:
        Text without diacritics; None, empty and whitespace-only input is
        returned unchanged

    Examples:
        >>> remove_diacritics("café")
        'cafe'
        >>> remove_diacritics("Tiếng Việt")
        'Tieng Viet'
    """
    if _is_blank(value):
        return value

    decomposed = unicodedata.normalize("NFD", value)
    stripped = "".join(c for c in decomposed if unicodedata.category(c) != "Mn")
    return unicodedata.normalize("NFC", stripped)


def to_slug(value: str | None) -> str | None:
    """Convert text to a lowercase, hyphen-separated, URL-safe token.

    Steps: remove diacritics, lowercase (str.lower is locale-independent),
    replace each run of characters outside [a-z0-9] with a hyphen, collapse
    hyphen runs, trim hyphens at both ends.

    None, empty and whitespace-only input is returned unchanged so callers
    can tell "no input" apart from "input with nothing sluggable", which
    yields an empty string.

    Examples:
        >>> to_slug("Hello, World!")
        'hello-world'
        >>> to_slug("   ")
        '   '
        >>> to_slug("!!!")
        ''
    """
    if _is_blank(value):
        return value

    slug = remove_diacritics(value).lower()
    slug = _NON_SLUG_RUN.sub(Constants.SLUG_SEPARATOR, slug)
    slug = _HYPHEN_RUN.sub(Constants.SLUG_SEPARATOR, slug)
    return slug.strip(Constants.SLUG_SEPARATOR)


def collapse_whitespace(value: str | None) -> str | None:
    """Replace every whitespace run with one space and trim both ends."""
    if _is_blank(value):
        return value
    return _WHITESPACE_RUN.sub(" ", value).strip()


def normalize_line_endings(value: str | None) -> str | None:
    """Convert CRLF and lone CR line endings to LF."""
    if not value:
        return value
    return value.replace("\r\n", "\n").replace("\r", "\n")


def replace_line_feeds(value: str | None, replacement: str = " ") -> str | None:
    """Replace each LF with replacement."""
    if not value:
        return value
    return value.replace("\n", replacement)


def only_letters_or_digits(value: str | None) -> str | None:
    """Keep letters and digits only."""
    if not value:
        return value
    return "".join(c for c in value if c.isalpha() or c.isdecimal())


def remove_special_characters(value: str | None) -> str | None:
    """Remove everything that is not a letter or a digit."""
    return only_letters_or_digits(value)


def only_digits(value: str | None) -> str | None:
    """Keep decimal digits only."""
    if not value:
        return value
    return "".join(c for c in value if c.isdecimal())


def only_letters(value: str | None) -> str | None:
    """Keep letters only."""
    if not value:
        return value
    return "".join(c for c in value if c.isalpha())


def remove_whitespace(value: str | None) -> str | None:
    """Remove all whitespace characters."""
    if not value:
        return value
    return "".join(c for c in value if not c.isspace())


def remove_numbers(value: str | None) -> str | None:
    """Remove all decimal digits."""
    if not value:
        return value
    return "".join(c for c in value if not c.isdecimal())


def remove_chars(value: str | None, *chars: str) -> str | None:
    """Remove every occurrence of the given characters.

    Args:
        value: Text to filter
        *chars: Characters to drop; with none given the text is unchanged

    Returns:
        Filtered text
    """
    if not value or not chars:
        return value
    drop = set(chars)
    return "".join(c for c in value if c not in drop)


def reverse_slash(value: str | None) -> str | None:
    """Swap forward slashes and backslashes."""
    if not value:
        return value
    return value.translate(str.maketrans({"/": "\\", "\\": "/"}))
