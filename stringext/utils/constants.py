"""Constants used throughout the StringExt codebase."""


class Constants:
    """Centralized constants to avoid magic numbers and strings."""

    # Encodings
    DEFAULT_ENCODING = "utf-8"
    """Encoding used for byte conversion, hashing and Base64."""

    REPLACEMENT_CHARACTER = "\ufffd"
    """Substituted for unpaired surrogates before encoding."""

    # Slugs
    SLUG_SEPARATOR = "-"
    """Character joining slug segments."""

    # Query strings
    QUERY_PREFIX = "?"
    """Optional leading marker of a query string."""

    QUERY_PAIR_SEPARATOR = "&"
    """Separator between query parameters."""

    QUERY_KEY_VALUE_SEPARATOR = "="
    """Separator between a query key and its value."""

    # Manipulation defaults
    TRUNCATE_TRAILING_TEXT = "..."
    """Appended to truncated text."""

    NULL_CHARACTER = "\0"
    """Returned by first/last character helpers for empty input."""

    # Integer ranges for the bounded integer parsers
    INT16_RANGE = (-(2**15), 2**15 - 1)
    INT32_RANGE = (-(2**31), 2**31 - 1)
    INT64_RANGE = (-(2**63), 2**63 - 1)

    # Pipeline output
    OUTPUT_FORMATS = ("text", "json", "yaml")
    """Formats accepted by the output writers."""

    STDIN_MARKER = "-"
    """Input path meaning standard input."""
