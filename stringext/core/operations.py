"""Registry of named single-string operations exposed by the command line."""

from dataclasses import dataclass
from typing import Any, Callable

from stringext import conversion, predicates
from stringext.manipulation import to_title_case
from stringext.text import (
    base64_decode,
    base64_encode,
    byte_size,
    collapse_whitespace,
    grapheme_clusters,
    grapheme_count,
    is_base64,
    normalize_line_endings,
    only_digits,
    only_letters,
    parse_query_string,
    remove_diacritics,
    remove_numbers,
    remove_special_characters,
    remove_whitespace,
    reverse,
    reverse_slash,
    sha256_hex,
    sha512_hex,
    to_csv_field,
    to_slug,
)


@dataclass(frozen=True)
class Operation:
    """A named transformation or predicate over one string."""

    name: str
    func: Callable[[str], Any]
    description: str

    def apply(self, value: str) -> Any:
        return self.func(value)


@dataclass
class OperationResult:
    """Input text paired with what the operation produced for it."""

    input: str
    output: Any


def _graphemes(value: str) -> list[str]:
    return list(grapheme_clusters(value))


_OPERATIONS = [
    # Normalization
    Operation("slug", to_slug, "Lowercase hyphenated URL-safe token"),
    Operation("remove-diacritics", remove_diacritics, "Strip non-spacing combining marks"),
    Operation("collapse-whitespace", collapse_whitespace, "Collapse whitespace runs and trim"),
    Operation("normalize-line-endings", normalize_line_endings, "Convert CRLF/CR to LF"),
    Operation("remove-special-characters", remove_special_characters, "Keep letters and digits"),
    Operation("only-digits", only_digits, "Keep digits"),
    Operation("only-letters", only_letters, "Keep letters"),
    Operation("remove-whitespace", remove_whitespace, "Drop whitespace"),
    Operation("remove-numbers", remove_numbers, "Drop digits"),
    Operation("reverse-slash", reverse_slash, "Swap '/' and '\\'"),
    Operation("title-case", to_title_case, "Capitalize each word"),
    # Segmentation
    Operation("graphemes", _graphemes, "Split into grapheme clusters"),
    Operation("grapheme-count", grapheme_count, "Count grapheme clusters"),
    Operation("reverse", reverse, "Reverse by grapheme cluster"),
    # Encoding
    Operation("base64-encode", base64_encode, "Encode UTF-8 text as Base64"),
    Operation("base64-decode", base64_decode, "Decode Base64, echo input when malformed"),
    Operation("is-base64", is_base64, "Check for decodable Base64"),
    Operation("sha256", sha256_hex, "SHA-256 hex digest"),
    Operation("sha512", sha512_hex, "SHA-512 hex digest"),
    Operation("byte-size", byte_size, "UTF-8 byte length"),
    Operation("to-csv-field", to_csv_field, "Quote as a CSV field"),
    # Query strings
    Operation("parse-query", parse_query_string, "Parse a URL query string"),
    # Conversion
    Operation("to-int", conversion.to_int, "Parse a 32-bit integer (0 on failure)"),
    Operation("to-float", conversion.to_float, "Parse a float (0.0 on failure)"),
    Operation("to-bool", conversion.to_bool, "Parse true/false (false on failure)"),
    # Predicates
    Operation("is-email", predicates.is_email_address, "Check email syntax"),
    Operation("is-url", predicates.is_url, "Check for an absolute http(s) URL"),
    Operation("is-ipv4", predicates.is_ipv4, "Check for a dotted-quad IPv4 address"),
    Operation("is-integer", predicates.is_integer, "Check for a 32-bit integer"),
    Operation("is-numeric", predicates.is_numeric, "Check for a number"),
    Operation("is-guid", predicates.is_guid, "Check for a GUID/UUID"),
    Operation("is-hex", predicates.is_hex, "Check for hexadecimal digits"),
    Operation("is-json", predicates.is_json, "Check for {...} or [...]"),
    Operation("is-palindrome", predicates.is_palindrome, "Check for a palindrome"),
    Operation("is-phone-number", predicates.is_phone_number, "Check for an E.164-style number"),
]

OPERATIONS: dict[str, Operation] = {op.name: op for op in _OPERATIONS}


def normalize_operation_name(name: str) -> str:
    """Canonical registry key: lowercase, underscores and spaces become hyphens."""
    return name.strip().lower().replace("_", "-").replace(" ", "-")


def get_operation(name: str) -> Operation:
    """Look up an operation by name.

    Raises:
        KeyError: If no operation has that name
    """
    key = normalize_operation_name(name)
    if key not in OPERATIONS:
        raise KeyError(f"Unknown operation: {name!r}. Available: {', '.join(sorted(OPERATIONS))}")
    return OPERATIONS[key]
