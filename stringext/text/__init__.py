"""Text normalization and encoding utilities."""

from stringext.text.encoding import (
    base64_decode,
    base64_encode,
    byte_size,
    encode_utf8,
    is_base64,
    sha256_hex,
    sha512_hex,
    to_bytes,
    to_csv_field,
    try_base64_decode,
)
from stringext.text.normalization import (
    collapse_whitespace,
    normalize_line_endings,
    only_digits,
    only_letters,
    only_letters_or_digits,
    remove_chars,
    remove_diacritics,
    remove_numbers,
    remove_special_characters,
    remove_whitespace,
    replace_line_feeds,
    reverse_slash,
    to_slug,
)
from stringext.text.query import parse_query_string, percent_decode
from stringext.text.segmentation import TextElements, grapheme_clusters, grapheme_count, reverse

__all__ = [
    "TextElements",
    "base64_decode",
    "base64_encode",
    "byte_size",
    "collapse_whitespace",
    "encode_utf8",
    "grapheme_clusters",
    "grapheme_count",
    "is_base64",
    "normalize_line_endings",
    "only_digits",
    "only_letters",
    "only_letters_or_digits",
    "parse_query_string",
    "percent_decode",
    "remove_chars",
    "remove_diacritics",
    "remove_numbers",
    "remove_special_characters",
    "remove_whitespace",
    "replace_line_feeds",
    "reverse",
    "reverse_slash",
    "sha256_hex",
    "sha512_hex",
    "to_bytes",
    "to_csv_field",
    "to_slug",
    "try_base64_decode",
]
