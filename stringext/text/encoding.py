"""Byte encoding, Base64 and hashing helpers.

Text is always turned into bytes as UTF-8. Python strings may hold unpaired
surrogates, which UTF-8 cannot represent; those are replaced with U+FFFD
before encoding so that none of these helpers raises on string input.
"""

import base64
import binascii
import hashlib

from loguru import logger

from stringext.utils.constants import Constants

# ASCII whitespace skipped by the decoder
_BASE64_IGNORED = str.maketrans("", "", " \t\r\n")


def encode_utf8(value: str) -> bytes:
    """Encode value as UTF-8, replacing unpaired surrogates with U+FFFD."""
    try:
        return value.encode(Constants.DEFAULT_ENCODING)
    except UnicodeEncodeError:
        cleaned = "".join(
            Constants.REPLACEMENT_CHARACTER if "\ud800" <= c <= "\udfff" else c for c in value
        )
        return cleaned.encode(Constants.DEFAULT_ENCODING)


def to_bytes(value: str | None) -> bytes | None:
    """UTF-8 bytes of value, or None for None."""
    if value is None:
        return None
    return encode_utf8(value)


def byte_size(value: str | None, encoding: str = Constants.DEFAULT_ENCODING) -> int:
    """Number of bytes value occupies in the given encoding.

    Args:
        value: Text to measure; None measures as 0
        encoding: Any codec name Python knows

    Returns:
        Byte count

    Raises:
        LookupError: If encoding is not a known codec
    """
    if value is None:
        return 0
    if encoding.replace("_", "-").lower() in ("utf-8", "utf8"):
        return len(encode_utf8(value))
    return len(value.encode(encoding, errors="replace"))


def base64_encode(value: str | None) -> str | None:
    """Encode text as standard Base64 (RFC 4648 alphabet, '=' padding).

    Examples:
        >>> base64_encode("hello")
        'aGVsbG8='
        >>> base64_encode(None) is None
        True
    """
    if value is None:
        return None
    return base64.b64encode(encode_utf8(value)).decode("ascii")


def try_base64_decode(value: str | None) -> tuple[bool, str | None]:
    """Decode Base64 text, reporting success explicitly.

    Args:
        value: Base64 text

    Returns:
        (True, decoded_text) on success, (False, value) otherwise. None and
        empty input count as failures.
    """
    if not value:
        return False, value

    try:
        raw = base64.b64decode(value.translate(_BASE64_IGNORED), validate=True)
    except (binascii.Error, ValueError) as e:
        logger.debug(f"Not Base64, returning input unchanged: {e}")
        return False, value

    return True, raw.decode(Constants.DEFAULT_ENCODING, errors="replace")


def base64_decode(value: str | None) -> str | None:
    """Decode standard Base64 back to text.

    Malformed input never raises: the original string is returned as is,
    so comparing the result with the argument tells whether decoding
    happened. Bytes that are not valid UTF-8 decode to U+FFFD.

    Examples:
        >>> base64_decode("aGVsbG8=")
        'hello'
        >>> base64_decode("not-valid-base64!!")
        'not-valid-base64!!'
    """
    _, decoded = try_base64_decode(value)
    return decoded


def is_base64(value: str | None) -> bool:
    """True when the trimmed value has a length multiple of 4 and decodes."""
    if not value:
        return False
    value = value.strip()
    if not value or len(value) % 4 != 0:
        return False
    decoded, _ = try_base64_decode(value)
    return decoded


def _hex_digest(value: str | None, algorithm: str) -> str | None:
    if value is None:
        return None
    return hashlib.new(algorithm, encode_utf8(value)).hexdigest()


def sha256_hex(value: str | None) -> str | None:
    """Lowercase hex SHA-256 digest of the UTF-8 bytes of value."""
    return _hex_digest(value, "sha256")


def sha512_hex(value: str | None) -> str | None:
    """Lowercase hex SHA-512 digest of the UTF-8 bytes of value."""
    return _hex_digest(value, "sha512")


def to_csv_field(value: str | None) -> str | None:
    """Quote value as a CSV field, doubling embedded quotes."""
    if value is None:
        return None
    return '"' + value.replace('"', '""') + '"'
