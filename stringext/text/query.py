"""Query-string parsing."""

import re

from loguru import logger

from stringext.utils.constants import Constants

_ESCAPE_RUN = re.compile(r"(?:%[0-9A-Fa-f]{2})+")


def _decode_escape_run(run: str) -> str:
    """Decode consecutive %XX escapes as UTF-8.

    Byte sequences that are not valid UTF-8 keep their original escapes.
    """
    data = bytes.fromhex(run.replace("%", ""))
    parts = []
    pos = 0
    while pos < len(data):
        try:
            parts.append(data[pos:].decode(Constants.DEFAULT_ENCODING))
            break
        except UnicodeDecodeError as e:
            bad_start = pos + e.start
            bad_end = pos + e.end
            parts.append(data[pos:bad_start].decode(Constants.DEFAULT_ENCODING))
            # each byte is exactly three characters of the run
            parts.append(run[3 * bad_start : 3 * bad_end])
            pos = bad_end
    return "".join(parts)


def percent_decode(value: str) -> str:
    """Decode %XX escapes, leaving malformed or non-UTF-8 escapes as written.

    '+' is not treated as a space.

    Examples:
        >>> percent_decode("caf%C3%A9")
        'café'
        >>> percent_decode("%FF%zz")
        '%FF%zz'
    """
    if "%" not in value:
        return value
    return _ESCAPE_RUN.sub(lambda m: _decode_escape_run(m.group()), value)


def parse_query_string(value: str | None) -> dict[str, str]:
    """Parse a URL query string into a dict.

    Leading '?' characters are stripped and the rest is split on '&'. Each
    pair must split on '=' into exactly two parts; pairs with no '=' or with
    more than one are dropped. Keys and values are percent-decoded as UTF-8
    ('+' stays a plus sign, escapes that do not form UTF-8 are kept as
    written). When a key repeats, the last value wins.

    Args:
        value: Query string, with or without the leading '?'

    Returns:
        Mapping of parameter name to value; empty for None or blank input

    Examples:
        >>> parse_query_string("?a=1&b=2&bad&c=3")
        {'a': '1', 'b': '2', 'c': '3'}
        >>> parse_query_string("x=caf%C3%A9")
        {'x': 'café'}
    """
    params: dict[str, str] = {}
    if value is None or not value.strip():
        return params

    query = value.lstrip(Constants.QUERY_PREFIX)
    for pair in query.split(Constants.QUERY_PAIR_SEPARATOR):
        parts = pair.split(Constants.QUERY_KEY_VALUE_SEPARATOR)
        if len(parts) != 2:
            logger.debug(f"Dropping malformed query pair: {pair!r}")
            continue
        key, val = parts
        params[percent_decode(key)] = percent_decode(val)

    return params
