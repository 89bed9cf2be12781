"""Unit tests for query-string parsing."""

import pytest

from stringext.text import parse_query_string


class TestParseQueryString:
    """Test parse_query_string behavior."""

    def test_malformed_pair_is_dropped(self) -> None:
        """A pair without '=' is skipped and the rest is kept."""
        assert parse_query_string("?a=1&b=2&bad&c=3") == {"a": "1", "b": "2", "c": "3"}

    def test_without_leading_question_mark(self) -> None:
        """The '?' prefix is optional."""
        assert parse_query_string("a=1&b=2") == {"a": "1", "b": "2"}

    def test_repeated_question_marks_are_stripped(self) -> None:
        """Every leading '?' is removed."""
        assert parse_query_string("??a=1") == {"a": "1"}

    def test_pair_with_two_equals_is_dropped(self) -> None:
        """'a=b=c' does not split into exactly two parts."""
        assert parse_query_string("a=b=c&d=4") == {"d": "4"}

    def test_empty_value_is_kept(self) -> None:
        """'a=' gives an empty value, not a dropped pair."""
        assert parse_query_string("a=&b=2") == {"a": "", "b": "2"}

    def test_empty_segments_are_ignored(self) -> None:
        """Doubled separators produce nothing."""
        assert parse_query_string("a=1&&b=2") == {"a": "1", "b": "2"}

    def test_percent_decoding_uses_utf8(self) -> None:
        """Escapes decode as UTF-8 in keys and values."""
        assert parse_query_string("na%20me=caf%C3%A9") == {"na me": "café"}

    def test_plus_is_not_a_space(self) -> None:
        """'+' stays a literal plus sign."""
        assert parse_query_string("q=a+b") == {"q": "a+b"}

    def test_non_utf8_escape_kept_as_written(self) -> None:
        """An escape that is not UTF-8 stays escaped instead of becoming U+FFFD."""
        assert parse_query_string("a=%FF") == {"a": "%FF"}

    def test_only_invalid_escapes_kept(self) -> None:
        """Valid escapes around an invalid byte still decode."""
        assert parse_query_string("x=caf%C3%A9%ff%20!") == {"x": "café%ff !"}

    def test_truncated_sequence_kept(self) -> None:
        """A multi-byte sequence cut short keeps its escapes."""
        assert parse_query_string("x=%E2%82") == {"x": "%E2%82"}

    def test_malformed_escape_kept(self) -> None:
        """'%' not followed by two hex digits is literal."""
        assert parse_query_string("x=100%&y=%zz") == {"x": "100%", "y": "%zz"}

    def test_last_value_wins_for_duplicate_keys(self) -> None:
        """Repeated keys keep the final value."""
        assert parse_query_string("a=1&a=2") == {"a": "2"}

    @pytest.mark.parametrize("value", [None, "", "   ", "?"])
    def test_empty_input_gives_empty_dict(self, value) -> None:
        """Nothing to parse yields an empty mapping."""
        assert parse_query_string(value) == {}

    def test_returns_new_dict_each_call(self) -> None:
        """Results are independent objects."""
        first = parse_query_string("a=1")
        first["b"] = "2"
        assert parse_query_string("a=1") == {"a": "1"}
