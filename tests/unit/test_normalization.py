"""Unit tests for diacritic removal, slugs and character-class filters.

Tests verify behavior on representative inputs. Each test has a single assertion.
"""

import pytest

from stringext.text import (
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


class TestRemoveDiacritics:
    """Test remove_diacritics behavior."""

    def test_strips_acute_accent(self) -> None:
        """Precomposed é loses its accent."""
        assert remove_diacritics("café") == "cafe"

    def test_strips_decomposed_marks(self) -> None:
        """Already-decomposed e + U+0301 becomes plain e."""
        assert remove_diacritics("cafe\u0301") == "cafe"

    def test_strips_stacked_vietnamese_marks(self) -> None:
        """Letters carrying two marks lose both."""
        assert remove_diacritics("Tiếng Việt") == "Tieng Viet"

    def test_strips_arabic_harakat(self) -> None:
        """Arabic vowel marks (category Mn) are removed from non-Latin script."""
        assert remove_diacritics("\u0643\u064e\u062a\u064e\u0628\u064e") == "\u0643\u062a\u0628"

    def test_keeps_spacing_modifier_letters(self) -> None:
        """Modifier letters such as U+02BC are not combining marks and stay."""
        assert remove_diacritics("na\u02bcvi") == "na\u02bcvi"

    def test_keeps_characters_without_decomposition(self) -> None:
        """ø and ß have no canonical decomposition and pass through."""
        assert remove_diacritics("søß") == "søß"

    def test_result_is_nfc(self) -> None:
        """Remaining sequences are recomposed (Hangul jamo join into a syllable)."""
        assert remove_diacritics("\u1100\u1161") == "\uac00"

    @pytest.mark.parametrize("value", ["", "   ", "\t\n", None])
    def test_blank_input_returned_unchanged(self, value) -> None:
        """None, empty and whitespace-only input is echoed back."""
        assert remove_diacritics(value) is value

    def test_unpaired_surrogate_does_not_raise(self) -> None:
        """Lone surrogates are kept rather than causing an error."""
        assert remove_diacritics("a\ud800é") == "a\ud800e"


class TestToSlug:
    """Test to_slug behavior."""

    def test_basic_phrase(self) -> None:
        """Punctuation and spaces collapse into single hyphens."""
        assert to_slug("Hello, World!") == "hello-world"

    def test_diacritics_are_removed_first(self) -> None:
        """Accented letters keep their base letter in the slug."""
        assert to_slug("Crème Brûlée") == "creme-brulee"

    def test_trims_leading_and_trailing_hyphens(self) -> None:
        """Separators at the ends are dropped."""
        assert to_slug("  --Hello--  ") == "hello"

    def test_collapses_existing_hyphen_runs(self) -> None:
        """Runs of hyphens in the input become one."""
        assert to_slug("a---b") == "a-b"

    def test_keeps_digits(self) -> None:
        """Digits are part of the slug alphabet."""
        assert to_slug("Top 10 Tips") == "top-10-tips"

    def test_dotted_capital_i_becomes_plain_i(self) -> None:
        """Turkish İ lowers to plain i, independent of locale."""
        assert to_slug("İstanbul") == "istanbul"

    def test_non_latin_letters_are_dropped(self) -> None:
        """Characters outside [a-z0-9] never survive, even letters."""
        assert to_slug("straße") == "stra-e"

    def test_all_punctuation_yields_empty_string(self) -> None:
        """Nothing sluggable produces an empty slug."""
        assert to_slug("!!!") == ""

    def test_whitespace_only_returned_unchanged(self) -> None:
        """Whitespace-only input is echoed, not emptied."""
        assert to_slug("   ") == "   "

    def test_empty_returned_unchanged(self) -> None:
        """Empty input stays empty."""
        assert to_slug("") == ""

    def test_none_returned_unchanged(self) -> None:
        """None propagates."""
        assert to_slug(None) is None

    @pytest.mark.parametrize(
        "value",
        ["Hello, World!", "  Ünïcödé  tëxt ", "a--b__c", "!!!", "   ", "ÅNGSTRÖM 42", "x"],
    )
    def test_idempotent(self, value: str) -> None:
        """Slugging a slug changes nothing."""
        assert to_slug(to_slug(value)) == to_slug(value)


class TestCollapseWhitespace:
    """Test collapse_whitespace behavior."""

    def test_collapses_mixed_whitespace(self) -> None:
        """Tabs, newlines and space runs become single spaces."""
        assert collapse_whitespace("a \t\n b   c") == "a b c"

    def test_trims_ends(self) -> None:
        """Leading and trailing whitespace is removed."""
        assert collapse_whitespace("  a b  ") == "a b"

    def test_whitespace_only_returned_unchanged(self) -> None:
        """Whitespace-only input is echoed."""
        assert collapse_whitespace("   ") == "   "


class TestLineEndings:
    """Test line-ending helpers."""

    def test_normalizes_crlf_and_cr(self) -> None:
        """CRLF and lone CR both become LF."""
        assert normalize_line_endings("a\r\nb\rc\nd") == "a\nb\nc\nd"

    def test_replace_line_feeds_default(self) -> None:
        """LF becomes a space by default."""
        assert replace_line_feeds("a\nb") == "a b"

    def test_replace_line_feeds_custom(self) -> None:
        """LF becomes the given replacement."""
        assert replace_line_feeds("a\nb", " | ") == "a | b"


class TestCharacterFilters:
    """Test character-class filters."""

    def test_remove_special_characters(self) -> None:
        """Only letters and digits survive."""
        assert remove_special_characters("a-b_c!1 é") == "abc1é"

    def test_only_letters_or_digits_matches_remove_special(self) -> None:
        """Both names give the same result."""
        assert only_letters_or_digits("x#9") == remove_special_characters("x#9")

    def test_only_digits(self) -> None:
        """Letters and punctuation are removed."""
        assert only_digits("+1 (555) 010-2030") == "15550102030"

    def test_only_letters(self) -> None:
        """Digits and punctuation are removed."""
        assert only_letters("R2-D2 ünit") == "RDünit"

    def test_remove_whitespace(self) -> None:
        """Every whitespace character is removed."""
        assert remove_whitespace(" a\tb\nc ") == "abc"

    def test_remove_numbers(self) -> None:
        """Digits are removed."""
        assert remove_numbers("abc123def") == "abcdef"

    def test_remove_chars(self) -> None:
        """Listed characters are removed."""
        assert remove_chars("a,b;c", ",", ";") == "abc"

    def test_remove_chars_without_chars_is_identity(self) -> None:
        """No characters given leaves the text unchanged."""
        assert remove_chars("a,b") == "a,b"

    def test_reverse_slash_swaps_both_directions(self) -> None:
        """Forward and back slashes trade places."""
        assert reverse_slash("a/b\\c") == "a\\b/c"

    @pytest.mark.parametrize(
        "func",
        [only_digits, only_letters, remove_whitespace, remove_numbers, reverse_slash],
    )
    def test_none_propagates(self, func) -> None:
        """None input returns None."""
        assert func(None) is None
