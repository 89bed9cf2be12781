"""Grapheme-cluster segmentation."""

from collections.abc import Iterator

import regex

# \X matches one extended grapheme cluster (UAX #29)
_GRAPHEME_CLUSTER = regex.compile(r"\X")


class TextElements:
    """Lazy, restartable sequence of the grapheme clusters of a text.

    Nothing is computed up front. Every call to iter() starts a new left to
    right scan of the same text, so the sequence can be consumed any number
    of times with identical results.

    Attributes:
        text: The segmented text (empty string when None was given)
    """

    __slots__ = ("text",)

    def __init__(self, text: str | None) -> None:
        self.text = text or ""

    def __iter__(self) -> Iterator[str]:
        for match in _GRAPHEME_CLUSTER.finditer(self.text):
            yield match.group()

    def __repr__(self) -> str:
        return f"TextElements({self.text!r})"


def grapheme_clusters(value: str | None) -> TextElements:
    """Segment text into user-perceived characters.

    Args:
        value: Text to segment; None behaves like an empty string

    Returns:
        TextElements yielding each cluster as a string

    Examples:
        >>> len(list(grapheme_clusters("e\\u0301")))
        1
        >>> list(grapheme_clusters(""))
        []
    """
    return TextElements(value)


def grapheme_count(value: str | None) -> int:
    """Number of grapheme clusters in value (0 for None)."""
    return sum(1 for _ in grapheme_clusters(value))


def reverse(value: str | None) -> str | None:
    """Reverse text cluster by cluster so combining marks stay on their base."""
    if not value:
        return value
    return "".join(reversed(list(grapheme_clusters(value))))
