# -*- coding: utf-8 -*-
"""
Line iteration and span deletion helpers shared by the strippers.
"""
from typing import Iterable, Iterator, NamedTuple


class Span(NamedTuple):
    """Half-open character range ``[start, end)`` to delete."""

    start: int
    end: int


def iter_lines(text: str) -> Iterator[tuple[int, int]]:
    """
    Yield ``(start, end)`` offsets of every line in text.

    ``end`` excludes the line break. The empty text has a single empty line,
    and a text ending with a line break has a trailing empty line.
    """
    start = 0
    while True:
        end = text.find("\n", start)
        if end == -1:
            yield start, len(text)
            return
        yield start, end
        start = end + 1


def line_end_with_break(text: str, end: int) -> int:
    """Offset just past the line break at ``end``, or ``end`` at end of text."""
    return min(end + 1, len(text))


def remove_spans(text: str, spans: Iterable[Span]) -> str:
    """Return text with the given sorted, non-overlapping spans removed."""
    spans = list(spans)
    if not spans:
        return text

    parts = []
    position = 0
    for start, end in spans:
        parts.append(text[position:start])
        position = end
    parts.append(text[position:])
    return "".join(parts)
