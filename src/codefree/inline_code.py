# -*- coding: utf-8 -*-
"""
Inline code span removal.

A backtick run opens a span that is closed by the next run of exactly the
same length; runs of other lengths in between are part of the span content.
When a run has no such partner, its shorter suffixes are tried in turn
(longest first) and the unused leading backticks stay in the text:

    text``code`text  ->  text`text

Spans never cross a paragraph break (a whitespace-only line) and their
content is never scanned again.

Runs are grouped by paragraph and length up front, so a whole pass stays
linear in the length of the text.
"""
import re
from bisect import bisect_right
from collections import defaultdict, deque

from .spans import Span, remove_spans

BACKTICK_RUN_RE = re.compile(r"`+")
# First line break of a whitespace-only line; overlapping breaks all match
PARAGRAPH_BREAK_RE = re.compile(r"\n(?=[^\S\n]*\n)")


def paragraph_break_ends(text: str) -> list[int]:
    """Sorted offsets just past every paragraph break in text."""
    return [
        text.index("\n", match.end()) + 1
        for match in PARAGRAPH_BREAK_RE.finditer(text)
    ]


class InlineCodeStripper:
    """Deletes inline code spans delimited by backtick runs."""

    def find_spans(self, text: str) -> list[Span]:
        """Spans of every inline code span, left to right."""
        runs = [match.span() for match in BACKTICK_RUN_RE.finditer(text)]
        break_ends = paragraph_break_ends(text)

        # Run indexes keyed by (paragraph, run length), in text order
        candidates: dict[tuple[int, int], deque[int]] = defaultdict(deque)
        paragraphs = []
        for index, (start, end) in enumerate(runs):
            paragraph = bisect_right(break_ends, start)
            paragraphs.append(paragraph)
            candidates[paragraph, end - start].append(index)

        spans: list[Span] = []
        index = 0
        while index < len(runs):
            run_start, run_end = runs[index]
            closing = None
            for opening_start in range(run_start, run_end):
                closing = self._next_run(
                    candidates, paragraphs[index], run_end - opening_start, index
                )
                if closing is not None:
                    spans.append(Span(opening_start, runs[closing][1]))
                    break

            index = closing + 1 if closing is not None else index + 1

        return spans

    @staticmethod
    def _next_run(
            candidates: dict[tuple[int, int], deque[int]],
            paragraph: int,
            length: int,
            after: int,
    ) -> int | None:
        """Index of the first run of ``length`` after ``after`` in the paragraph."""
        queue = candidates.get((paragraph, length))
        if not queue:
            return None
        # Scanning only moves forward, so earlier runs can be dropped for good
        while queue and queue[0] <= after:
            queue.popleft()
        return queue[0] if queue else None

    def strip(self, text: str) -> str:
        """Return text without its inline code spans."""
        return remove_spans(text, self.find_spans(text))
