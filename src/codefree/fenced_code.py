# -*- coding: utf-8 -*-
"""
Fenced code block removal.

Runs in two phases:
1. Terminated blocks - an opening fence and the nearest later line whose
   backtick run is at least as long. Blocks without such a line are skipped.
2. Unterminated blocks - the first opening fence left without a closing line
   swallows everything up to the end of the text.

A closing line keeps its line break unless non-whitespace characters follow
its backtick run, in which case they are removed together with the break.
"""
import logging
import re

from .spans import Span, iter_lines, line_end_with_break, remove_spans

logger = logging.getLogger(__name__)

# Leading whitespace, 3+ backticks, info string without backticks
OPENING_FENCE_RE = re.compile(r"[^\S\n]*(`{3,})[^`]*")
# Leading whitespace, backtick run, residue
CLOSING_RUN_RE = re.compile(r"[^\S\n]*(`+)(.*)")


class FenceLines:
    """
    Per-line fence data of a text.

    ``longest_after[i]`` is the longest closing run on line ``i`` or later,
    so checking whether a fence can be closed at all never rescans the text.
    """

    def __init__(self, text: str):
        self.bounds = list(iter_lines(text))
        self.opening_lengths: list[int] = []
        self.closing_runs: list[tuple[int, str]] = []

        for start, end in self.bounds:
            line = text[start:end]
            opening = OPENING_FENCE_RE.fullmatch(line)
            self.opening_lengths.append(len(opening.group(1)) if opening else 0)
            closing = CLOSING_RUN_RE.fullmatch(line)
            self.closing_runs.append(
                (len(closing.group(1)), closing.group(2)) if closing else (0, "")
            )

        self.longest_after = [0] * (len(self.bounds) + 1)
        for index in range(len(self.bounds) - 1, -1, -1):
            self.longest_after[index] = max(
                self.closing_runs[index][0], self.longest_after[index + 1]
            )

    def __len__(self):
        return len(self.bounds)

    def is_closed(self, index: int) -> bool:
        """Whether the opening fence on line ``index`` has a closing line."""
        return self.longest_after[index + 1] >= self.opening_lengths[index]

    def find_closing(self, index: int) -> tuple[int, str]:
        """Index and residue of the nearest line closing the fence on ``index``."""
        length = self.opening_lengths[index]
        closing = index + 1
        while self.closing_runs[closing][0] < length:
            closing += 1
        return closing, self.closing_runs[closing][1]


class FencedCodeStripper:
    """Deletes fenced code blocks, closed ones first and then open ones."""

    def find_terminated_spans(self, text: str) -> list[Span]:
        """Phase 1: spans of every fence block that has a closing line."""
        lines = FenceLines(text)
        spans: list[Span] = []

        index = 0
        while index < len(lines):
            if not lines.opening_lengths[index] or not lines.is_closed(index):
                # Unclosed fences are left for the second phase
                index += 1
                continue

            start = lines.bounds[index][0]
            closing_index, residue = lines.find_closing(index)
            closing_end = lines.bounds[closing_index][1]
            if residue.strip():
                spans.append(Span(start, line_end_with_break(text, closing_end)))
            else:
                spans.append(Span(start, closing_end))
            index = closing_index + 1

        return spans

    def find_unterminated_span(self, text: str) -> Span | None:
        """Phase 2: span from the first unclosed opening fence to end of text."""
        lines = FenceLines(text)
        for index in range(len(lines)):
            if lines.opening_lengths[index] and not lines.is_closed(index):
                return Span(lines.bounds[index][0], len(text))
        return None

    def strip(self, text: str) -> str:
        """Return text without its fenced code blocks."""
        text = remove_spans(text, self.find_terminated_spans(text))

        unterminated = self.find_unterminated_span(text)
        if unterminated is not None:
            logger.debug(
                "Unterminated code fence removed to end of text",
                extra={"offset": unterminated.start},
            )
            text = remove_spans(text, [unterminated])

        return text
