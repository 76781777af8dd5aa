# -*- coding: utf-8 -*-
"""
YAML front matter removal.

Only a block opening on the very first line is recognized, and only the
first such block is removed.
"""
from .spans import Span, iter_lines, line_end_with_break, remove_spans

FRONT_MATTER_DELIMITER = "---"


class FrontMatterStripper:
    """Deletes a leading ``---`` delimited block when it is closed."""

    def find_spans(self, text: str) -> list[Span]:
        """Span of the leading front matter block, if it is closed."""
        lines = iter_lines(text)
        start, end = next(lines)
        if text[start:end] != FRONT_MATTER_DELIMITER:
            return []

        for start, end in lines:
            if text[start:end] == FRONT_MATTER_DELIMITER:
                return [Span(0, line_end_with_break(text, end))]

        # Unterminated front matter is kept as is
        return []

    def strip(self, text: str) -> str:
        """Return text without its leading front matter block."""
        return remove_spans(text, self.find_spans(text))
