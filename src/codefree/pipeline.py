# -*- coding: utf-8 -*-
"""
Code-free projection pipeline for markdown documents.

Applies a fixed chain of steps, each consuming the full output of the
previous one:
1. Front Matter - Remove a leading YAML block delimited by ``---`` lines
2. Fenced Code - Remove terminated fenced blocks, then unterminated ones
3. Inline Code - Remove backtick-delimited code spans

The order matters: a front matter block may contain fence-like lines, and
fence delimiters must be gone before inline spans are matched.

Every retained character keeps its original order, so the result is always
a subsequence of the input.
"""
import logging
from dataclasses import dataclass, field

from .fenced_code import FencedCodeStripper
from .front_matter import FrontMatterStripper
from .inline_code import InlineCodeStripper

logger = logging.getLogger(__name__)


@dataclass
class SanitizeResult:
    """Result of the code-free pipeline."""

    text: str
    original_length: int = 0
    steps_applied: list[str] = field(default_factory=list)

    @property
    def removed_chars(self) -> int:
        return self.original_length - len(self.text)


class CodeFreePipeline:
    """
    Pipeline producing the code-free projection of a document.

    Steps are not configurable; they always run in the same order.
    """

    def __init__(self):
        self._steps = [
            ("front_matter", FrontMatterStripper()),
            ("fenced_code", FencedCodeStripper()),
            ("inline_code", InlineCodeStripper()),
        ]

    def process(self, text: str) -> SanitizeResult:
        """
        Run text through every step.

        Args:
            text: Raw document text

        Returns:
            SanitizeResult with the sanitized text and the steps that
            removed something
        """
        result = SanitizeResult(text=text, original_length=len(text))
        current = text

        for name, stripper in self._steps:
            stripped = stripper.strip(current)
            if len(stripped) != len(current):
                result.steps_applied.append(name)
                logger.debug(
                    f"Step {name} removed {len(current) - len(stripped)} chars"
                )
            current = stripped

        result.text = current
        return result


# Global pipeline instance
codefree_pipeline = CodeFreePipeline()


def sanitize(text: str) -> str:
    """Return the code-free projection of text."""
    return codefree_pipeline.process(text).text
