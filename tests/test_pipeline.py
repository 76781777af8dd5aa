# -*- coding: utf-8 -*-
"""
Tests for the code-free pipeline.
"""
import random

import pytest

from codefree import sanitize
from codefree.pipeline import CodeFreePipeline, SanitizeResult
from codefree.spans import Span, iter_lines, remove_spans


def _is_subsequence(candidate: str, text: str) -> bool:
    remaining = iter(text)
    return all(char in remaining for char in candidate)


def _random_documents(count: int, seed: int = 1234):
    """Documents built from markdown-ish fragments."""
    fragments = [
        "---", "```", "````", "`", "``", " ", "\n", "\n\n", "text", "ts",
        "key: value", "[[link]]", "-", "\t",
    ]
    rng = random.Random(seed)
    for _ in range(count):
        yield "".join(rng.choice(fragments) for _ in range(rng.randint(0, 30)))


class TestSanitizeResult:
    """Tests for SanitizeResult dataclass."""

    def test_default_values(self):
        """Should have correct default values."""
        result = SanitizeResult(text="text")

        assert result.text == "text"
        assert result.original_length == 0
        assert result.steps_applied == []

    def test_removed_chars(self):
        """Should compute the number of removed characters."""
        result = SanitizeResult(text="abc", original_length=10)

        assert result.removed_chars == 7


class TestSpans:
    """Tests for the span helpers."""

    def test_iter_lines(self):
        """Should yield offsets of every line, trailing empty one included."""
        assert list(iter_lines("a\nbc\n")) == [(0, 1), (2, 4), (5, 5)]
        assert list(iter_lines("")) == [(0, 0)]

    def test_remove_spans(self):
        """Should keep everything outside the spans in order."""
        assert remove_spans("0123456789", [Span(1, 3), Span(5, 6)]) == "0346789"
        assert remove_spans("abc", []) == "abc"
        assert remove_spans("abc", [Span(0, 3)]) == ""

    def test_remove_spans_accepts_iterators(self):
        """Should consume any iterable of spans, including an empty range at 0."""
        assert remove_spans("abc", (span for span in [Span(0, 1)])) == "bc"
        assert remove_spans("abc", [Span(0, 0)]) == "abc"
        assert remove_spans("abc", iter([])) == "abc"


class TestCodeFreePipeline:
    """Tests for CodeFreePipeline."""

    def test_removes_all_code(self, pipeline, sample_document):
        """Should reduce a document to its prose."""
        result = pipeline.process(sample_document)

        assert result.text == "text\n\ntexttext\n"
        assert result.steps_applied == ["front_matter", "fenced_code", "inline_code"]
        assert result.original_length == len(sample_document)
        assert result.removed_chars == len(sample_document) - len(result.text)

    def test_front_matter_not_at_start(self, pipeline):
        """Should keep a --- block that does not open the document."""
        text = "\n---\na: a\n---\n" + "text`text\n" + "```\ncode\n```\n" + "text`text\n"

        result = pipeline.process(text)

        assert result.text == "\n---\na: a\n---\ntext`text\n\ntext`text\n"
        assert result.steps_applied == ["fenced_code"]

    def test_fence_inside_front_matter(self, pipeline):
        """Should remove front matter before looking for fences."""
        text = "---\nsnippet: |\n  ```\n---\nbody `x` end\n"

        assert pipeline.process(text).text == "body  end\n"

    def test_fence_delimiters_not_read_as_inline(self, pipeline):
        """Should remove fences before inline spans are matched."""
        text = "a `b` c\n```\n`code\n```\nd `e` f\n"

        assert pipeline.process(text).text == "a  c\n\nd  f\n"

    def test_removed_fence_leaves_paragraph_break(self, pipeline):
        """Should keep the closing line break so runs around a block stay apart."""
        text = "a `b\n```\ncode\n```\nc` d\n"

        assert pipeline.process(text).text == "a `b\n\nc` d\n"

    def test_unchanged_text_has_no_steps(self, pipeline):
        """Should report no steps for plain prose."""
        result = pipeline.process("Just [[a link]] here.\n")

        assert result.text == "Just [[a link]] here.\n"
        assert result.steps_applied == []
        assert result.removed_chars == 0

    def test_empty_text(self, pipeline):
        """Should accept the empty text."""
        assert pipeline.process("").text == ""


class TestSanitize:
    """Tests for the sanitize entry point."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("---\nnum: 1\n---\ncontent", "content"),
            ("---\n---\n", ""),
            (" ---\nfront\n---\n", " ---\nfront\n---\n"),
            ("------\n", "------\n"),
            ("```ts\ncode\n```\n", "\n"),
            ("```\ncode\n```text\n", ""),
            ("```\ncode\n``` \n", "\n"),
            ("````\ncode\n```", ""),
            ("text`code`text", "texttext"),
            ("text``code``text", "texttext"),
            ("text`code``text", "text`code``text"),
            ("text``code`text", "text`text"),
            ("`` `\ncode\n```\n", "`\ncode\n"),
            ("```ts`", "``"),
        ],
    )
    def test_scenarios(self, text, expected):
        """Should produce the documented projections."""
        assert sanitize(text) == expected

    def test_output_is_subsequence(self):
        """Should never introduce or reorder characters."""
        for text in _random_documents(300):
            assert _is_subsequence(sanitize(text), text), repr(text)

    def test_deterministic(self):
        """Should return identical output for identical input."""
        for text in _random_documents(50, seed=99):
            assert sanitize(text) == sanitize(text)

    def test_closed_fences_disappear(self):
        """Should remove every line of closed fenced blocks."""
        rng = random.Random(7)
        for _ in range(50):
            blocks = []
            for _ in range(rng.randint(1, 4)):
                fence = "`" * rng.randint(3, 5)
                body = "\n".join(rng.choice(["x = 1", "`y`", "", "``"]) for _ in range(3))
                blocks.append(f"{fence}lang\n{body}\n{fence}\n")
            text = "prose\n" + "prose\n".join(blocks)

            assert "`" not in sanitize(text)
            assert sanitize(text).count("prose") == len(blocks)

    def test_equal_length_spans_disappear(self):
        """Should remove every span delimited by equal runs on one line."""
        rng = random.Random(11)
        for _ in range(50):
            pieces = []
            for _ in range(rng.randint(1, 5)):
                ticks = "`" * rng.randint(1, 3)
                pieces.append(f"word {ticks}code{ticks} ")
            text = "".join(pieces)

            assert sanitize(text) == "word  " * len(pieces)
