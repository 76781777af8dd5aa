# -*- coding: utf-8 -*-
"""
Codefree - code-free projection of markdown documents.

Removes YAML front matter, fenced code blocks and inline code spans while
keeping every other character in place.
"""
__version__ = "1.0.0"

from .fenced_code import FencedCodeStripper  # noqa: E402
from .front_matter import FrontMatterStripper  # noqa: E402
from .inline_code import InlineCodeStripper  # noqa: E402
from .pipeline import CodeFreePipeline, SanitizeResult, sanitize  # noqa: E402

__all__ = [
    "CodeFreePipeline",
    "FencedCodeStripper",
    "FrontMatterStripper",
    "InlineCodeStripper",
    "SanitizeResult",
    "sanitize",
    "__version__",
]
