"""Stylometry analyzer — formatting statistics that hint at generated code.

Every feature is a pure function of the text. Features that have nothing
to measure (no identifiers, no lines) return a neutral or zero value
instead of dividing by zero.
"""

from __future__ import annotations

import math
import re
from typing import List, Optional

from vgx.detection.models import StyleMetrics
from vgx.patterns.catalog import PatternCatalog

_IDENTIFIER_RE = re.compile(r"\b([a-z][a-zA-Z0-9_]*)\b")
_CAMEL_CASE_RE = re.compile(r"[a-z]+(?:[A-Z][a-z]*)*")
_COMMENT_PREFIXES = ("//", "#", "/*", "*")

MIN_NAMING_TOKENS = 5
NEUTRAL = 0.5


def _is_blank(line: str) -> bool:
    return not line.strip()


def _indent_width(line: str) -> int:
    return len(line) - len(line.lstrip(" \t"))


class StyleAnalyzer:
    """Extract :class:`StyleMetrics` from raw source text."""

    def __init__(self, catalog: Optional[PatternCatalog] = None) -> None:
        self._catalog = catalog or PatternCatalog.default()

    def analyze(self, text: str) -> StyleMetrics:
        lines = text.split("\n")
        non_empty = [line for line in lines if not _is_blank(line)]

        return StyleMetrics(
            naming_consistency=self.naming_consistency(text),
            indentation_consistency=self.indentation_consistency(lines),
            comment_density=self.comment_density(lines),
            avg_line_length=self.avg_line_length(non_empty),
            line_length_variance=self.line_length_variance(non_empty),
            boilerplate_ratio=self.boilerplate_ratio(text, len(lines)),
            empty_line_ratio=self.empty_line_ratio(lines),
        )

    # ---- individual features ----

    @staticmethod
    def naming_consistency(text: str) -> float:
        """Share of identifiers following the dominant convention (camelCase or snake_case)."""
        tokens = _IDENTIFIER_RE.findall(text)
        if len(tokens) < MIN_NAMING_TOKENS:
            return NEUTRAL

        camel = 0
        snake = 0
        for token in tokens:
            if _CAMEL_CASE_RE.fullmatch(token):
                camel += 1
            if "_" in token and token.lower() == token:
                snake += 1
        return max(camel, snake) / len(tokens)

    @staticmethod
    def indentation_consistency(lines: List[str]) -> float:
        """Share of non-blank lines indented by a multiple of the inferred unit (2 or 4)."""
        indents = [_indent_width(line) for line in lines if not _is_blank(line)]
        if not indents:
            return NEUTRAL

        unit = 2 if any(i % 2 == 0 and i % 4 != 0 for i in indents) else 4
        consistent = sum(1 for i in indents if i % unit == 0)
        return consistent / len(indents)

    @staticmethod
    def comment_density(lines: List[str]) -> float:
        if not lines:
            return 0.0
        comments = sum(1 for line in lines if line.strip().startswith(_COMMENT_PREFIXES))
        return comments / len(lines)

    @staticmethod
    def avg_line_length(non_empty: List[str]) -> float:
        if not non_empty:
            return 0.0
        return sum(len(line) for line in non_empty) / len(non_empty)

    @classmethod
    def line_length_variance(cls, non_empty: List[str]) -> float:
        """Population standard deviation of line length (0 for fewer than two lines)."""
        if len(non_empty) < 2:
            return 0.0
        avg = cls.avg_line_length(non_empty)
        sum_squares = sum((len(line) - avg) ** 2 for line in non_empty)
        return math.sqrt(sum_squares / len(non_empty))

    def boilerplate_ratio(self, text: str, line_count: int) -> float:
        """Boilerplate matches per ten lines, capped at 1.0."""
        if line_count == 0:
            return 0.0
        matches = sum(
            sum(1 for _ in entry.regex.finditer(text)) for entry in self._catalog.boilerplate
        )
        return min(matches / (line_count / 10), 1.0)

    @staticmethod
    def empty_line_ratio(lines: List[str]) -> float:
        if not lines:
            return 0.0
        return sum(1 for line in lines if _is_blank(line)) / len(lines)
