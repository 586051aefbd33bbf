"""Pattern detector — scores text by the generator idioms it contains."""

from __future__ import annotations

from typing import List, Optional, Tuple

from vgx.detection.models import PatternMatch
from vgx.patterns.catalog import PatternCatalog

SNIPPET_MAX = 80
_ELLIPSIS = "..."


def _snippet(text: str) -> str:
    if len(text) <= SNIPPET_MAX:
        return text
    return text[: SNIPPET_MAX - len(_ELLIPSIS)] + _ELLIPSIS


class PatternDetector:
    """Match every catalog pattern against a text.

    Weights add up across patterns and across repeated matches of the same
    pattern; the total is capped at 1.0.
    """

    def __init__(self, catalog: Optional[PatternCatalog] = None) -> None:
        self._catalog = catalog or PatternCatalog.default()

    @property
    def catalog(self) -> PatternCatalog:
        return self._catalog

    def detect(self, text: str) -> Tuple[List[PatternMatch], float]:
        matches: List[PatternMatch] = []
        total = 0.0

        for entry in self._catalog.patterns:
            for m in entry.regex.finditer(text):
                start, end = m.span()
                matches.append(
                    PatternMatch(
                        name=entry.name,
                        confidence=entry.weight,
                        line_start=text.count("\n", 0, start) + 1,
                        line_end=text.count("\n", 0, end) + 1,
                        snippet=_snippet(m.group(0)),
                    )
                )
                total += entry.weight

        return matches, min(total, 1.0)
