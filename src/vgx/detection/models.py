"""Detection data models — style metrics, pattern matches, per-file and scan results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

CONFIDENCE_LEVELS = ("very_low", "low", "medium", "high", "very_high")


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def confidence_level(score: float) -> str:
    """Bucket a 0-1 score. Boundaries are exclusive-lower / inclusive-upper."""
    if score > 0.85:
        return "very_high"
    if score > 0.70:
        return "high"
    if score > 0.50:
        return "medium"
    if score > 0.30:
        return "low"
    return "very_low"


STYLE_WEIGHTS: dict[str, float] = {
    "naming": 0.20,
    "indentation": 0.20,
    "boilerplate": 0.20,
    "comment": 0.10,
    "linevar": 0.15,
    "emptyline": 0.10,
    "linelen": 0.05,
}


@dataclass(frozen=True)
class StyleMetrics:
    """Normalised style features extracted from one piece of text."""

    naming_consistency: float
    indentation_consistency: float
    comment_density: float
    avg_line_length: float
    line_length_variance: float  # population standard deviation
    boilerplate_ratio: float
    empty_line_ratio: float

    def signals(self) -> dict[str, float]:
        """Per-feature AI signals, each clamped to [0, 1]."""
        raw = {
            "naming": self.naming_consistency,
            "indentation": self.indentation_consistency,
            "boilerplate": self.boilerplate_ratio,
            "comment": 1 - abs(self.comment_density - 0.15) * 5,
            "linevar": max(0.0, 1 - self.line_length_variance / 30),
            "emptyline": 1 - abs(self.empty_line_ratio - 0.15) * 5,
            "linelen": 1 - abs(self.avg_line_length - 45) / 45,
        }
        return {k: clamp(v) for k, v in raw.items()}

    def ai_confidence(self) -> float:
        """Weighted combination of the feature signals (weights sum to 1.0)."""
        signals = self.signals()
        return clamp(sum(signals[k] * w for k, w in STYLE_WEIGHTS.items()))

    def confidence_level(self) -> str:
        return confidence_level(self.ai_confidence())


@dataclass(frozen=True)
class PatternMatch:
    """One occurrence of a catalogued generator idiom."""

    name: str
    confidence: float  # the pattern's weight
    line_start: int  # 1-based
    line_end: int
    snippet: str


@dataclass(frozen=True)
class Result:
    """Analysis result for a single file or snippet."""

    file_path: str
    ai_confidence: float
    confidence_level: str
    style_score: float
    pattern_score: float
    patterns: Tuple[PatternMatch, ...] = ()
    is_ai_generated: bool = False
    lines_of_code: int = 0


@dataclass
class ScanResult:
    """Aggregated results for a directory walk or batch of files.

    ``results`` keeps walk order; callers sort for display.
    """

    files_scanned: int = 0
    ai_detected: int = 0
    human_written: int = 0
    max_ai_confidence: float = 0.0
    ai_percentage: float = 0.0
    results: List[Result] = field(default_factory=list)

    @property
    def ai_results(self) -> List[Result]:
        return [r for r in self.results if r.is_ai_generated]

    def sorted_results(self) -> List[Result]:
        """Results ordered by confidence, highest first (copy)."""
        return sorted(self.results, key=lambda r: r.ai_confidence, reverse=True)
