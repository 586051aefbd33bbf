"""Detection engine — stylometry, pattern matching, scoring, aggregation."""

from vgx.detection.aggregator import ScanAccumulator, aggregate
from vgx.detection.detector import (
    DetectError,
    Detector,
    DetectorConfig,
    combine_scores,
)
from vgx.detection.models import (
    PatternMatch,
    Result,
    ScanResult,
    StyleMetrics,
    confidence_level,
)
from vgx.detection.patterns import PatternDetector
from vgx.detection.stylometry import StyleAnalyzer

__all__ = [
    "DetectError",
    "Detector",
    "DetectorConfig",
    "PatternDetector",
    "PatternMatch",
    "Result",
    "ScanAccumulator",
    "ScanResult",
    "StyleAnalyzer",
    "StyleMetrics",
    "aggregate",
    "combine_scores",
    "confidence_level",
]
