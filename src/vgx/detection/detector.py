"""Detector — combines style and pattern scores, and aggregates directory scans."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, replace
from pathlib import Path
from typing import FrozenSet, Optional, Union

from vgx.config.schema import DEFAULT_EXTENSIONS, DEFAULT_SKIP_DIRS, VgxConfig
from vgx.detection.aggregator import ScanAccumulator, aggregate
from vgx.detection.models import Result, ScanResult, clamp, confidence_level
from vgx.detection.patterns import PatternDetector
from vgx.detection.stylometry import StyleAnalyzer
from vgx.detection.walk import iter_source_files
from vgx.patterns.catalog import PatternCatalog

logger = logging.getLogger(__name__)

STYLE_WEIGHT = 0.45
PATTERN_WEIGHT = 0.55
DEFAULT_THRESHOLD = 0.70


class DetectError(Exception):
    """Raised when a file or path cannot be analyzed."""


def combine_scores(style_score: float, pattern_score: float) -> float:
    """Weighted combination; pattern evidence counts slightly more than style."""
    return clamp(style_score) * STYLE_WEIGHT + clamp(pattern_score) * PATTERN_WEIGHT


@dataclass(frozen=True)
class DetectorConfig:
    """Decision threshold (fraction) plus the directory-walk catalogs."""

    threshold: float = DEFAULT_THRESHOLD
    extensions: FrozenSet[str] = frozenset(DEFAULT_EXTENSIONS)
    skip_dirs: FrozenSet[str] = frozenset(DEFAULT_SKIP_DIRS)

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be a fraction in [0, 1], got {self.threshold}")

    @classmethod
    def from_config(cls, config: VgxConfig) -> "DetectorConfig":
        return cls(
            threshold=config.threshold_fraction,
            extensions=frozenset(config.extensions),
            skip_dirs=frozenset(config.skip_dirs),
        )


class Detector:
    """Per-file classifier and directory aggregator.

    Holds no mutable state: a detector can be shared between threads, and
    changing the threshold produces a new detector.
    """

    def __init__(
        self,
        config: Optional[DetectorConfig] = None,
        catalog: Optional[PatternCatalog] = None,
    ) -> None:
        self.config = config or DetectorConfig()
        self.catalog = catalog or PatternCatalog.default()
        self._style = StyleAnalyzer(self.catalog)
        self._patterns = PatternDetector(self.catalog)

    @property
    def threshold(self) -> float:
        return self.config.threshold

    def with_threshold(self, threshold: float) -> "Detector":
        return Detector(replace(self.config, threshold=threshold), self.catalog)

    # ---- single text / file ----

    def analyze_code(self, text: str, label: str = "") -> Result:
        """Classify *text*. *label* is reported back but never scored."""
        style_score = clamp(self._style.analyze(text).ai_confidence())
        matches, pattern_score = self._patterns.detect(text)
        pattern_score = clamp(pattern_score)
        combined = combine_scores(style_score, pattern_score)

        return Result(
            file_path=label,
            ai_confidence=combined,
            confidence_level=confidence_level(combined),
            style_score=style_score,
            pattern_score=pattern_score,
            patterns=tuple(matches),
            is_ai_generated=combined >= self.config.threshold,
            lines_of_code=len(text.split("\n")),
        )

    def analyze_file(self, path: Union[str, Path]) -> Result:
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8", errors="replace")
        except OSError as exc:
            raise DetectError(f"Cannot read {path}: {exc.strerror or exc}") from exc
        return self.analyze_code(text, str(path))

    # ---- directories ----

    def scan_directory(
        self,
        root: Union[str, Path],
        stop: Optional[threading.Event] = None,
    ) -> ScanResult:
        """Walk *root*, analyze every recognised source file, and aggregate.

        Files that cannot be read or analyzed are left out and the walk
        continues. When *stop* is set the walk ends early and the partial
        result is returned.
        """
        root = Path(root)
        if not root.is_dir():
            raise DetectError(f"Not a directory: {root}")

        acc = ScanAccumulator()
        for path in iter_source_files(root, self.config.extensions, self.config.skip_dirs):
            if stop is not None and stop.is_set():
                logger.info("Scan of %s stopped after %d file(s)", root, acc.files_scanned)
                break
            try:
                result = self.analyze_file(path)
            except Exception as exc:  # per-file failures never abort the walk
                logger.debug("Skipping %s: %s", path, exc)
                continue
            acc.add(result)
        return acc.finalize()

    def scan_path(
        self,
        path: Union[str, Path],
        stop: Optional[threading.Event] = None,
    ) -> ScanResult:
        """Scan a directory, or analyze a single file regardless of its extension."""
        path = Path(path)
        if path.is_dir():
            return self.scan_directory(path, stop=stop)
        if not path.exists():
            raise DetectError(f"Path not found: {path}")
        return aggregate([self.analyze_file(path)])
