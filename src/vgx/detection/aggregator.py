"""Incremental aggregation of per-file results into a ScanResult."""

from __future__ import annotations

from typing import Iterable

from vgx.detection.models import Result, ScanResult


class ScanAccumulator:
    """Collects results in arrival order and tracks the line-weighted AI share."""

    def __init__(self) -> None:
        self._result = ScanResult()
        self._total_lines = 0
        self._ai_lines = 0

    @property
    def files_scanned(self) -> int:
        return self._result.files_scanned

    def add(self, result: Result) -> None:
        scan = self._result
        scan.results.append(result)
        scan.files_scanned += 1

        if result.is_ai_generated:
            scan.ai_detected += 1
            self._ai_lines += result.lines_of_code
        else:
            scan.human_written += 1
        self._total_lines += result.lines_of_code

        if result.ai_confidence > scan.max_ai_confidence:
            scan.max_ai_confidence = result.ai_confidence

    def finalize(self) -> ScanResult:
        """Compute the AI line percentage and return the ScanResult."""
        scan = self._result
        if self._total_lines > 0:
            scan.ai_percentage = self._ai_lines / self._total_lines * 100
        else:
            scan.ai_percentage = 0.0
        return scan


def aggregate(results: Iterable[Result]) -> ScanResult:
    """Aggregate an already-computed batch of results."""
    acc = ScanAccumulator()
    for r in results:
        acc.add(r)
    return acc.finalize()
