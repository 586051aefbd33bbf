"""Tests for result aggregation."""

import pytest

from vgx.detection.aggregator import ScanAccumulator, aggregate
from vgx.detection.models import Result


def _result(path, confidence, ai, lines):
    return Result(
        file_path=path,
        ai_confidence=confidence,
        confidence_level="medium",
        style_score=0.5,
        pattern_score=0.5,
        is_ai_generated=ai,
        lines_of_code=lines,
    )


class TestAggregate:
    def test_empty(self):
        scan = aggregate([])
        assert scan.files_scanned == 0
        assert scan.ai_detected == 0
        assert scan.human_written == 0
        assert scan.max_ai_confidence == 0.0
        assert scan.ai_percentage == 0.0
        assert scan.results == []

    def test_counts_and_percentage(self):
        scan = aggregate([
            _result("a.py", 0.9, True, 30),
            _result("b.py", 0.2, False, 60),
            _result("c.py", 0.75, True, 10),
        ])
        assert scan.files_scanned == 3
        assert scan.ai_detected == 2
        assert scan.human_written == 1
        assert scan.max_ai_confidence == 0.9
        assert scan.ai_percentage == pytest.approx(40.0)

    def test_preserves_arrival_order(self):
        scan = aggregate([_result(p, c, False, 1) for p, c in (("z", 0.1), ("a", 0.3), ("m", 0.2))])
        assert [r.file_path for r in scan.results] == ["z", "a", "m"]

    def test_zero_lines(self):
        scan = aggregate([_result("a.py", 0.9, True, 0)])
        assert scan.ai_percentage == 0.0

    def test_ai_results_and_sorted_copy(self):
        scan = aggregate([_result("a", 0.1, False, 1), _result("b", 0.8, True, 1)])
        assert [r.file_path for r in scan.ai_results] == ["b"]
        assert [r.file_path for r in scan.sorted_results()] == ["b", "a"]
        assert [r.file_path for r in scan.results] == ["a", "b"]


class TestAccumulator:
    def test_incremental(self):
        acc = ScanAccumulator()
        acc.add(_result("a", 0.4, False, 10))
        assert acc.files_scanned == 1
        acc.add(_result("b", 0.6, True, 10))
        scan = acc.finalize()
        assert scan.files_scanned == 2
        assert scan.ai_percentage == pytest.approx(50.0)
