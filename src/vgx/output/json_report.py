"""JSON reporter for machine consumers."""

from __future__ import annotations

import json
from typing import Any, Dict

from vgx.detection.models import PatternMatch, Result, ScanResult


def _pattern_to_dict(match: PatternMatch) -> Dict[str, Any]:
    return {
        "name": match.name,
        "confidence": match.confidence,
        "line_start": match.line_start,
        "line_end": match.line_end,
        "snippet": match.snippet,
    }


def result_to_dict(result: Result) -> Dict[str, Any]:
    """Convert a Result to a JSON-serialisable dict (``patterns`` omitted when empty)."""
    return {
        "file_path": result.file_path,
        "ai_confidence": result.ai_confidence,
        "confidence_level": result.confidence_level,
        "style_score": result.style_score,
        "pattern_score": result.pattern_score,
        **({"patterns": [_pattern_to_dict(p) for p in result.patterns]} if result.patterns else {}),
        "is_ai_generated": result.is_ai_generated,
        "lines_of_code": result.lines_of_code,
    }


def to_dict(scan: ScanResult) -> Dict[str, Any]:
    """Convert ScanResult to a JSON-serialisable dict."""
    return {
        "files_scanned": scan.files_scanned,
        "ai_detected": scan.ai_detected,
        "human_written": scan.human_written,
        "max_ai_confidence": scan.max_ai_confidence,
        "ai_percentage": scan.ai_percentage,
        "results": [result_to_dict(r) for r in scan.results],
    }


def render(scan: ScanResult) -> str:
    """Return formatted JSON string."""
    return json.dumps(to_dict(scan), indent=2)
