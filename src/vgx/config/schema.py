"""Configuration schema — dataclasses for every config section."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal

OutputFormat = Literal["text", "json"]

DEFAULT_THRESHOLD_PERCENT = 70.0

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".go", ".py", ".js", ".ts", ".tsx", ".jsx", ".java", ".kt",
    ".rs", ".rb", ".php", ".swift", ".cs", ".cpp", ".c",
)

DEFAULT_SKIP_DIRS: tuple[str, ...] = (
    "node_modules", ".git", "vendor", "dist", "build",
    "__pycache__", ".next", "target",
)


def threshold_from_percent(percent: float) -> float:
    """Convert a user-facing 0-100 threshold to the 0-1 fraction used for scoring."""
    if not 0 <= percent <= 100:
        raise ValueError(f"threshold must be between 0 and 100, got {percent}")
    return percent / 100


@dataclass
class DetectSection:
    threshold: float = DEFAULT_THRESHOLD_PERCENT  # percent, 0-100


@dataclass
class WalkSection:
    extensions: List[str] = field(default_factory=list)  # empty = built-in list
    skip_dirs: List[str] = field(default_factory=list)  # empty = built-in list


@dataclass
class PatternsSection:
    disable: List[str] = field(default_factory=list)
    custom_dir: str = ".vgx-patterns"


@dataclass
class OutputSection:
    format: OutputFormat = "text"
    show_patterns: bool = False


@dataclass
class VgxConfig:
    version: str = "1.0"
    detect: DetectSection = field(default_factory=DetectSection)
    walk: WalkSection = field(default_factory=WalkSection)
    patterns: PatternsSection = field(default_factory=PatternsSection)
    output: OutputSection = field(default_factory=OutputSection)

    @property
    def threshold_fraction(self) -> float:
        return threshold_from_percent(self.detect.threshold)

    @property
    def extensions(self) -> tuple[str, ...]:
        return tuple(self.walk.extensions) or DEFAULT_EXTENSIONS

    @property
    def skip_dirs(self) -> tuple[str, ...]:
        return tuple(self.walk.skip_dirs) or DEFAULT_SKIP_DIRS
