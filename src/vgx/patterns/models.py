"""Pattern definition model — regex stored as source, compiled by the catalog."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class PatternDef:
    """A single generator-idiom pattern.

    ``pattern`` is kept as a raw string so definitions stay serialisable;
    :class:`~vgx.patterns.catalog.PatternCatalog` compiles it once.
    """

    name: str
    pattern: str
    weight: float = 0.05
    description: str = ""
    language: str = "generic"  # generic | javascript | react | go | python

    def compile(self) -> re.Pattern[str]:
        return re.compile(self.pattern)


@dataclass(frozen=True)
class CompiledPattern:
    """A validated catalog entry, ready for matching."""

    name: str
    regex: re.Pattern[str]
    weight: float
    description: str = ""
    language: str = "generic"

    @classmethod
    def from_def(cls, definition: PatternDef) -> "CompiledPattern":
        return cls(
            name=definition.name,
            regex=definition.compile(),
            weight=definition.weight,
            description=definition.description,
            language=definition.language,
        )


def parse_pattern_entry(entry: dict, source: Optional[str] = None) -> PatternDef:
    """Build a PatternDef from a YAML mapping. Raises KeyError/ValueError on bad entries."""
    name = entry["name"]
    pattern = entry["pattern"]
    if not isinstance(name, str) or not isinstance(pattern, str):
        raise ValueError(f"{source or name}: name and pattern must be strings")
    weight = float(entry.get("weight", 0.05))
    if weight < 0:
        raise ValueError(f"{source or name}: weight must be non-negative")
    return PatternDef(
        name=name,
        pattern=pattern,
        weight=weight,
        description=entry.get("description", ""),
        language=entry.get("language", "generic"),
    )
