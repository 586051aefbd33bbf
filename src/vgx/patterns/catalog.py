"""Pattern catalog — validated, immutable set of compiled patterns.

The catalog is built once and shared by reference between the style
analyzer (boilerplate idioms) and the pattern detector (weighted generator
idioms). A definition whose regex does not compile is logged and left out;
building a catalog never fails because of a bad pattern.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

import yaml

from vgx.config.schema import VgxConfig
from vgx.patterns.models import CompiledPattern, PatternDef, parse_pattern_entry

logger = logging.getLogger(__name__)


def _compile_all(
    definitions: Iterable[PatternDef],
    kind: str,
) -> Tuple[Tuple[CompiledPattern, ...], Tuple[str, ...]]:
    compiled: List[CompiledPattern] = []
    rejected: List[str] = []
    for definition in definitions:
        try:
            compiled.append(CompiledPattern.from_def(definition))
        except (re.error, TypeError) as exc:
            logger.warning("Excluding %s pattern %r: %s", kind, definition.name, exc)
            rejected.append(definition.name)
    return tuple(compiled), tuple(rejected)


@dataclass(frozen=True)
class PatternCatalog:
    """Compiled generator patterns plus the boilerplate idioms used by stylometry."""

    patterns: Tuple[CompiledPattern, ...] = ()
    boilerplate: Tuple[CompiledPattern, ...] = ()
    rejected: Tuple[str, ...] = ()

    @classmethod
    def from_definitions(
        cls,
        patterns: Iterable[PatternDef],
        boilerplate: Iterable[PatternDef] = (),
    ) -> "PatternCatalog":
        compiled, rejected = _compile_all(patterns, "generator")
        compiled_bp, rejected_bp = _compile_all(boilerplate, "boilerplate")
        return cls(patterns=compiled, boilerplate=compiled_bp, rejected=rejected + rejected_bp)

    @classmethod
    def default(cls) -> "PatternCatalog":
        """The built-in catalog, unfiltered."""
        return _default_catalog()

    @property
    def active_count(self) -> int:
        return len(self.patterns)

    def names(self) -> List[str]:
        return [p.name for p in self.patterns]

    def get(self, name: str) -> Optional[CompiledPattern]:
        for p in self.patterns:
            if p.name == name:
                return p
        return None

    def without(self, names: Iterable[str]) -> "PatternCatalog":
        """Return a copy with the named generator patterns removed."""
        drop = set(names)
        return PatternCatalog(
            patterns=tuple(p for p in self.patterns if p.name not in drop),
            boilerplate=self.boilerplate,
            rejected=self.rejected,
        )


@lru_cache(maxsize=1)
def _default_catalog() -> PatternCatalog:
    from vgx.patterns.builtin import ALL_BOILERPLATE_PATTERNS, ALL_BUILTIN_PATTERNS

    return PatternCatalog.from_definitions(ALL_BUILTIN_PATTERNS, ALL_BOILERPLATE_PATTERNS)


# ---- custom pattern loading ----


def load_custom_patterns(directory: Path) -> List[PatternDef]:
    """Load YAML pattern files from *directory*. Malformed entries are skipped."""
    if not directory.is_dir():
        return []
    definitions: List[PatternDef] = []
    for path in sorted(directory.iterdir()):
        if path.suffix not in (".yaml", ".yml"):
            continue
        definitions.extend(_load_yaml_patterns(path))
    return definitions


def _load_yaml_patterns(path: Path) -> List[PatternDef]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        logger.warning("Skipping pattern file %s: %s", path, exc)
        return []
    if data is None:
        return []
    if not isinstance(data, list):
        data = [data]
    definitions: List[PatternDef] = []
    for entry in data:
        if not isinstance(entry, dict):
            logger.warning("Skipping non-mapping entry in %s", path)
            continue
        try:
            definitions.append(parse_pattern_entry(entry, source=str(path)))
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Skipping invalid pattern entry in %s: %s", path, exc)
    return definitions


def build_catalog(config: VgxConfig, base_dir: Path) -> PatternCatalog:
    """Create the catalog for a run: built-ins + custom YAML patterns, minus disabled ones."""
    from vgx.patterns.builtin import ALL_BOILERPLATE_PATTERNS, ALL_BUILTIN_PATTERNS

    custom_dir = Path(config.patterns.custom_dir)
    if not custom_dir.is_absolute():
        custom_dir = base_dir / custom_dir
    custom = load_custom_patterns(custom_dir)
    if custom:
        logger.info("Loaded %d custom pattern(s) from %s", len(custom), custom_dir)

    catalog = PatternCatalog.from_definitions(
        [*ALL_BUILTIN_PATTERNS, *custom], ALL_BOILERPLATE_PATTERNS
    )
    if config.patterns.disable:
        catalog = catalog.without(config.patterns.disable)
    logger.debug("Active patterns: %d", catalog.active_count)
    return catalog
