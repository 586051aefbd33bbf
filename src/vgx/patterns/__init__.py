"""Pattern catalogs — models, built-in definitions, catalog construction."""

from vgx.patterns.catalog import PatternCatalog, build_catalog, load_custom_patterns
from vgx.patterns.models import CompiledPattern, PatternDef

__all__ = [
    "CompiledPattern",
    "PatternCatalog",
    "PatternDef",
    "build_catalog",
    "load_custom_patterns",
]
