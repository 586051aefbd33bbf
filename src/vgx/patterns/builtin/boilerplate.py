"""Scaffold idioms counted by the stylometry boilerplate ratio (unweighted)."""

from vgx.patterns.models import PatternDef

ALL_BOILERPLATE_PATTERNS = [
    PatternDef(name="try_catch", pattern=r"try\s*\{[\s\S]*?catch"),
    PatternDef(name="guard_return", pattern=r"if\s*\(\s*!\s*\w+\s*\)\s*\{?\s*return"),
    PatternDef(name="async_function", pattern=r"async\s+function\s+\w+\s*\([^)]*\)\s*\{"),
    PatternDef(name="async_arrow", pattern=r"const\s+\w+\s*=\s*async\s*\([^)]*\)\s*=>"),
    PatternDef(name="esm_export", pattern=r"export\s+(?:default\s+)?(?:function|class|const)"),
    PatternDef(name="esm_import", pattern=r"import\s*\{[^}]+\}\s*from"),
    PatternDef(name="go_err_check", pattern=r"if\s+err\s*!=\s*nil\s*\{", language="go"),
    PatternDef(name="go_defer_close", pattern=r"defer\s+\w+\.(?:Close|Unlock|Done)\(", language="go"),
    PatternDef(name="go_method", pattern=r"func\s+\(\w+\s+\*?\w+\)\s+\w+\(", language="go"),
]
