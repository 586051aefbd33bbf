"""Go generator idioms."""

from vgx.patterns.models import PatternDef

GO_ERROR_CHECK = PatternDef(
    name="go_error_check",
    description="if err != nil { ... return ... } block.",
    language="go",
    weight=0.12,
    pattern=r"if\s+err\s*!=\s*nil\s*\{[^}]*return[^}]*\}",
)

GO_DEFER = PatternDef(
    name="go_defer",
    description="Deferred Close / Unlock / Done call.",
    language="go",
    weight=0.08,
    pattern=r"defer\s+(?:\w+\.)?(?:Close|Unlock|Done)\s*\(\s*\)",
)

GO_STRUCT_INIT = PatternDef(
    name="go_struct_init",
    description="Multi-line struct literal with one field per line.",
    language="go",
    weight=0.08,
    pattern=r"\w+\s*:=\s*&?\w+\{[ \t]*\n(?:[ \t]*\w+:[^\n]*\n)+[ \t]*\}",
)

ALL_GO_PATTERNS = [GO_ERROR_CHECK, GO_DEFER, GO_STRUCT_INIT]
