"""React hook idioms."""

from vgx.patterns.models import PatternDef

USE_EFFECT_DEPS = PatternDef(
    name="use_effect_deps",
    description="useEffect with an inline callback and dependency array.",
    language="react",
    weight=0.08,
    pattern=r"useEffect\s*\(\s*\(\s*\)\s*=>\s*\{[^}]+\}\s*,\s*\[[^\]]*\]\s*\)",
)

USE_STATE_DESTRUCTURE = PatternDef(
    name="use_state_destructure",
    description="const [value, setValue] = useState(...) destructuring.",
    language="react",
    weight=0.08,
    pattern=r"const\s*\[\s*\w+\s*,\s*set[A-Z]\w+\s*\]\s*=\s*useState",
)

ALL_REACT_PATTERNS = [USE_EFFECT_DEPS, USE_STATE_DESTRUCTURE]
