"""Python generator idioms."""

from vgx.patterns.models import PatternDef

PYTHON_DOCSTRING = PatternDef(
    name="python_docstring",
    description="Docstring with Args: / Returns: / Raises: sections.",
    language="python",
    weight=0.10,
    pattern=r'"""[^"]+(?:Args:|Returns:|Raises:)[^"]+"""',
)

PYTHON_TYPE_HINTS = PatternDef(
    name="python_type_hints",
    description="def with annotated parameters and a return annotation.",
    language="python",
    weight=0.08,
    pattern=r"def\s+\w+\s*\([^)]*:\s*\w+[^)]*\)\s*->\s*\w+:",
)

ALL_PYTHON_PATTERNS = [PYTHON_DOCSTRING, PYTHON_TYPE_HINTS]
