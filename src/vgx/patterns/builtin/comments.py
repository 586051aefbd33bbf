"""Comment-style signatures shared across C-family languages."""

from vgx.patterns.models import PatternDef

INLINE_EXPLANATION = PatternDef(
    name="inline_explanation",
    description="Sentence-case explanatory // comment of four or more words.",
    weight=0.08,
    pattern=r"//\s*[A-Z][a-z]+(?:\s+[a-z]+){3,}",
)

NUMBERED_STEPS = PatternDef(
    name="numbered_steps",
    description="// Step 1: / // 2. numbered walkthrough comments.",
    weight=0.06,
    pattern=r"//\s*(?:Step\s+)?\d+[.:]\s*[A-Z]",
)

TODO_AI_STYLE = PatternDef(
    name="todo_ai_style",
    description="// TODO: Sentence-case todo comment.",
    weight=0.05,
    pattern=r"//\s*TODO:\s*[A-Z][a-z]+\s+[a-z]+",
)

ALL_COMMENT_PATTERNS = [INLINE_EXPLANATION, NUMBERED_STEPS, TODO_AI_STYLE]
