"""Built-in pattern catalogs — aggregate all languages."""

from vgx.patterns.builtin.boilerplate import ALL_BOILERPLATE_PATTERNS
from vgx.patterns.builtin.comments import (
    INLINE_EXPLANATION,
    NUMBERED_STEPS,
    TODO_AI_STYLE,
)
from vgx.patterns.builtin.golang import ALL_GO_PATTERNS
from vgx.patterns.builtin.javascript import (
    ARROW_WITH_TYPES,
    ASYNC_AWAIT_FETCH,
    COPILOT_TRY_CATCH,
    EXPORT_DEFAULT_FUNCTION,
    JSDOC_COMPLETE,
    PROMISE_CHAIN,
    STANDARD_ERROR_THROW,
)
from vgx.patterns.builtin.python import ALL_PYTHON_PATTERNS
from vgx.patterns.builtin.react import ALL_REACT_PATTERNS
from vgx.patterns.models import PatternDef

# Order matters: matches are reported pattern by pattern in this order.
ALL_BUILTIN_PATTERNS: list[PatternDef] = [
    # error handling
    COPILOT_TRY_CATCH,
    STANDARD_ERROR_THROW,
    # async
    ASYNC_AWAIT_FETCH,
    PROMISE_CHAIN,
    # comments
    JSDOC_COMPLETE,
    INLINE_EXPLANATION,
    # functions
    ARROW_WITH_TYPES,
    EXPORT_DEFAULT_FUNCTION,
    *ALL_REACT_PATTERNS,
    *ALL_GO_PATTERNS,
    *ALL_PYTHON_PATTERNS,
    NUMBERED_STEPS,
    TODO_AI_STYLE,
]

__all__ = ["ALL_BOILERPLATE_PATTERNS", "ALL_BUILTIN_PATTERNS"]
