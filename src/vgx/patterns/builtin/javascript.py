"""JavaScript / TypeScript generator idioms."""

from vgx.patterns.models import PatternDef

COPILOT_TRY_CATCH = PatternDef(
    name="copilot_try_catch",
    description="try/catch block whose handler only logs or rethrows.",
    language="javascript",
    weight=0.15,
    pattern=(
        r"try\s*\{[^}]+\}\s*catch\s*\(\s*(?:error|err|e)\s*(?::\s*\w+)?\s*\)\s*"
        r"\{[^}]*(?:console\.(?:error|log)|throw)[^}]*\}"
    ),
)

STANDARD_ERROR_THROW = PatternDef(
    name="standard_error_throw",
    description="Thrown Error with a stock 'Failed to / Unable to / Invalid' message.",
    language="javascript",
    weight=0.12,
    pattern=(
        r"throw\s+new\s+Error\s*\(\s*['\"`]"
        r"(?:Failed to|Unable to|Error|Invalid|Cannot)[^'\"`]+['\"`]\s*\)"
    ),
)

ASYNC_AWAIT_FETCH = PatternDef(
    name="async_await_fetch",
    description="async function wrapping an awaited fetch call.",
    language="javascript",
    weight=0.10,
    pattern=(
        r"async\s+(?:function\s+)?\w+\s*\([^)]*\)\s*(?::\s*Promise<[^>]+>)?\s*"
        r"\{[^}]*await\s+fetch"
    ),
)

PROMISE_CHAIN = PatternDef(
    name="promise_chain",
    description="Promise .then(...).catch(...) chain.",
    language="javascript",
    weight=0.08,
    pattern=r"\.then\s*\(\s*(?:\([^)]*\)|[a-z]+)\s*=>\s*\{?[^}]*\}\s*\)\s*\.catch",
)

JSDOC_COMPLETE = PatternDef(
    name="jsdoc_complete",
    description="JSDoc block made up entirely of @tag lines.",
    language="javascript",
    weight=0.10,
    pattern=r"/\*\*[ \t]*\n(?:[ \t]*\*[ \t]*@\w[^\n]*\n)+[ \t]*\*/",
)

ARROW_WITH_TYPES = PatternDef(
    name="arrow_with_types",
    description="const arrow function with annotated parameters.",
    language="javascript",
    weight=0.10,
    pattern=(
        r"const\s+\w+\s*=\s*(?:async\s*)?\([^)]*:\s*\w+[^)]*\)\s*"
        r"(?::\s*\w+(?:<[^>]+>)?)?\s*=>"
    ),
)

EXPORT_DEFAULT_FUNCTION = PatternDef(
    name="export_default_function",
    description="export default (async) function declaration.",
    language="javascript",
    weight=0.06,
    pattern=r"export\s+default\s+(?:async\s+)?function\s+\w+",
)

ALL_JAVASCRIPT_PATTERNS = [
    COPILOT_TRY_CATCH,
    STANDARD_ERROR_THROW,
    ASYNC_AWAIT_FETCH,
    PROMISE_CHAIN,
    JSDOC_COMPLETE,
    ARROW_WITH_TYPES,
    EXPORT_DEFAULT_FUNCTION,
]
