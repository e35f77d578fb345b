import re
from pathlib import Path
from functools import lru_cache

# Maps helper function name -> its full GLSL definition, in library order.
GLSL_FUNCTIONS = {}

GLSL_LIBRARY = 'sdf2d.glsl'

_DEFINITION = re.compile(r'^(?:float|vec2|vec3|vec4)\s+(\w+)\s*\(', re.MULTILINE)
_HELPER_CALL = re.compile(r'\b(sd_\w+|op_\w+|rotate_rad)\s*\(')


def _split_functions(source: str) -> dict:
    """Splits a GLSL source into top-level function definitions keyed by name."""
    functions = {}
    for match in _DEFINITION.finditer(source):
        # Pull in a comment block sitting directly above the definition.
        start = match.start()
        lines_above = source[:start].split('\n')[:-1]
        while lines_above and lines_above[-1].startswith('//') and not lines_above[-1].startswith('// ----'):
            start -= len(lines_above.pop()) + 1

        depth, end = 0, source.index('{', match.end())
        while True:
            if source[end] == '{':
                depth += 1
            elif source[end] == '}':
                depth -= 1
                if depth == 0:
                    break
            end += 1
        functions[match.group(1)] = source[start:end + 1].strip('\n')
    return functions


def load_all_glsl():
    """Loads the bundled helper library into GLSL_FUNCTIONS."""
    if GLSL_FUNCTIONS:
        return

    glsl_path = Path(__file__).parent.parent / 'glsl' / GLSL_LIBRARY
    if not glsl_path.exists(): return

    with open(glsl_path, 'r') as f:
        GLSL_FUNCTIONS.update(_split_functions(f.read()))


def required_functions(expr: str) -> frozenset:
    """Returns the names of every helper function an expression calls."""
    return frozenset(_HELPER_CALL.findall(expr))


@lru_cache(maxsize=None)
def get_glsl_definitions(required: frozenset) -> str:
    """
    Given a set of helper function names, returns a single string containing
    their GLSL definitions, plus any helpers those definitions call, in
    library order.
    """
    if not GLSL_FUNCTIONS:
        load_all_glsl()

    expanded = set()
    pending = list(required)
    while pending:
        name = pending.pop()
        if name in expanded or name not in GLSL_FUNCTIONS:
            continue
        expanded.add(name)
        body = GLSL_FUNCTIONS[name].split('{', 1)[1]
        pending.extend(required_functions(body))

    missing = set(required) - set(GLSL_FUNCTIONS)
    if missing:
        raise ValueError(f"No GLSL definition for: {', '.join(sorted(missing))}")

    return "\n\n".join(code for name, code in GLSL_FUNCTIONS.items() if name in expanded)
