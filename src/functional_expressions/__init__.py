"""Functional operations over sequences and mappings driven by expression
strings.

Expressions are Python source. Each higher-order operation turns its
expression into a short-lived synthesized callable, applies it, and
releases it before returning:

- reduce(expr, initial, container): parameters acc, key, val
- map(expr, *containers): parameters key, val1 .. valN (val = val1)
- filter(expr, container): parameters key, val
- sort(expr, container): parameters left, right (val1, val2)

Native callables are accepted wherever an expression string is.
"""

from functional_expressions.config import (
    SynthesisConfig,
    build_synthesizer,
    configure,
    load_config,
)
from functional_expressions.operations import (
    append,
    assoc,
    filter,
    map,
    pop,
    reduce,
    reverse,
    sort,
)
from functional_expressions.structs import (
    NO_VALUE,
    ReleasedCallableError,
    Shape,
    UsageError,
)
from functional_expressions.synthesis import (
    CallableSynthesizer,
    NamingCounter,
    SynthesizedCallable,
    lambda_,
)

__all__ = [
    "lambda_",
    "reverse",
    "append",
    "assoc",
    "pop",
    "reduce",
    "map",
    "filter",
    "sort",
    "NO_VALUE",
    "Shape",
    "UsageError",
    "ReleasedCallableError",
    "CallableSynthesizer",
    "SynthesizedCallable",
    "NamingCounter",
    "SynthesisConfig",
    "load_config",
    "build_synthesizer",
    "configure",
]
