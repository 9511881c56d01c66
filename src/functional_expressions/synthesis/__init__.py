"""Synthesis of callables from Python statement strings.

This module provides:

- NamingCounter: Process-wide source of unique callable names
- CallableSynthesizer: Builds and tracks named callables
- lambda_: Caller-facing wrapper returning a reusable handle
"""

from functional_expressions.synthesis.counter import GLOBAL_COUNTER, NamingCounter
from functional_expressions.synthesis.lambda_facade import lambda_
from functional_expressions.synthesis.primitives import cmp, create_primitives
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    SynthesizedCallable,
    expression_callable,
    get_default_synthesizer,
    set_default_synthesizer,
)

__all__ = [
    "GLOBAL_COUNTER",
    "NamingCounter",
    "CallableSynthesizer",
    "SynthesizedCallable",
    "expression_callable",
    "get_default_synthesizer",
    "set_default_synthesizer",
    "create_primitives",
    "cmp",
    "lambda_",
]
