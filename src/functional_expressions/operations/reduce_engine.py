"""Folding a container into a single value."""

from typing import Any

from functional_expressions.containers import entries, shape_of
from functional_expressions.structs import NO_VALUE, Expression
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    expression_callable,
)

REDUCE_PARAMS = ("acc", "key", "val")


def reduce(  # pylint: disable=redefined-builtin
    expression: Expression,
    initial: Any,
    container: Any,
    *,
    synthesizer: CallableSynthesizer | None = None,
) -> Any:
    """Fold ``container`` with ``expression``.

    The expression sees the accumulator as ``acc``, the position or
    mapping key as ``key`` and the element as ``val``; its value becomes
    the next ``acc``. An empty container gives ``NO_VALUE`` without
    evaluating anything.

    >>> reduce("acc + val", 0, [1, 2, 3])
    6
    """
    shape_of(container)
    if len(container) == 0:
        return NO_VALUE

    acc = initial
    with expression_callable(
        expression, REDUCE_PARAMS, synthesizer=synthesizer
    ) as fn:
        for key, val in entries(container):
            acc = fn(acc, key, val)
    return acc
