"""Selecting the elements of a container that satisfy a predicate."""

import copy
from typing import Any

from functional_expressions.containers import (
    build_mapping,
    build_sequence,
    entries,
    shape_of,
)
from functional_expressions.structs import Expression, Shape
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    expression_callable,
)

FILTER_PARAMS = ("key", "val")


def filter(  # pylint: disable=redefined-builtin
    expression: Expression,
    container: Any,
    *,
    synthesizer: CallableSynthesizer | None = None,
) -> Any:
    """Keep the elements for which ``expression`` is truthy.

    The predicate sees ``key`` (position or mapping key) and ``val``.
    Kept values are deep copies, so mutating the result never reaches
    the input.

    >>> filter("val > 0", [-1, 2, -3, 4])
    [2, 4]
    """
    shape = shape_of(container)
    with expression_callable(
        expression, FILTER_PARAMS, synthesizer=synthesizer
    ) as predicate:
        kept = [
            (key, copy.deepcopy(val))
            for key, val in entries(container)
            if predicate(key, val)
        ]
    if shape is Shape.MAPPING:
        return build_mapping(container, kept)
    return build_sequence(container, [val for _, val in kept])
