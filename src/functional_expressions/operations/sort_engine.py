"""Ordering a copy of a container with a three-way comparison."""

import functools
from typing import Any

from functional_expressions.containers import (
    build_mapping,
    build_sequence,
    clone,
    shape_of,
)
from functional_expressions.structs import Expression, Shape
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    expression_callable,
)

SORT_PARAMS = ("left", "right")


def sort(
    expression: Expression,
    container: Any,
    *,
    synthesizer: CallableSynthesizer | None = None,
) -> Any:
    """Return a sorted copy of ``container``.

    The comparison sees ``left`` and ``right`` (also bound as ``val1``
    and ``val2``) and must give a negative number, zero or a positive
    number. Mappings are ordered by value, each key staying with its
    value. Stability is only as good as the comparison.

    >>> sort("val1 - val2", [3, 1, 2])
    [1, 2, 3]
    """
    shape = shape_of(container)
    with expression_callable(
        expression,
        SORT_PARAMS,
        preamble=("val1, val2 = left, right",),
        synthesizer=synthesizer,
    ) as compare:
        if shape is Shape.MAPPING:
            items = sorted(
                clone(list(container.items())),
                key=functools.cmp_to_key(lambda a, b: compare(a[1], b[1])),
            )
            return build_mapping(container, items)
        values = sorted(clone(list(container)), key=functools.cmp_to_key(compare))
    return build_sequence(container, values)
