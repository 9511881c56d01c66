"""Applying an expression across one or more same-shape containers."""

import ast
from typing import Any

from functional_expressions.containers import (
    build_mapping,
    build_sequence,
    common_shape,
)
from functional_expressions.structs import Expression, Shape
from functional_expressions.synthesis.synthesizer import (
    CallableSynthesizer,
    expression_callable,
)


def map_params(num_containers: int) -> tuple[str, ...]:
    """Parameter names for a map over ``num_containers`` containers."""
    return ("key",) + tuple(f"val{i}" for i in range(1, num_containers + 1))


def entry_value(expression: str) -> str:
    """Strip the leading ``key,`` of an expression written as an entry.

    ``"key, val1 + val2"`` describes the entry being produced, so its
    value part ``"val1 + val2"`` is what gets evaluated. A parenthesized
    tuple such as ``"(key, val1)"`` is left alone. Text that does not
    parse is returned unchanged and fails when evaluated.
    """
    try:
        node = ast.parse(expression.strip(), mode="eval").body
    except SyntaxError:
        return expression
    if (
        isinstance(node, ast.Tuple)
        and len(node.elts) == 2
        and isinstance(node.elts[0], ast.Name)
        and node.elts[0].id == "key"
        # An unparenthesized tuple starts where its first item starts.
        and node.col_offset == node.elts[0].col_offset
    ):
        return ast.get_source_segment(expression.strip(), node.elts[1]) or expression
    return expression


def map(  # pylint: disable=redefined-builtin
    expression: Expression,
    *containers: Any,
    synthesizer: CallableSynthesizer | None = None,
) -> Any:
    """Apply ``expression`` position-wise (or key-wise) across containers.

    The expression sees ``key`` and one ``val1 .. valN`` per container
    (``val`` is an alias of ``val1``). Sequences are truncated to the
    shortest input; mappings keep only the keys present in every input,
    in the order of the first one.

    >>> map("val1 + val2", [1, 2, 3], [10, 20])
    [11, 22]
    >>> map("key, val1", {"a": 1, "b": 2}, {"b": 3, "c": 4})
    {'b': 2}
    """
    shape = common_shape(containers)
    if isinstance(expression, str):
        expression = entry_value(expression)

    first = containers[0]
    with expression_callable(
        expression,
        map_params(len(containers)),
        preamble=("val = val1",),
        synthesizer=synthesizer,
    ) as fn:
        if shape is Shape.SEQUENCE:
            length = min(len(container) for container in containers)
            return build_sequence(
                first,
                [
                    fn(key, *(container[key] for container in containers))
                    for key in range(length)
                ],
            )
        others = containers[1:]
        keys = [key for key in first if all(key in other for other in others)]
        return build_mapping(
            first,
            [
                (key, fn(key, *(container[key] for container in containers)))
                for key in keys
            ],
        )
