"""Copy-then-change helpers that never mutate their input."""

import copy
from typing import Any

import numpy as np

from functional_expressions.containers import (
    build_mapping,
    build_sequence,
    clone,
    entries,
    shape_of,
)
from functional_expressions.structs import Shape, UsageError


def _copied_entries(container: Any) -> list[tuple[Any, Any]]:
    return [(key, copy.deepcopy(val)) for key, val in entries(container)]


def reverse(container: Any) -> Any:
    """Return a reversed copy of a sequence.

    Mappings come back as an unchanged copy: reversing a mapping is a
    no-op.
    """
    if shape_of(container) is Shape.MAPPING:
        return build_mapping(container, _copied_entries(container))
    if isinstance(container, np.ndarray):
        return clone(container[::-1])
    return build_sequence(container, reversed(clone(list(container))))


def append(container: Any, value_or_pair: Any) -> Any:
    """Return a copy with a value (sequence) or a [key, value] pair (mapping)
    added."""
    if shape_of(container) is Shape.MAPPING:
        if not isinstance(value_or_pair, (list, tuple)) or len(value_or_pair) != 2:
            raise UsageError(
                f"Appending to a mapping takes a [key, value] pair, "
                f"got {value_or_pair!r}"
            )
        key, value = value_or_pair
        return assoc(container, key, value)
    if isinstance(container, np.ndarray):
        return np.append(clone(container), [copy.deepcopy(value_or_pair)], axis=0)
    return build_sequence(
        container, [*clone(list(container)), copy.deepcopy(value_or_pair)]
    )


def assoc(container: Any, index_or_key: Any, value: Any) -> Any:
    """Return a copy with the slot at ``index_or_key`` set to ``value``."""
    value = copy.deepcopy(value)
    if shape_of(container) is Shape.MAPPING:
        result = build_mapping(container, _copied_entries(container))
        result[index_or_key] = value
        return result
    if isinstance(container, np.ndarray):
        result = clone(container)
        result[index_or_key] = value
        return result
    values = clone(list(container))
    values[index_or_key] = value
    return build_sequence(container, values)


def pop(container: Any, index_or_key: Any) -> Any:
    """Return a copy without the slot at ``index_or_key``."""
    if shape_of(container) is Shape.MAPPING:
        if index_or_key not in container:
            raise KeyError(index_or_key)
        return build_mapping(
            container,
            [
                (key, val)
                for key, val in _copied_entries(container)
                if key != index_or_key
            ],
        )
    if isinstance(container, np.ndarray):
        if not -len(container) <= index_or_key < len(container):
            raise IndexError(f"index {index_or_key} is out of bounds")
        return np.delete(clone(container), index_or_key, axis=0)
    values = clone(list(container))
    del values[index_or_key]
    return build_sequence(container, values)
