"""Shape detection and shape-preserving construction of containers.

Sequences are any ``collections.abc.Sequence`` other than text and bytes,
plus numpy arrays (iterated along their first axis). Mappings are any
``collections.abc.Mapping``. Results are rebuilt in the type of a template
container so that a tuple stays a tuple and an array stays an array.
"""

import collections.abc
import copy
from typing import Any, Iterable, Iterator

import numpy as np

from functional_expressions.structs import Shape, UsageError

_TEXT_TYPES = (str, bytes, bytearray)


def shape_of(container: Any) -> Shape:
    """Return the shape of a container, or raise UsageError."""
    if isinstance(container, collections.abc.Mapping):
        return Shape.MAPPING
    if isinstance(container, np.ndarray):
        if container.ndim == 0:
            raise UsageError("Zero-dimensional arrays are not containers")
        return Shape.SEQUENCE
    if isinstance(container, collections.abc.Sequence) and not isinstance(
        container, _TEXT_TYPES
    ):
        return Shape.SEQUENCE
    raise UsageError(
        f"Expected a sequence or a mapping, got {type(container).__name__}"
    )


def common_shape(containers: tuple[Any, ...]) -> Shape:
    """Check that all containers share one shape and return it."""
    if not containers:
        raise UsageError("At least one container is required")
    shape = shape_of(containers[0])
    for position, container in enumerate(containers[1:], start=2):
        other = shape_of(container)
        if other is not shape:
            raise UsageError(
                f"Container {position} is a {other.value} but container 1 "
                f"is a {shape.value}"
            )
    return shape


def entries(container: Any) -> Iterator[tuple[Any, Any]]:
    """Iterate (key, value) pairs; keys of a sequence are positions."""
    if shape_of(container) is Shape.MAPPING:
        yield from container.items()
    else:
        yield from enumerate(container)


def build_sequence(template: Any, values: Iterable[Any]) -> Any:
    """Build a new sequence of the same kind as ``template``."""
    values = list(values)
    if isinstance(template, np.ndarray):
        if not values:
            return np.empty((0,) + template.shape[1:], dtype=template.dtype)
        try:
            return np.array(values)
        except ValueError:
            # Ragged values: keep one object per element.
            result = np.empty(len(values), dtype=object)
            for i, value in enumerate(values):
                result[i] = value
            return result
    if isinstance(template, tuple):
        return tuple(values)
    return values


def build_mapping(template: Any, items: Iterable[tuple[Any, Any]]) -> Any:
    """Build a new mapping of the same kind as ``template``.

    Dict subclasses keep their type and extra state (e.g. the factory of
    a defaultdict). Other mappings are rebuilt as plain dicts.
    """
    if isinstance(template, dict):
        result = copy.copy(template)
        result.clear()
        for key, value in items:
            result[key] = value
        return result
    return dict(items)


def clone(container: Any) -> Any:
    """Return a deep copy that shares no nested containers with the input."""
    return copy.deepcopy(container)
