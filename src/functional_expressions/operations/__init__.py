"""Higher-order and immutable operations over sequences and mappings."""

from functional_expressions.operations.collection_ops import (
    append,
    assoc,
    pop,
    reverse,
)
from functional_expressions.operations.filter_engine import filter
from functional_expressions.operations.map_engine import map
from functional_expressions.operations.reduce_engine import reduce
from functional_expressions.operations.sort_engine import sort

__all__ = [
    "reduce",
    "map",
    "filter",
    "sort",
    "reverse",
    "append",
    "assoc",
    "pop",
]
