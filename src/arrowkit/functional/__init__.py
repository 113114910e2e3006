"""Functional primitives for Arrowkit.

This package provides small higher-order function utilities: arithmetic
callbacks, composition and currying, closure-backed counters, map/filter/reduce
transformations and an immutable chainable pipeline. Apart from the counter
returned by :func:`memoized_counter`, every utility is stateless and
side-effect-free so they can be freely combined.
"""

from arrowkit.functional.arithmetic import (
    add,
    check_even,
    divide,
    factorial,
    is_positive,
    multiplier,
    multiply,
    operate,
    power,
    square,
    subtract,
    sum_all,
)
from arrowkit.functional.closures import CounterHandle, memoized_counter
from arrowkit.functional.combinators import (
    add_three,
    compose,
    compose_all,
    curry,
    curry3,
)
from arrowkit.functional.pipeline import Pipeline, pipeline
from arrowkit.functional.sequences import (
    filter_map,
    find_first,
    find_max,
    frequency_count,
    map_filter_reduce_chain,
    matrix_sum,
    sort_by_field,
    sum_array,
    unique,
)

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "square",
    "power",
    "sum_all",
    "factorial",
    "is_positive",
    "check_even",
    "operate",
    "multiplier",
    "compose",
    "compose_all",
    "curry3",
    "add_three",
    "curry",
    "CounterHandle",
    "memoized_counter",
    "frequency_count",
    "unique",
    "sort_by_field",
    "map_filter_reduce_chain",
    "filter_map",
    "sum_array",
    "find_max",
    "matrix_sum",
    "find_first",
    "Pipeline",
    "pipeline",
]
