"""Sequence transformations built from map, filter and reduce.

None of these functions modify their input. Each one consumes an iterable and
returns a new list, dictionary or scalar.

Failure semantics:
    A fold with no initial value raises
    :class:`~arrowkit.core.exceptions.EmptyReduceError` when there is nothing
    to fold. This applies to :func:`map_filter_reduce_chain` (when no
    ``seed`` is given), :func:`find_max` and :func:`matrix_sum`. Every other
    function is total.

Examples:
    >>> from arrowkit.functional.sequences import map_filter_reduce_chain
    >>> map_filter_reduce_chain(
    ...     [1, 2, 3, 4, 5],
    ...     lambda x: x > 2,
    ...     lambda x: x * 2,
    ...     lambda acc, x: acc + x,
    ...     0,
    ... )
    24
"""

import typing as tp
from collections.abc import Iterable, Mapping
from functools import cmp_to_key, reduce

from arrowkit.core.exceptions import EmptyReduceError
from arrowkit.logger.logger import logger

__all__ = [
    "frequency_count",
    "unique",
    "sort_by_field",
    "map_filter_reduce_chain",
    "filter_map",
    "sum_array",
    "find_max",
    "matrix_sum",
    "find_first",
]

T = tp.TypeVar("T")
U = tp.TypeVar("U")
A = tp.TypeVar("A")
H = tp.TypeVar("H", bound=tp.Hashable)

_MISSING = object()


def frequency_count(values: tp.Iterable[H]) -> tp.Dict[H, int]:
    """Count the occurrences of each distinct element.

    Strings are compared as-is, so ``"JS"`` and ``"js"`` are different keys.
    Keys follow Python equality: ``1``, ``1.0`` and ``True`` are one key, counted
    under the first of them seen.
    """

    def _tally(acc: tp.Dict[H, int], value: H) -> tp.Dict[H, int]:
        acc[value] = acc.get(value, 0) + 1
        return acc

    return reduce(_tally, values, {})


def unique(values: tp.Iterable[H]) -> tp.List[H]:
    """Remove duplicates, keeping the first occurrence of each element.

    Values of different types never collapse into each other, so
    ``unique([1, True, 0, False])`` keeps all four.
    """
    seen = {}
    for value in values:
        seen.setdefault((type(value), value), value)
    return list(seen.values())


def _field_getter(field: tp.Union[str, tp.Callable[[T], tp.Any]]):
    if callable(field):
        return field

    def _get(obj):
        if isinstance(obj, Mapping):
            return obj[field]
        return getattr(obj, field)

    return _get


def sort_by_field(
    values: tp.Iterable[T],
    field: tp.Union[str, tp.Callable[[T], tp.Any]],
    comparator: tp.Optional[tp.Callable[[tp.Any, tp.Any], float]] = None,
) -> tp.List[T]:
    """Return a new list sorted ascending by ``field``.

    The sort is stable: elements with equal field values keep their relative
    input order.

    Args:
        values: Elements to sort. Left untouched.
        field: Callable extracting the sort value, or the name of an
            attribute / mapping key.
        comparator: Optional ``(a, b) -> number`` comparing two field values,
            negative when ``a`` sorts first. Defaults to natural ordering.

    Returns:
        A sorted copy of ``values``.
    """
    getter = _field_getter(field)
    if comparator is None:
        return sorted(values, key=getter)

    compare = cmp_to_key(comparator)
    return sorted(values, key=lambda item: compare(getter(item)))


def filter_map(
    values: tp.Iterable[T],
    predicate: tp.Callable[[T], bool],
    mapper: tp.Callable[[T], U],
) -> tp.List[U]:
    """Keep the elements matching ``predicate`` and transform them."""
    return [mapper(value) for value in values if predicate(value)]


def map_filter_reduce_chain(
    values: tp.Iterable[T],
    predicate: tp.Callable[[T], bool],
    mapper: tp.Callable[[T], U],
    reducer: tp.Callable[[A, U], A],
    seed: tp.Any = _MISSING,
) -> A:
    """Filter, then map, then fold.

    Args:
        values: Input elements.
        predicate: Elements for which this returns false are dropped.
        mapper: Applied to every surviving element.
        reducer: Binary fold function ``(accumulator, element) -> accumulator``.
        seed: Initial accumulator. When omitted the first mapped element is
            used, as with an unseeded ``reduce``.

    Returns:
        The folded value.

    Raises:
        EmptyReduceError: If ``seed`` is omitted and no element survives the
            filter.
    """
    mapped = filter_map(values, predicate, mapper)
    if seed is _MISSING:
        if not mapped:
            logger.debug("map_filter_reduce_chain() has nothing to fold and no seed")
            raise EmptyReduceError("map_filter_reduce_chain")
        return reduce(reducer, mapped)
    return reduce(reducer, mapped, seed)


def sum_array(values: tp.Iterable[tp.Any]) -> tp.Any:
    return reduce(lambda acc, value: acc + value, values, 0)


def find_max(values: tp.Iterable[T]) -> T:
    """Return the largest element.

    Raises:
        EmptyReduceError: If ``values`` is empty.
    """
    items = list(values)
    if not items:
        raise EmptyReduceError("find_max")
    return max(items)


def _flatten_once(rows: tp.Iterable[tp.Any]) -> tp.List[tp.Any]:
    cells: tp.List[tp.Any] = []
    for row in rows:
        if isinstance(row, Iterable) and not isinstance(row, (str, bytes)):
            cells.extend(row)
        else:
            cells.append(row)
    return cells


def matrix_sum(rows: tp.Iterable[tp.Any]) -> tp.Any:
    """Sum every cell of a (possibly ragged) matrix.

    Only one level of nesting is flattened. Scalar entries are kept as cells,
    so ``[1, [2, 3]]`` sums to 6.

    Raises:
        EmptyReduceError: If the matrix holds no cells.
    """
    cells = _flatten_once(rows)
    if not cells:
        raise EmptyReduceError("matrix_sum")
    return reduce(lambda acc, value: acc + value, cells)


def find_first(
    values: tp.Iterable[T],
    predicate: tp.Callable[[T], bool],
    default: tp.Optional[T] = None,
) -> tp.Optional[T]:
    """Return the first element matching ``predicate``, else ``default``."""
    return next((value for value in values if predicate(value)), default)
