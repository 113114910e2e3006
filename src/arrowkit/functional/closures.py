"""Closure-backed state.

:func:`memoized_counter` keeps its count in a local variable of the factory
call. The only way to reach that cell is through the three callables on the
returned :class:`CounterHandle`, so two counters never share state and nothing
at module level is touched.
"""

from typing import Callable, NamedTuple

__all__ = ["CounterHandle", "memoized_counter"]


class CounterHandle(NamedTuple):
    """Operations over a private counter cell."""

    increment: Callable[[], int]
    decrement: Callable[[], int]
    get: Callable[[], int]


def memoized_counter(start: int = 0) -> CounterHandle:
    """Create an independent counter starting at ``start``.

    ``increment`` and ``decrement`` update the cell and return the new value.
    ``get`` reads it without changing it.
    """
    count = start

    def increment() -> int:
        nonlocal count
        count += 1
        return count

    def decrement() -> int:
        nonlocal count
        count -= 1
        return count

    def get() -> int:
        return count

    return CounterHandle(increment=increment, decrement=decrement, get=get)
