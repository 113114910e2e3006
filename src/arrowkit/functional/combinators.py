"""Function combinators: composition and currying."""

import inspect
import typing as tp
from functools import wraps

__all__ = ["compose", "compose_all", "curry3", "add_three", "curry"]

T = tp.TypeVar("T")


def compose(f: tp.Callable, g: tp.Callable) -> tp.Callable:
    """Compose two unary callables.

    The returned function applies ``g`` first and feeds its result to ``f``,
    i.e. ``compose(f, g)(x) == f(g(x))``.
    """

    def _composed(x):
        return f(g(x))

    return _composed


def compose_all(*fns: tp.Callable[[T], T]) -> tp.Callable[[T], T]:
    """Compose unary callables from right to left.

    ``compose_all(f, g, h)(x) == f(g(h(x)))``. With no callables the result
    is the identity function.
    """

    def _inner(value: T) -> T:
        for fn in reversed(fns):
            value = fn(value)
        return value

    return _inner


def curry3(a):
    """Curried three-way addition: ``curry3(a)(b)(c) == a + b + c``.

    Every partial application is an ordinary closure and can be reused, e.g.
    ``add_two = curry3(2)`` then ``add_two(3)(4)`` and ``add_two(10)(1)``.
    """

    def _take_b(b):
        def _take_c(c):
            return a + b + c

        return _take_c

    return _take_b


add_three = curry3


def curry(fn: tp.Callable, arity: tp.Optional[int] = None) -> tp.Callable:
    """Turn ``fn`` into a chain of single-argument calls.

    Args:
        fn: Function to curry.
        arity: Number of arguments to collect before calling ``fn``. Defaults
            to the number of positional parameters without a default value.

    Returns:
        A unary callable. Each call returns a new unary callable until
        ``arity`` arguments have been collected, at which point ``fn`` is
        invoked with them. Collected arguments are never shared between
        branches, so partial applications are reusable.

    Raises:
        ValueError: If ``arity`` is smaller than 1.
    """
    if arity is None:
        arity = sum(
            1
            for p in inspect.signature(fn).parameters.values()
            if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
            and p.default is p.empty
        )
    if arity < 1:
        raise ValueError(f"curry() needs an arity of at least 1, got {arity}")

    def _collect(collected: tuple) -> tp.Callable:
        @wraps(fn)
        def _next(arg):
            args = collected + (arg,)
            if len(args) == arity:
                return fn(*args)
            return _collect(args)

        return _next

    return _collect(())
