"""
Flow combinators
================

Ветвление и наблюдение внутри compose/pipe цепочек.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Sequence

from .._helpers import identity
from .._types import Predicate


def constant[T](value: T) -> Callable[..., T]:
    """Ignore arguments, always return value."""

    def const(*_: typing.Any, **__: typing.Any) -> T:
        return value

    return const


def tap[T](fn: Callable[[T], typing.Any]) -> Callable[[T], T]:
    """Run fn for its side effect, pass the value through unchanged."""

    def tapped(value: T) -> T:
        fn(value)
        return value

    return tapped


def when[T](predicate: Predicate[T], fn: Callable[[T], T]) -> Callable[[T], T]:
    """Apply fn only if predicate holds."""

    def step(value: T) -> T:
        return fn(value) if predicate(value) else value

    return step


def unless[T](predicate: Predicate[T], fn: Callable[[T], T]) -> Callable[[T], T]:
    """Apply fn only if predicate does NOT hold. Dual of when."""

    def step(value: T) -> T:
        return value if predicate(value) else fn(value)

    return step


def if_else[T, R](
    predicate: Predicate[T],
    on_true: Callable[[T], R],
    on_false: Callable[[T], R],
) -> Callable[[T], R]:
    def step(value: T) -> R:
        return on_true(value) if predicate(value) else on_false(value)

    return step


def cond[T](*branches: tuple[Predicate[T], Callable[[T], typing.Any]]) -> Callable[[T], typing.Any]:
    """
    First matching branch wins.

    Example:
        describe = cond(
            (lambda x: isinstance(x, str), str.upper),
            (lambda x: isinstance(x, int), lambda x: x * 2),
        )
        describe("hi")  # "HI"
        describe(4)     # 8
        describe(None)  # None (no branch matched, value returned unchanged)
    """

    def step(value: T) -> typing.Any:
        for predicate, fn in branches:
            if predicate(value):
                return fn(value)
        return identity(value)

    return step


def converge[T, R](
    combiner: Callable[..., R],
    fns: Sequence[Callable[[T], typing.Any]],
) -> Callable[[T], R]:
    """
    Feed one value to several branches, combine their results.

    Example:
        average = converge(lambda total, n: total / n, [sum, len])
        average([1, 2, 3])  # 2.0
    """

    def step(value: T) -> R:
        return combiner(*(fn(value) for fn in fns))

    return step


__all__ = (
    "constant",
    "tap",
    "when",
    "unless",
    "if_else",
    "cond",
    "converge",
)
