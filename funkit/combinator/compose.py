"""
Compose / pipe
==============

Right-to-left and left-to-right chaining of single-argument functions.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable
from functools import reduce

from .._helpers import identity
from .._types import Unary


def compose(*fns: Unary[typing.Any, typing.Any]) -> Unary[typing.Any, typing.Any]:
    """
    compose(f, g, h)(x) == f(g(h(x)))

    Empty compose is identity. Every step takes exactly one argument.
    """
    if not fns:
        return identity

    def composed(value: typing.Any) -> typing.Any:
        return reduce(lambda acc, fn: fn(acc), reversed(fns), value)

    return composed


def pipe(*fns: Unary[typing.Any, typing.Any]) -> Unary[typing.Any, typing.Any]:
    """
    pipe(f, g, h)(x) == h(g(f(x)))

    Same as compose with the order flipped: pipe(*fs) == compose(*reversed(fs)).
    """
    if not fns:
        return identity

    def piped(value: typing.Any) -> typing.Any:
        return reduce(lambda acc, fn: fn(acc), fns, value)

    return piped


def pipe_async(
    *fns: Unary[typing.Any, typing.Any],
) -> Callable[[typing.Any], Awaitable[typing.Any]]:
    """
    Async pipe: sync and async steps may be mixed, awaitables are awaited
    before the next step runs.

    Example:
        load = pipe_async(fetch_user, lambda u: u.name, str.upper)
        name = await load(42)
    """

    async def piped(value: typing.Any) -> typing.Any:
        result = value
        for fn in fns:
            result = fn(result)
            if inspect.isawaitable(result):
                result = await result
        return result

    return piped


def compose_async(
    *fns: Unary[typing.Any, typing.Any],
) -> Callable[[typing.Any], Awaitable[typing.Any]]:
    """Async compose: right-to-left dual of pipe_async."""
    return pipe_async(*reversed(fns))


__all__ = ("compose", "pipe", "compose_async", "pipe_async")
