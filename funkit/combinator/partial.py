"""
Partial application
===================

Фиксация части аргументов без отслеживания арности.
"""

from __future__ import annotations

import typing
from collections.abc import Callable


class _Hole:
    """Placeholder for an argument supplied later."""

    __slots__ = ()
    _instance: typing.ClassVar[_Hole | None] = None

    def __new__(cls) -> _Hole:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "HOLE"


HOLE: typing.Final = _Hole()


def partial[R](
    fn: Callable[..., R],
    /,
    *fixed: typing.Any,
    **fixed_kwargs: typing.Any,
) -> Callable[..., R]:
    """
    Fix leading arguments of fn.

    **When to use:** Specialising a general function once and calling it
    many times: partial(request, "GET"), partial(validate, email_rules).

    Example:
        add = lambda a, b, c: a + b + c
        partial(add, 10)(2, 3)            # 15
        partial(add, HOLE, 5)(1, 2)       # 1 + 5 + 2

    NOTE: HOLE slots are filled left-to-right from the call arguments,
          leftovers are appended. The result always calls fn immediately,
          it never returns another partial.
    """

    def applied(*args: typing.Any, **kwargs: typing.Any) -> R:
        return fn(*_fill(fixed, args), **{**fixed_kwargs, **kwargs})

    return applied


def partial_right[R](fn: Callable[..., R], /, *fixed: typing.Any) -> Callable[..., R]:
    """
    Fix trailing arguments of fn.

    Example:
        sub = lambda a, b, c: a - b - c
        partial_right(sub, 10, 5)(50)  # 35
    """

    def applied(*args: typing.Any, **kwargs: typing.Any) -> R:
        return fn(*args, *fixed, **kwargs)

    return applied


def _fill(fixed: tuple[typing.Any, ...], args: tuple[typing.Any, ...]) -> list[typing.Any]:
    filled: list[typing.Any] = []
    rest = iter(args)
    for arg in fixed:
        if arg is HOLE:
            value = next(rest, HOLE)
            if value is HOLE:
                raise TypeError("Not enough arguments to fill every HOLE")
            filled.append(value)
        else:
            filled.append(arg)
    filled.extend(rest)
    return filled


__all__ = ("HOLE", "partial", "partial_right")
