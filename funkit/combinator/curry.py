"""
Curry
=====

Накопление аргументов до заданной арности.
"""

from __future__ import annotations

import inspect
import typing
from collections.abc import Callable

from .._errors import ArityError, CurryOverflowError

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def infer_arity(fn: Callable[..., typing.Any]) -> int:
    """Count required positional parameters of fn."""
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError) as exc:
        raise ArityError(None, f"cannot infer arity of {fn!r}, pass it explicitly") from exc
    return sum(
        1
        for p in signature.parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


class Curried[R]:
    """
    Function waiting for the rest of its positional arguments.

    Every call returns a NEW Curried until arity is reached, then calls
    the wrapped function exactly once. Accepts any number of arguments
    per call:

        add3 = curry(lambda a, b, c: a + b + c)
        add3(1)(2)(3) == add3(1, 2)(3) == add3(1, 2, 3) == 6

    Keyword arguments are carried along and do not count toward arity.
    """

    __slots__ = ("__wrapped__", "arity", "args", "kwargs")

    def __init__(
        self,
        fn: Callable[..., R],
        arity: int,
        args: tuple[typing.Any, ...] = (),
        kwargs: dict[str, typing.Any] | None = None,
        /,
    ) -> None:
        self.__wrapped__ = fn
        self.arity = arity
        self.args = args
        self.kwargs = kwargs or {}

    @property
    def remaining(self) -> int:
        return self.arity - len(self.args)

    def __call__(self, *args: typing.Any, **kwargs: typing.Any) -> R | Curried[R]:
        collected = self.args + args
        merged = {**self.kwargs, **kwargs}
        if len(collected) > self.arity:
            raise CurryOverflowError(self.arity, len(collected))
        if len(collected) == self.arity:
            return self.__wrapped__(*collected, **merged)
        return Curried(self.__wrapped__, self.arity, collected, merged)

    def __repr__(self) -> str:
        name = getattr(self.__wrapped__, "__qualname__", repr(self.__wrapped__))
        return f"<curried {name} {len(self.args)}/{self.arity}>"


def curry[R](fn: Callable[..., R], arity: int | None = None) -> Curried[R]:
    """
    Curry fn over `arity` positional arguments.

    **When to use:** Configuration-first helpers: validate(rules)(field)(value),
    request(method)(url)(body).

    Example:
        volume = curry(lambda l, w, h: l * w * h)
        volume(2)(3)(4)  # 24

        total = curry(lambda *xs: sum(xs), 3)
        total(1)(2)(3)   # 6

    NOTE: arity is inferred from required positional parameters when omitted.
          Functions with *args need it spelled out. Extra positional arguments
          raise CurryOverflowError before fn runs.
    """
    if arity is None:
        arity = infer_arity(fn)
    elif isinstance(arity, bool) or not isinstance(arity, int) or arity < 0:
        raise ArityError(arity)
    return Curried(fn, arity)


__all__ = ("Curried", "curry", "infer_arity")
