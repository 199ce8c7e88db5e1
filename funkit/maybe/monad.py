"""Maybe monad

Sum type of a present value (Some) or its absence (Nothing).

Monadic laws:
- Left identity: some(a).flat_map(f) ≡ f(a)
- Right identity: m.flat_map(some) ≡ m
- Associativity: m.flat_map(f).flat_map(g) ≡ m.flat_map(x => f(x).flat_map(g))"""

from __future__ import annotations

import typing
from collections.abc import Callable
from dataclasses import dataclass

from .._types import Predicate


@dataclass(frozen=True, slots=True)
class Some[T]:
    """Present value. Never wraps None."""

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            raise ValueError("Some cannot wrap None, use NOTHING for absence")

    def is_some(self) -> bool:
        return True

    def is_nothing(self) -> bool:
        return False

    def map[U](self, fn: Callable[[T], U | None]) -> Maybe[U]:
        """
        Apply fn to the value. A None result becomes NOTHING.

        Exceptions raised by fn propagate; wrap fn with catching() to turn
        them into absence instead.

        NOTE: The composition law holds only while fn never returns None.
              m.map(f).map(g) stops at f's None, while m.map(lambda x: g(f(x)))
              hands that None to g, which may return a value.
        """
        return of(fn(self.value))

    def flat_map[U](self, fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return fn(self.value)

    def filter(self, predicate: Predicate[T]) -> Maybe[T]:
        return self if predicate(self.value) else NOTHING

    def get_or_else[U](self, default: U) -> T | U:
        return self.value

    def or_else(self, alternative: Maybe[T]) -> Maybe[T]:
        return self

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


class Nothing:
    """Absence. A single shared instance, NOTHING."""

    __slots__ = ()
    __match_args__ = ()
    _instance: typing.ClassVar[Nothing | None] = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def is_some(self) -> bool:
        return False

    def is_nothing(self) -> bool:
        return True

    def map(self, fn: Callable[[typing.Any], typing.Any]) -> Nothing:
        return self

    def flat_map(self, fn: Callable[[typing.Any], typing.Any]) -> Nothing:
        return self

    def filter(self, predicate: Predicate[typing.Any]) -> Nothing:
        return self

    def get_or_else[U](self, default: U) -> U:
        return default

    def or_else[T](self, alternative: Maybe[T]) -> Maybe[T]:
        return alternative

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "Nothing"

    def __reduce__(self) -> tuple[type[Nothing], tuple[()]]:
        return (Nothing, ())


NOTHING: typing.Final = Nothing()

type Maybe[T] = Some[T] | Nothing


# ============================================================================
# Constructors
# ============================================================================


def of[T](value: T | None) -> Maybe[T]:
    """Wrap value; None is the only thing that becomes NOTHING."""
    if value is None:
        return NOTHING
    return Some(value)


# Alias: some() reads better at call sites that know the value is present
some = of


def nothing() -> Nothing:
    return NOTHING


# ============================================================================
# Function forms (Maybe first)
# ============================================================================


def map[T, U](m: Maybe[T], fn: Callable[[T], U | None]) -> Maybe[U]:
    return m.map(fn)


def flat_map[T, U](m: Maybe[T], fn: Callable[[T], Maybe[U]]) -> Maybe[U]:
    return m.flat_map(fn)


def filter[T](m: Maybe[T], predicate: Predicate[T]) -> Maybe[T]:
    return m.filter(predicate)


def get_or_else[T, U](m: Maybe[T], default: U) -> T | U:
    return m.get_or_else(default)


def or_else[T](m: Maybe[T], alternative: Maybe[T]) -> Maybe[T]:
    return m.or_else(alternative)


def is_some(m: Maybe[typing.Any]) -> bool:
    return m.is_some()


def is_nothing(m: Maybe[typing.Any]) -> bool:
    return m.is_nothing()


__all__ = (
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    "of",
    "some",
    "nothing",
    "map",
    "flat_map",
    "filter",
    "get_or_else",
    "or_else",
    "is_some",
    "is_nothing",
)
