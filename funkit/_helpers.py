"""Internal helpers for funkit.

Common functions used across multiple modules.
These are not part of the public API."""

from __future__ import annotations

import typing
from collections.abc import Hashable, Mapping, Set


# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def is_absent(value: object) -> bool:
    """None and the empty string count as "no value" for optional rules."""
    return value is None or value == ""


# Structural cache keys
class _IdentityKey:
    """Key for an unhashable leaf: equal only to a key of the same object.

    Holds a strong reference, so the id cannot be reused by another object
    while the cache entry lives.
    """

    __slots__ = ("obj",)

    def __init__(self, obj: typing.Any) -> None:
        self.obj = obj

    def __eq__(self, other: object) -> bool:
        return isinstance(other, _IdentityKey) and other.obj is self.obj

    def __hash__(self) -> int:
        return id(self.obj)

    def __repr__(self) -> str:
        return f"_IdentityKey({type(self.obj).__name__} at {id(self.obj):#x})"


def freeze(value: typing.Any) -> Hashable:
    """
    Build a hashable, structure-preserving key for value.

    Scalars are tagged with their type, so 1, 1.0 and True never collide.
    Lists and tuples keep element order, mappings are sorted by key repr,
    sets become frozensets. Anything else unhashable falls back to identity;
    the key keeps the object alive so its id is never recycled into a hit.

    Example:
        freeze([1, {"a": 2}]) == freeze([1, {"a": 2}])  # True
        freeze(1) == freeze(True)                        # False
    """
    match value:
        case None | bool() | int() | float() | complex() | str() | bytes():
            return (type(value).__name__, value)
        case list() | tuple():
            return (type(value).__name__, tuple(freeze(v) for v in value))
        case Mapping():
            items = sorted(value.items(), key=lambda kv: repr(kv[0]))
            return ("mapping", tuple((freeze(k), freeze(v)) for k, v in items))
        case Set():
            return ("set", frozenset(freeze(v) for v in value))
        case Hashable():
            try:
                hash(value)
            except TypeError:
                return ("id", _IdentityKey(value))
            return (type(value).__qualname__, value)
        case _:
            return ("id", _IdentityKey(value))


def make_key(*args: typing.Any, **kwargs: typing.Any) -> Hashable:
    """Default memoize key: frozen positional args plus sorted keyword args."""
    positional = tuple(freeze(a) for a in args)
    if not kwargs:
        return positional
    return (positional, tuple((k, freeze(v)) for k, v in sorted(kwargs.items())))


__all__ = (
    "identity",
    "is_absent",
    "freeze",
    "make_key",
)
