"""
Data-last function forms of the Lens methods.

Handy inside pipe():
    bump = pipe(L.over(counter, lambda n: n + 1), L.set(flag, True))

Every function accepts the data last and, if called without it, returns a
function waiting for the data.
"""

from __future__ import annotations

from collections.abc import Callable

from ..combinator import curry
from ..maybe import Maybe, of
from .lens import Lens


@curry
def get[S, A](lens: Lens[S, A], data: S) -> A:
    return lens.get(data)


@curry
def set[S, A](lens: Lens[S, A], value: A, data: S) -> S:
    return lens.set(value, data)


@curry
def over[S, A](lens: Lens[S, A], fn: Callable[[A], A], data: S) -> S:
    return lens.over(fn, data)


@curry
def preview[S, A](lens: Lens[S, A | None], data: S) -> Maybe[A]:
    """Read through lens into a Maybe: a None focus is NOTHING."""
    return of(lens.get(data))


__all__ = ("get", "set", "over", "preview")
