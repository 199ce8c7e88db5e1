"""
Lens
====

Composable getter/setter pair focusing on one part of an immutable
structure. Setters always return a new structure and never mutate; untouched
branches are shared by reference with the original.

Lens laws (for every lens built here):
- get-set: l.get(l.set(a, s)) == a
- set-get: l.set(l.get(s), s) == s
"""

from __future__ import annotations

import dataclasses
import typing
from collections.abc import Callable, Iterable, Mapping, Sequence

from .._errors import LensPathError
from .._types import Predicate

_SKIP = object()


class Lens[S, A]:
    """
    Pair of pure functions: getter S -> A and setter (A, S) -> S.

    Example:
        theme = path(["preferences", "theme"])
        theme.get(state)             # "dark"
        theme.set("light", state)    # new state, other branches shared
        theme.over(str.upper, state)
    """

    __slots__ = ("getter", "setter")

    getter: Callable[[S], A]
    setter: Callable[[A, S], S]

    def __init__(self, getter: Callable[[S], A], setter: Callable[[A, S], S], /) -> None:
        object.__setattr__(self, "getter", getter)
        object.__setattr__(self, "setter", setter)

    def __setattr__(self, name: str, value: typing.Any) -> None:
        raise AttributeError("Lens is immutable")

    def get(self, data: S) -> A:
        return self.getter(data)

    def set(self, value: A, data: S) -> S:
        return self.setter(value, data)

    def over(self, fn: Callable[[A], A], data: S) -> S:
        """set(fn(get(data)), data)."""
        return self.setter(fn(self.getter(data)), data)

    def compose[B](self, inner: Lens[A, B]) -> Lens[S, B]:
        """
        Focus deeper: self is the outer lens, inner works on its focus.

        The setter reads the outer focus, updates it through inner, and
        writes the result back through self, so only the touched path is
        copied.
        """
        outer = self

        def getter(data: S) -> B:
            return inner.getter(outer.getter(data))

        def setter(value: B, data: S) -> S:
            return outer.setter(inner.setter(value, outer.getter(data)), data)

        return Lens(getter, setter)

    def __repr__(self) -> str:
        return f"Lens({getattr(self.getter, '__qualname__', self.getter)!r})"


# ============================================================================
# Primitive lenses
# ============================================================================


def identity_lens() -> Lens[typing.Any, typing.Any]:
    """Focus on the whole structure."""
    return Lens(lambda data: data, lambda value, _data: value)


def prop(name: str) -> Lens[typing.Any, typing.Any]:
    """
    Focus on a key of a mapping or an attribute of an object.

    Reading a missing key (or reading through None) gives None. Setting
    returns a shallow copy: a dict for mappings, dataclasses.replace() for
    dataclasses, _replace() for named tuples. Setting on None creates
    {name: value}. Setting None where the key is missing returns data
    unchanged.
    """

    def getter(data: typing.Any) -> typing.Any:
        if data is None:
            return None
        if isinstance(data, Mapping):
            return data.get(name)
        return getattr(data, name, None)

    def has(data: typing.Any) -> bool:
        if data is None:
            return False
        if isinstance(data, Mapping):
            return name in data
        return hasattr(data, name)

    def setter(value: typing.Any, data: typing.Any) -> typing.Any:
        if value is None and not has(data):
            return data
        if data is None:
            return {name: value}
        if isinstance(data, Mapping):
            return {**data, name: value}
        if dataclasses.is_dataclass(data) and not isinstance(data, type):
            return dataclasses.replace(data, **{name: value})
        if isinstance(data, tuple) and hasattr(data, "_replace"):
            return data._replace(**{name: value})
        raise LensPathError(name, f"{type(data).__name__} has no copy-on-write update")

    return Lens(getter, setter)


def index(i: int) -> Lens[typing.Any, typing.Any]:
    """
    Focus on position i of a list or tuple.

    Out-of-range reads give None. Setting returns a copy of the same
    sequence type; setting past the end pads with None, setting on None
    builds a fresh list. A negative index must already exist. Setting None
    at a position that does not exist returns data unchanged.
    """

    def has(data: typing.Any) -> bool:
        if data is None or isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            return False
        return -len(data) <= i < len(data)

    def getter(data: typing.Any) -> typing.Any:
        return data[i] if has(data) else None

    def setter(value: typing.Any, data: typing.Any) -> typing.Any:
        if value is None and not has(data):
            return data
        if data is None:
            data = []
        if isinstance(data, (str, bytes)) or not isinstance(data, Sequence):
            raise LensPathError(i, f"{type(data).__name__} is not a list")
        items = list(data)
        if i < -len(items):
            raise LensPathError(i, f"index out of range for length {len(items)}")
        if i >= len(items):
            items.extend([None] * (i - len(items) + 1))
        items[i] = value
        return tuple(items) if isinstance(data, tuple) else items

    return Lens(getter, setter)


def path(keys: Iterable[str | int]) -> Lens[typing.Any, typing.Any]:
    """
    Compose prop/index lenses along keys: ints use index(), everything else
    prop(). An empty path is the identity lens.

    Example:
        path(["todos", 0, "done"]).set(True, state)
    """
    lenses = [index(k) if isinstance(k, int) and not isinstance(k, bool) else prop(k) for k in keys]
    return compose(*lenses)


def compose(*lenses: Lens[typing.Any, typing.Any]) -> Lens[typing.Any, typing.Any]:
    """compose(outer, middle, inner): left-most lens is applied to the data first."""
    if not lenses:
        return identity_lens()
    result = lenses[0]
    for lens in lenses[1:]:
        result = result.compose(lens)
    return result


# ============================================================================
# Derived lenses
# ============================================================================


def find[T](predicate: Predicate[T]) -> Lens[Sequence[T], T | None]:
    """
    Focus on the first element matching predicate.

    With no match (or no sequence at all), get gives None and set returns
    the input unchanged.

    Example:
        todo = find(lambda t: t["id"] == 2)
        path(["todos"]).compose(todo).compose(prop("done")).set(True, state)
    """

    def position(items: Sequence[T] | None) -> int | None:
        if items is None:
            return None
        return next((n for n, item in enumerate(items) if predicate(item)), None)

    def getter(items: Sequence[T] | None) -> T | None:
        n = position(items)
        return None if n is None else items[n]

    def setter(value: T | None, items: Sequence[T] | None) -> Sequence[T] | None:
        n = position(items)
        if n is None:
            return items
        return index(n).set(value, items)

    return Lens(getter, setter)


def default[S, A](lens: Lens[S, A | None], fallback: A) -> Lens[S, A]:
    """Getter returns fallback when the focus is None; setter is unchanged."""

    def getter(data: S) -> A:
        value = lens.get(data)
        return fallback if value is None else value

    return Lens(getter, lens.setter)


def mapped[S, A](item_lens: Lens[S, A]) -> Lens[Sequence[S], list[A]]:
    """
    Focus on the same part of every element.

    Setting zips the new values with the elements; elements beyond the
    supplied values are kept as they are. Reading through None gives [],
    and setting on None leaves it None.
    """

    def getter(items: Sequence[S] | None) -> list[A]:
        if items is None:
            return []
        return [item_lens.get(item) for item in items]

    def setter(values: Sequence[A], items: Sequence[S] | None) -> list[S] | None:
        if items is None:
            return None
        return [
            item_lens.set(values[n], item) if n < len(values) else item
            for n, item in enumerate(items)
        ]

    return Lens(getter, setter)


def filtered[T](predicate: Predicate[T]) -> Lens[Sequence[T], list[T]]:
    """
    Focus on the elements matching predicate, as a list.

    Setting writes the new values back into the matching slots in order and
    keeps every other element in place. Surplus matching elements are
    dropped and surplus values are appended.

    Example:
        open_todos = filtered(lambda t: not t["completed"])
        open_todos.over(lambda ts: [{**t, "text": t["text"].upper()} for t in ts], todos)
    """

    def getter(items: Sequence[T] | None) -> list[T]:
        if items is None:
            return []
        return [item for item in items if predicate(item)]

    def setter(values: Sequence[T], items: Sequence[T] | None) -> list[T] | None:
        if items is None:
            return list(values) if values else None
        replacements = iter(values)
        result: list[T] = []
        for item in items:
            if not predicate(item):
                result.append(item)
                continue
            replacement = next(replacements, _SKIP)
            if replacement is not _SKIP:
                result.append(replacement)
        result.extend(replacements)
        return result

    return Lens(getter, setter)


__all__ = (
    "Lens",
    "identity_lens",
    "prop",
    "index",
    "path",
    "compose",
    "find",
    "default",
    "mapped",
    "filtered",
)
