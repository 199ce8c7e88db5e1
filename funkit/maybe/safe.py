"""
Safe operations
===============

Partial functions made total: each returns NOTHING where the plain
version would raise or return garbage.
"""

from __future__ import annotations

import json
import math
import typing
from collections.abc import Mapping, Sequence

from .monad import NOTHING, Maybe, Some, of


def safe_get(obj: typing.Any, path: str) -> Maybe[typing.Any]:
    """
    Walk a dot-separated path, NOTHING at the first missing segment.

    Mappings are read by key, sequences by integer segment, anything else
    by attribute.

    Example:
        safe_get({"a": {"b": {"c": 1}}}, "a.b.c")  # Some(1)
        safe_get({"a": {}}, "a.b.c")               # Nothing
        safe_get({"tags": ["x", "y"]}, "tags.1")   # Some("y")
    """
    current: Maybe[typing.Any] = of(obj)
    for segment in path.split("."):
        current = current.flat_map(lambda value, s=segment: _step(value, s))
    return current


def _step(value: typing.Any, segment: str) -> Maybe[typing.Any]:
    match value:
        case Mapping():
            return of(value.get(segment))
        case str() | bytes():
            return NOTHING
        case Sequence():
            return safe_parse_int(segment).flat_map(lambda i: safe_nth(i, value))
        case _:
            return of(getattr(value, segment, None))


def safe_divide(dividend: float, divisor: float) -> Maybe[float]:
    if divisor == 0:
        return NOTHING
    return Some(dividend / divisor)


def safe_head[T](items: Sequence[T]) -> Maybe[T]:
    return safe_nth(0, items)


def safe_tail[T](items: Sequence[T]) -> Maybe[Sequence[T]]:
    """Everything after the first element; NOTHING for an empty sequence."""
    if not items:
        return NOTHING
    return Some(items[1:])


def safe_nth[T](index: int, items: Sequence[T]) -> Maybe[T]:
    """Element at index; NOTHING out of range. Negative indexes are out of range."""
    if index < 0 or index >= len(items):
        return NOTHING
    return of(items[index])


def safe_sqrt(number: float) -> Maybe[float]:
    if number < 0:
        return NOTHING
    return Some(math.sqrt(number))


def safe_log(number: float) -> Maybe[float]:
    if number <= 0:
        return NOTHING
    return Some(math.log(number))


def safe_parse_int(text: typing.Any) -> Maybe[int]:
    """Base-10 integer from a string; surrounding whitespace is allowed."""
    if not isinstance(text, str):
        return NOTHING
    try:
        return Some(int(text.strip(), 10))
    except ValueError:
        return NOTHING


def safe_parse_float(text: typing.Any) -> Maybe[float]:
    """Finite float from a string; "nan" and "inf" are rejected."""
    if not isinstance(text, str):
        return NOTHING
    try:
        number = float(text.strip())
    except ValueError:
        return NOTHING
    return Some(number) if math.isfinite(number) else NOTHING


def safe_parse_json(text: typing.Any) -> Maybe[typing.Any]:
    """Decoded JSON document; a literal null decodes to NOTHING.

    Malformed or too deeply nested input is NOTHING as well.
    """
    if not isinstance(text, (str, bytes, bytearray)):
        return NOTHING
    try:
        return of(json.loads(text))
    except (ValueError, RecursionError):
        return NOTHING


__all__ = (
    "safe_get",
    "safe_divide",
    "safe_head",
    "safe_tail",
    "safe_nth",
    "safe_sqrt",
    "safe_log",
    "safe_parse_int",
    "safe_parse_float",
    "safe_parse_json",
)
