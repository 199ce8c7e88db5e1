"""
Мост между Maybe, Optional и kungfu Result.

Функции для перевода значений в Maybe и обратно.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Error, Ok, Result

from .monad import NOTHING, Maybe, Some, of


def from_optional[T](value: T | None) -> Maybe[T]:
    """
    Convert Optional to Maybe. None becomes NOTHING.

    **When to use:** dict.get(), re.match(), ORM lookups: anything already
    returning `T | None`.
    """
    return of(value)


def to_optional[T](m: Maybe[T]) -> T | None:
    match m:
        case Some(value):
            return value
        case _:
            return None


def to_result[T, E](m: Maybe[T], error: Callable[[], E]) -> Result[T, E]:
    """
    Convert Maybe to Result. NOTHING becomes Error(error()).

    Example:
        to_result(safe_get(cfg, "db.url"), error=lambda: "db.url missing")

    NOTE: error is a thunk to avoid building the error when a value is present.
    """
    match m:
        case Some(value):
            return Ok(value)
        case _:
            return Error(error())


def from_result[T, E](result: Result[T, E]) -> Maybe[T]:
    """Ok(v) becomes of(v), Error is dropped to NOTHING."""
    match result:
        case Ok(value):
            return of(value)
        case Error(_):
            return NOTHING


def catching[T](thunk: Callable[[], T | None]) -> Maybe[T]:
    """
    Execute thunk, turning any Exception into NOTHING.

    **When to use:** Bridge exception-based code into a Maybe chain.

    Example:
        catching(lambda: int(raw))
        some(raw).flat_map(lambda r: catching(lambda: decode(r)))

    NOTE: Catches Exception subclasses only; KeyboardInterrupt and friends pass.
    """
    try:
        return of(thunk())
    except Exception:
        return NOTHING


__all__ = (
    "from_optional",
    "to_optional",
    "to_result",
    "from_result",
    "catching",
)
