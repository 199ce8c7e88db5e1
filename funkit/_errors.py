from __future__ import annotations

import typing
from collections.abc import Sequence


class ArityError(ValueError):
    """curry() got an arity it cannot work with."""

    arity: object

    def __init__(self, arity: object, reason: str = "must be a non-negative integer") -> None:
        self.arity = arity
        super().__init__(f"Invalid arity {arity!r}: {reason}")


class CurryOverflowError(TypeError):
    """Curried function received more positional arguments than its arity."""

    arity: int
    received: int

    def __init__(self, arity: int, received: int) -> None:
        self.arity = arity
        self.received = received
        super().__init__(f"Expected {arity} argument(s), got {received}")


class ValidationFailedError(Exception):
    """Validation.get() called on Invalid."""

    errors: tuple[typing.Any, ...]

    def __init__(self, errors: Sequence[typing.Any]) -> None:
        self.errors = tuple(errors)
        super().__init__(f"Validation failed: {', '.join(map(str, self.errors))}")


class LensPathError(LookupError):
    """Lens setter cannot reach its focus."""

    key: object

    def __init__(self, key: object, reason: str) -> None:
        self.key = key
        super().__init__(f"Cannot set {key!r}: {reason}")


__all__ = ("ArityError", "CurryOverflowError", "LensPathError", "ValidationFailedError")
