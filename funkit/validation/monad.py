"""Validation applicative

Sum type of a successful value (Valid) or a non-empty, ordered list of
errors (Invalid). Unlike Result, independent failures are concatenated
instead of short-circuiting: combine(Invalid(a), Invalid(b)) == Invalid(a + b).

Built to interoperate with kungfu Result via to_result / from_result."""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from kungfu import Error, Ok, Result

from .._errors import ValidationFailedError


@dataclass(frozen=True, slots=True)
class Valid[T]:
    value: T

    def is_valid(self) -> bool:
        return True

    def map[U](self, fn: Callable[[T], U]) -> Validation[U, typing.Any]:
        """
        Transform the value. An exception raised by fn becomes a one-error
        Invalid carrying its message.
        """
        try:
            return Valid(fn(self.value))
        except Exception as exc:
            return Invalid((str(exc),))

    def and_then[U, E](self, fn: Callable[[T], Validation[U, E]]) -> Validation[U, E]:
        """Sequential (fail-fast) chaining: run fn on the value."""
        return fn(self.value)

    def get(self) -> T:
        return self.value

    def get_or_else[U](self, default: U) -> T | U:
        return self.value

    def to_result(self) -> Result[T, typing.Any]:
        return Ok(self.value)

    def __repr__(self) -> str:
        return f"Valid({self.value!r})"


@dataclass(frozen=True, slots=True)
class Invalid[E]:
    """Failure with at least one error, in the order they were found."""

    errors: tuple[E, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))
        if not self.errors:
            raise ValueError("Invalid requires at least one error")

    def is_valid(self) -> bool:
        return False

    def map(self, fn: Callable[[typing.Any], typing.Any]) -> Invalid[E]:
        return self

    def and_then(self, fn: Callable[[typing.Any], typing.Any]) -> Invalid[E]:
        return self

    def get(self) -> typing.NoReturn:
        """Raises ValidationFailedError with every accumulated error."""
        raise ValidationFailedError(self.errors)

    def get_or_else[U](self, default: U) -> U:
        return default

    def to_result(self) -> Result[typing.Any, list[E]]:
        return Error(list(self.errors))

    def __repr__(self) -> str:
        return f"Invalid({list(self.errors)!r})"


type Validation[T, E] = Valid[T] | Invalid[E]


# ============================================================================
# Constructors
# ============================================================================


def success[T](value: T) -> Valid[T]:
    return Valid(value)


def failure[E](errors: E | Iterable[E]) -> Invalid[E]:
    """
    Build an Invalid.

    A string (or any non-iterable) is a single error; other iterables are
    taken in order.

    Example:
        failure("Email is required")        # Invalid(['Email is required'])
        failure(["too short", "no digit"])  # Invalid(['too short', 'no digit'])
    """
    if isinstance(errors, (str, bytes)) or not isinstance(errors, Iterable):
        return Invalid((errors,))
    return Invalid(tuple(errors))


def combine[T, E](*validations: Validation[T, E]) -> Validation[list[T], E]:
    """
    Valid(list of values) if all are valid, otherwise one Invalid with every
    error concatenated in argument order.
    """
    values: list[T] = []
    errors: list[E] = []

    for v in validations:
        match v:
            case Valid(value):
                values.append(value)
            case Invalid(errs):
                errors.extend(errs)

    if errors:
        return Invalid(tuple(errors))
    return Valid(values)


# ============================================================================
# Function forms / kungfu interop
# ============================================================================


def get[T](v: Validation[T, typing.Any]) -> T:
    return v.get()


def get_or_else[T, U](v: Validation[T, typing.Any], default: U) -> T | U:
    return v.get_or_else(default)


def to_result[T, E](v: Validation[T, E]) -> Result[T, list[E]]:
    """Valid -> Ok(value), Invalid -> Error(list of errors)."""
    return v.to_result()


def from_result[T, E](result: Result[T, E]) -> Validation[T, E]:
    """
    Lift a kungfu Result. An Error holding a list or tuple spreads into
    several errors, any other error becomes a single one.
    """
    match result:
        case Ok(value):
            return Valid(value)
        case Error(err):
            if isinstance(err, (list, tuple)):
                return failure(err)
            return Invalid((err,))


__all__ = (
    "Validation",
    "Valid",
    "Invalid",
    "success",
    "failure",
    "combine",
    "get",
    "get_or_else",
    "to_result",
    "from_result",
)
