"""
Field rules
===========

Ready-made rules, each parameterised by the human-readable field name so
messages read "Email is required" without any extra formatting step.
"""

from __future__ import annotations

import re
import typing
from collections.abc import Callable

from .._helpers import is_absent
from ..maybe import NOTHING, Maybe, Some, safe_parse_float
from .monad import Invalid, Valid, Validation

type StrRule = Callable[[typing.Any], Validation[typing.Any, str]]

EMAIL_PATTERN: typing.Final = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def _to_number(value: typing.Any) -> Maybe[int | float]:
    match value:
        case bool():
            return NOTHING
        case int() | float():
            return Some(value)
        case str():
            return safe_parse_float(value)
        case _:
            return NOTHING


def required(field_name: str) -> StrRule:
    """Reject None and the empty string."""

    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        if is_absent(value):
            return Invalid((f"{field_name} is required",))
        return Valid(value)

    return rule


def min_length(minimum: int, field_name: str) -> StrRule:
    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        if not isinstance(value, str) or len(value) < minimum:
            return Invalid((f"{field_name} must be at least {minimum} characters long",))
        return Valid(value)

    return rule


def max_length(maximum: int, field_name: str) -> StrRule:
    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        if not isinstance(value, str) or len(value) > maximum:
            return Invalid((f"{field_name} must be no more than {maximum} characters long",))
        return Valid(value)

    return rule


def pattern(
    regex: str | re.Pattern[str],
    field_name: str,
    message: str | None = None,
) -> StrRule:
    """String must contain a match for regex (re.search semantics)."""
    compiled = re.compile(regex)

    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        if not isinstance(value, str) or compiled.search(value) is None:
            return Invalid((message or f"{field_name} format is invalid",))
        return Valid(value)

    return rule


def email(field_name: str) -> StrRule:
    return pattern(EMAIL_PATTERN, field_name, f"{field_name} must be a valid email address")


def is_number(field_name: str) -> StrRule:
    """
    Accept ints, floats and numeric strings. The Valid value is the number,
    so "42" becomes 42.0. Booleans are not numbers here.
    """

    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        match _to_number(value):
            case Some(number):
                return Valid(number)
            case _:
                return Invalid((f"{field_name} must be a valid number",))

    return rule


def in_range(minimum: float, maximum: float, field_name: str) -> StrRule:
    """Numeric (after is_number conversion) and within [minimum, maximum]."""

    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        number = _to_number(value).filter(lambda n: minimum <= n <= maximum)
        match number:
            case Some(n):
                return Valid(n)
            case _:
                return Invalid((f"{field_name} must be between {minimum} and {maximum}",))

    return rule


def custom(
    predicate: Callable[[typing.Any], bool],
    field_name: str,
    message: str | None = None,
) -> StrRule:
    """
    Arbitrary check. An exception inside predicate is reported as a
    validation error rather than raised.
    """

    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        try:
            ok = predicate(value)
        except Exception as exc:
            return Invalid((f"{field_name} validation error: {exc}",))
        if ok:
            return Valid(value)
        return Invalid((message or f"{field_name} is invalid",))

    return rule


def array_length(minimum: int, maximum: int, field_name: str) -> StrRule:
    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        if not isinstance(value, (list, tuple)):
            return Invalid((f"{field_name} must be a list",))
        if not minimum <= len(value) <= maximum:
            return Invalid((f"{field_name} must have between {minimum} and {maximum} items",))
        return Valid(value)

    return rule


def non_empty_list(field_name: str) -> StrRule:
    def rule(value: typing.Any) -> Validation[typing.Any, str]:
        if not isinstance(value, (list, tuple)) or not value:
            return Invalid((f"{field_name} must be a non-empty list",))
        return Valid(value)

    return rule


__all__ = (
    "EMAIL_PATTERN",
    "required",
    "min_length",
    "max_length",
    "pattern",
    "email",
    "is_number",
    "in_range",
    "custom",
    "array_length",
    "non_empty_list",
)
