"""
Validation combinators
======================

Валидация с накоплением ошибок: every rule runs, every failure is kept.
"""

from __future__ import annotations

import asyncio
import typing
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass

from .._helpers import is_absent
from .._types import Predicate
from .monad import Invalid, Valid, Validation, combine

type Rule[T, E] = Callable[[T], Validation[typing.Any, E]]


def _read(obj: typing.Any, name: str) -> typing.Any:
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def all_of[T, E](*rules: Rule[T, E]) -> Rule[T, E]:
    """
    Run every rule against the same value.

    Valid(value) if all pass, otherwise Invalid with the errors of every
    failing rule in declaration order. Never stops at the first failure.

    Example:
        password = all_of(required("Password"), min_length(8, "Password"))
        password("abc")  # Invalid(['Password must be at least 8 characters long'])
    """

    def rule(value: T) -> Validation[T, E]:
        errors: list[E] = []
        for r in rules:
            match r(value):
                case Invalid(errs):
                    errors.extend(errs)
                case Valid(_):
                    pass
        if errors:
            return Invalid(tuple(errors))
        return Valid(value)

    return rule


def any_of[T, E](*rules: Rule[T, E]) -> Rule[T, E]:
    """
    Valid(value) if at least one rule passes. If all fail, Invalid with all
    their errors concatenated.

    NOTE: Every rule runs even after one has passed, so side effects of
          custom predicates happen for each of them.
    """

    def rule(value: T) -> Validation[T, E]:
        results = [r(value) for r in rules]
        errors: list[E] = []
        for result in results:
            match result:
                case Valid(_):
                    return Valid(value)
                case Invalid(errs):
                    errors.extend(errs)
        return Invalid(tuple(errors)) if errors else Valid(value)

    return rule


def optional[T, E](rule: Rule[T, E]) -> Rule[T | None, E]:
    """Skip rule for None or "" (Valid as-is), delegate otherwise."""

    def optional_rule(value: T | None) -> Validation[typing.Any, E]:
        if is_absent(value):
            return Valid(value)
        return rule(value)

    return optional_rule


def when[T, E](condition: Predicate[T], rule: Rule[T, E]) -> Rule[T, E]:
    """Apply rule only if condition holds for the value."""

    def conditional(value: T) -> Validation[typing.Any, E]:
        if condition(value):
            return rule(value)
        return Valid(value)

    return conditional


def field[E](name: str, rule: Rule[typing.Any, E]) -> Rule[typing.Any, E]:
    """
    Validate obj[name]. Success yields {name: validated_value}.

    Works on mappings and, through getattr, on dataclasses or any object.
    """

    def field_rule(obj: typing.Any) -> Validation[dict[str, typing.Any], E]:
        match rule(_read(obj, name)):
            case Valid(value):
                return Valid({name: value})
            case Invalid(errs):
                return Invalid(errs)

    return field_rule


def object_of[E](fields: Mapping[str, Rule[typing.Any, E]]) -> Rule[typing.Any, E]:
    """
    Validate a whole record: every field rule runs, all failures collected.

    On success the value is a NEW dict holding only the declared fields,
    each with the value its rule returned (so converting rules such as
    is_number() show through). Undeclared keys are dropped.

    Example:
        signup = object_of({
            "name": all_of(required("Name")),
            "email": all_of(required("Email"), email("Email")),
        })
        signup({"name": "", "email": "bad"})
        # Invalid(['Name is required', 'Email must be a valid email address'])
    """

    def object_rule(obj: typing.Any) -> Validation[dict[str, typing.Any], E]:
        combined = combine(*(field(name, rule)(obj) for name, rule in fields.items()))
        match combined:
            case Valid(parts):
                merged: dict[str, typing.Any] = {}
                for part in parts:
                    merged.update(part)
                return Valid(merged)
            case Invalid(_):
                return combined

    return object_rule


def nested(name: str, object_rule: Rule[typing.Any, str]) -> Rule[typing.Any, str]:
    """
    Validate obj[name] as a sub-record; its errors are prefixed "name.".
    """

    def nested_rule(obj: typing.Any) -> Validation[dict[str, typing.Any], str]:
        inner = _read(obj, name)
        if inner is None or isinstance(inner, (str, bytes, int, float, bool)):
            return Invalid((f"{name} must be an object",))
        match object_rule(inner):
            case Valid(value):
                return Valid({name: value})
            case Invalid(errs):
                return Invalid(tuple(f"{name}.{e}" for e in errs))

    return nested_rule


def array_of[T](element_rule: Rule[T, str]) -> Callable[[str], Rule[typing.Any, str]]:
    """
    Validate every element of a list; curried on the field name.

    Each element error is prefixed with its position ("Tags[2]: ...") and
    errors from ALL elements are kept. A non-list input fails immediately.

    Example:
        tags = array_of(min_length(2, "Tag"))("Tags")
        tags(["ok", "x", "y"])
        # Invalid(['Tags[1]: Tag must be at least 2 characters long',
        #          'Tags[2]: Tag must be at least 2 characters long'])
    """

    def for_field(field_name: str) -> Rule[typing.Any, str]:
        def array_rule(value: typing.Any) -> Validation[list[typing.Any], str]:
            if not isinstance(value, (list, tuple)):
                return Invalid((f"{field_name} must be a list",))

            values: list[typing.Any] = []
            errors: list[str] = []
            for i, item in enumerate(value):
                match element_rule(item):
                    case Valid(v):
                        values.append(v)
                    case Invalid(errs):
                        errors.extend(f"{field_name}[{i}]: {e}" for e in errs)

            if errors:
                return Invalid(tuple(errors))
            return Valid(values)

        return array_rule

    return for_field


# ============================================================================
# Forms and async checks
# ============================================================================


@dataclass(frozen=True, slots=True)
class FormResult:
    """Flattened outcome of a form validator, convenient for UI code."""

    is_valid: bool
    data: typing.Any
    errors: tuple[str, ...]

    def field_errors(self, name: str) -> list[str]:
        """Errors whose message starts with the field name."""
        return [e for e in self.errors if e.startswith(name)]


def form_validator(validator: Rule[typing.Any, str]) -> Callable[[typing.Any], FormResult]:
    """
    Wrap a record validator so it returns a FormResult.

    On success data is the validated value; on failure it is the raw input.

    Example:
        check = form_validator(signup)
        result = check({"name": "", "email": "bad"})
        result.field_errors("Email")  # ['Email must be a valid email address']
    """

    def run(form: typing.Any) -> FormResult:
        match validator(form):
            case Valid(value):
                return FormResult(True, value, ())
            case Invalid(errs):
                return FormResult(False, form, tuple(errs))

    return run


type AsyncCheck[T, E] = Callable[[T], Awaitable[Validation[typing.Any, E]]]


def async_validator[E](
    sync_rule: Rule[typing.Any, E],
    *checks: AsyncCheck[typing.Any, E],
) -> Callable[[typing.Any], Awaitable[Validation[typing.Any, E]]]:
    """
    Synchronous rule first, then every async check concurrently.

    Async checks (uniqueness lookups and the like) only run when the
    synchronous rule passed; they receive its validated value. Errors from
    all failing checks are collected in check order.

    Example:
        register = async_validator(signup, email_not_taken, username_free)
        await register(form)
    """

    async def run(value: typing.Any) -> Validation[typing.Any, E]:
        match sync_rule(value):
            case Invalid(_) as failed:
                return failed
            case Valid(validated) as passed:
                results = await asyncio.gather(*(check(validated) for check in checks))
        errors: list[E] = []
        for result in results:
            match result:
                case Invalid(errs):
                    errors.extend(errs)
                case Valid(_):
                    pass
        if errors:
            return Invalid(tuple(errors))
        return passed

    return run


__all__ = (
    "Rule",
    "all_of",
    "any_of",
    "optional",
    "when",
    "field",
    "object_of",
    "nested",
    "array_of",
    "FormResult",
    "form_validator",
    "AsyncCheck",
    "async_validator",
)
