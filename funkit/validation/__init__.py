"""
Validation: error-accumulating checks for forms and records.

Supports the namespace import style:
    from funkit import validation as V

    signup = V.object_of({
        "name": V.all_of(V.required("Name")),
        "email": V.all_of(V.required("Email"), V.email("Email")),
    })
    signup(form)  # Valid({...}) or Invalid([...every message...])

Inside this namespace the short names V.all, V.any and V.object are
aliases of all_of, any_of and object_of.
"""

from .combinators import (
    AsyncCheck,
    FormResult,
    Rule,
    all_of,
    any_of,
    array_of,
    async_validator,
    field,
    form_validator,
    nested,
    object_of,
    optional,
    when,
)
from .monad import (
    Invalid,
    Valid,
    Validation,
    combine,
    failure,
    from_result,
    get,
    get_or_else,
    success,
    to_result,
)
from .rules import (
    EMAIL_PATTERN,
    array_length,
    custom,
    email,
    in_range,
    is_number,
    max_length,
    min_length,
    non_empty_list,
    pattern,
    required,
)

all = all_of
any = any_of
object = object_of

__all__ = (
    # Types
    "Validation",
    "Valid",
    "Invalid",
    "Rule",
    # Constructors
    "success",
    "failure",
    "combine",
    # Extractors / interop
    "get",
    "get_or_else",
    "to_result",
    "from_result",
    # Combinators
    "all_of",
    "any_of",
    "all",
    "any",
    "optional",
    "when",
    "field",
    "object_of",
    "object",
    "nested",
    "array_of",
    # Forms and async checks
    "FormResult",
    "form_validator",
    "AsyncCheck",
    "async_validator",
    # Rules
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
