"""
Maybe: optional values without None checks.

Supports the namespace import style:
    from funkit import maybe as M

    M.safe_divide(10, 2).map(lambda x: x * 2).get_or_else(0)  # 10.0
    M.get_or_else(M.safe_get(user, "address.city"), "Unknown")
"""

from .lift import catching, from_optional, from_result, to_optional, to_result
from .monad import (
    NOTHING,
    Maybe,
    Nothing,
    Some,
    filter,
    flat_map,
    get_or_else,
    is_nothing,
    is_some,
    map,
    nothing,
    of,
    or_else,
    some,
)
from .safe import (
    safe_divide,
    safe_get,
    safe_head,
    safe_log,
    safe_nth,
    safe_parse_float,
    safe_parse_int,
    safe_parse_json,
    safe_sqrt,
    safe_tail,
)

__all__ = (
    # Types
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    # Constructors
    "of",
    "some",
    "nothing",
    # Operations
    "map",
    "flat_map",
    "filter",
    "get_or_else",
    "or_else",
    "is_some",
    "is_nothing",
    # Safe operations
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
    # Interop
    "catching",
    "from_optional",
    "to_optional",
    "from_result",
    "to_result",
)
