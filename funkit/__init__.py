"""
funkit: a small functional data toolkit.

Building blocks for pipelines over plain Python data:
- combinator: curry, compose/pipe, partial application, memoize
- maybe:      optional values (Some / Nothing) and safe operations
- validation: error-accumulating checks (Valid / Invalid)
- lens:       immutable nested reads and updates

Architecture:
- Each container is a closed sum type, pattern-matchable with `match`
- Namespaces are meant to be imported whole (`from funkit import lens as L`)
- Maybe and Validation convert to and from kungfu Result at the edges

Error policies stay separate: combinators propagate exceptions, Maybe
represents failure as absence, Validation accumulates messages.
"""

# Namespaces
from . import combinator, lens, maybe, validation

# Combinator core
from .combinator import (
    HOLE,
    CacheInfo,
    Curried,
    MemoizePolicy,
    compose,
    curry,
    memoize,
    memoize_async,
    partial,
    partial_right,
    pipe,
)

# Container types
from .lens import Lens, Store
from .maybe import NOTHING, Maybe, Nothing, Some
from .validation import Invalid, Valid, Validation

# Errors
from ._errors import ArityError, CurryOverflowError, LensPathError, ValidationFailedError

__all__ = (
    # Namespaces
    "combinator",
    "lens",
    "maybe",
    "validation",
    # Combinator core
    "Curried",
    "curry",
    "compose",
    "pipe",
    "HOLE",
    "partial",
    "partial_right",
    "CacheInfo",
    "MemoizePolicy",
    "memoize",
    "memoize_async",
    # Maybe
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    # Validation
    "Validation",
    "Valid",
    "Invalid",
    # Lens
    "Lens",
    "Store",
    # Errors
    "ArityError",
    "CurryOverflowError",
    "LensPathError",
    "ValidationFailedError",
)
