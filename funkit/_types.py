"""
Core type definitions for funkit.

Типы и алиасы используемые по всей библиотеке.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Unary = single-argument step of a compose/pipe chain
type Unary[A, B] = Callable[[A], B]

# KeyFn = memoize cache key builder, receives the call arguments
type KeyFn = Callable[..., Hashable]

__all__ = (
    "Predicate",
    "Unary",
    "KeyFn",
)
