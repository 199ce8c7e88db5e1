"""
Function combinators: curry, compose/pipe, partial application, memoize,
and small branching helpers for building pipelines.
"""

from .compose import compose, compose_async, pipe, pipe_async
from .curry import Curried, curry, infer_arity
from .flow import cond, constant, converge, if_else, tap, unless, when
from .memoize import CacheInfo, MemoizePolicy, memoize, memoize_async
from .partial import HOLE, partial, partial_right

__all__ = (
    # Curry
    "Curried",
    "curry",
    "infer_arity",
    # Compose
    "compose",
    "compose_async",
    "pipe",
    "pipe_async",
    # Partial
    "HOLE",
    "partial",
    "partial_right",
    # Memoize
    "CacheInfo",
    "MemoizePolicy",
    "memoize",
    "memoize_async",
    # Flow
    "cond",
    "constant",
    "converge",
    "if_else",
    "tap",
    "unless",
    "when",
)
