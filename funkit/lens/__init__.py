"""
Lens: focused, immutable reads and updates of nested data.

Supports the namespace import style:
    from funkit import lens as L

    theme = L.path(["preferences", "theme"])
    L.get(theme, settings)              # "dark"
    L.set(theme, "light", settings)     # new dict, siblings shared
    L.over(theme, str.upper)(settings)  # data-last, pipe friendly
"""

from .lens import (
    Lens,
    compose,
    default,
    filtered,
    find,
    identity_lens,
    index,
    mapped,
    path,
    prop,
)
from .ops import get, over, preview, set
from .store import Listener, Store

__all__ = (
    # Types
    "Lens",
    # Constructors
    "identity_lens",
    "prop",
    "index",
    "path",
    "compose",
    # Derived lenses
    "find",
    "default",
    "mapped",
    "filtered",
    # Operations
    "get",
    "set",
    "over",
    "preview",
    # State
    "Listener",
    "Store",
)
