"""
Memoize combinators
===================

Кэширование результатов по структурному ключу аргументов.
"""

from __future__ import annotations

import functools
import logging
import threading
import time
import typing
from collections import OrderedDict
from collections.abc import Awaitable, Callable, Hashable
from dataclasses import dataclass

from .._helpers import make_key
from .._types import KeyFn

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MemoizePolicy:
    """
    Cache configuration.

    maxsize=None keeps every entry forever; an int turns on LRU eviction.
    ttl (seconds) expires entries by monotonic clock.
    """

    maxsize: int | None = None
    ttl: float | None = None

    def __post_init__(self) -> None:
        if self.maxsize is not None and self.maxsize < 1:
            raise ValueError("MemoizePolicy.maxsize must be >= 1")
        if self.ttl is not None and self.ttl <= 0.0:
            raise ValueError("MemoizePolicy.ttl must be > 0")

    @classmethod
    def unbounded(cls) -> MemoizePolicy:
        """Never evict. Fine for pure functions over a small input domain."""
        return cls()

    @classmethod
    def lru(cls, maxsize: int) -> MemoizePolicy:
        """Keep the `maxsize` most recently used entries."""
        return cls(maxsize=maxsize)

    @classmethod
    def expiring(cls, ttl: float, maxsize: int | None = None) -> MemoizePolicy:
        """Entries go stale after `ttl` seconds."""
        return cls(maxsize=maxsize, ttl=ttl)


@dataclass(frozen=True, slots=True)
class CacheInfo:
    hits: int
    misses: int
    size: int
    maxsize: int | None


class _Cache:
    """OrderedDict-backed store shared by memoize and memoize_async."""

    __slots__ = ("_entries", "_lock", "hits", "misses", "policy", "owner")

    def __init__(self, policy: MemoizePolicy, owner: str) -> None:
        self._entries: OrderedDict[Hashable, tuple[typing.Any, float]] = OrderedDict()
        self._lock = threading.RLock()
        self.hits = 0
        self.misses = 0
        self.policy = policy
        self.owner = owner

    def lookup(self, key: Hashable) -> tuple[bool, typing.Any]:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                value, stored_at = entry
                if self.policy.ttl is not None and time.monotonic() - stored_at > self.policy.ttl:
                    logger.debug("%s: entry expired", self.owner)
                    del self._entries[key]
                else:
                    self._entries.move_to_end(key)
                    self.hits += 1
                    return True, value
            self.misses += 1
            return False, None

    def store(self, key: Hashable, value: typing.Any) -> None:
        with self._lock:
            self._entries[key] = (value, time.monotonic())
            self._entries.move_to_end(key)
            maxsize = self.policy.maxsize
            while maxsize is not None and len(self._entries) > maxsize:
                self._entries.popitem(last=False)
                logger.debug("%s: evicted least recently used entry", self.owner)

    def info(self) -> CacheInfo:
        with self._lock:
            return CacheInfo(self.hits, self.misses, len(self._entries), self.policy.maxsize)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self.hits = 0
            self.misses = 0


def _attach(wrapper: typing.Any, cache: _Cache) -> None:
    wrapper.cache_info = cache.info
    wrapper.cache_clear = cache.clear


@typing.overload
def memoize[**P, R](
    fn: Callable[P, R],
    /,
    *,
    key: KeyFn | None = None,
    policy: MemoizePolicy | None = None,
    condition: Callable[..., bool] | None = None,
) -> Callable[P, R]: ...


@typing.overload
def memoize[**P, R](
    fn: None = None,
    /,
    *,
    key: KeyFn | None = None,
    policy: MemoizePolicy | None = None,
    condition: Callable[..., bool] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]: ...


def memoize(
    fn: Callable[..., typing.Any] | None = None,
    /,
    *,
    key: KeyFn | None = None,
    policy: MemoizePolicy | None = None,
    condition: Callable[..., bool] | None = None,
) -> typing.Any:
    """
    Cache fn results by argument structure.

    **When to use:** Pure, expensive functions called repeatedly with the
    same inputs (recursive fibonacci, chart data processing).

    Example:
        @memoize
        def fib(n: int) -> int:
            return n if n < 2 else fib(n - 1) + fib(n - 2)

        @memoize(policy=MemoizePolicy.lru(256))
        def render(data: dict) -> str: ...

        render.cache_info()  # CacheInfo(hits=..., misses=..., size=..., maxsize=256)

        # only cache long inputs; short ones are recomputed every time
        @memoize(condition=lambda text: len(text) > 5)
        def shout(text: str) -> str: ...

    NOTE: The default key is structural: two distinct but equal dicts hit the
          same entry. Pass key= for identity or custom semantics.
          Unhashable objects without structure are keyed by identity.
          Exceptions are never cached. Calls for which condition(*args,
          **kwargs) is false bypass the cache and leave its stats alone.
    """
    key_fn = key or make_key
    chosen = policy or MemoizePolicy.unbounded()

    def decorate(target: Callable[..., typing.Any]) -> Callable[..., typing.Any]:
        cache = _Cache(chosen, getattr(target, "__qualname__", repr(target)))

        @functools.wraps(target)
        def wrapper(*args: typing.Any, **kwargs: typing.Any) -> typing.Any:
            if condition is not None and not condition(*args, **kwargs):
                return target(*args, **kwargs)
            k = key_fn(*args, **kwargs)
            hit, value = cache.lookup(k)
            if hit:
                return value
            value = target(*args, **kwargs)
            cache.store(k, value)
            return value

        _attach(wrapper, cache)
        return wrapper

    if fn is None:
        return decorate
    return decorate(fn)


def memoize_async[**P, R](
    fn: Callable[P, Awaitable[R]],
    /,
    *,
    key: KeyFn | None = None,
    policy: MemoizePolicy | None = None,
    condition: Callable[..., bool] | None = None,
) -> Callable[P, Awaitable[R]]:
    """
    Memoize a coroutine function.

    The completed value is stored after the await, never the pending
    coroutine. Failures are not cached.

    Example:
        get_user = memoize_async(api.get_user)
        await get_user(1)  # hits the API
        await get_user(1)  # served from cache

    NOTE: Two overlapping calls with the same key both run fn; the second
          one to finish overwrites the entry. condition works as in memoize.
    """
    key_fn = key or make_key
    cache = _Cache(policy or MemoizePolicy.unbounded(), getattr(fn, "__qualname__", repr(fn)))

    @functools.wraps(fn)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        if condition is not None and not condition(*args, **kwargs):
            return await fn(*args, **kwargs)
        k = key_fn(*args, **kwargs)
        hit, value = cache.lookup(k)
        if hit:
            return value
        result = await fn(*args, **kwargs)
        cache.store(k, result)
        return result

    _attach(wrapper, cache)
    return wrapper


__all__ = ("CacheInfo", "MemoizePolicy", "memoize", "memoize_async")
