"""
Store
=====

Holder for one immutable state value, updated only through lenses.
Subscribers are told about every replacement with (old_state, new_state).
"""

from __future__ import annotations

import logging
import typing
from collections.abc import Callable

from .lens import Lens

logger = logging.getLogger(__name__)

type Listener[S] = Callable[[S, S], typing.Any]


class Store[S]:
    """
    Example:
        store = Store({"user": {"name": "Alice"}, "todos": []})
        unsubscribe = store.subscribe(lambda old, new: render(new))

        store.update(path(["user", "name"]), "Bob")
        store.modify(prop("todos"), lambda todos: [*todos, new_todo])
        store.select(path(["user", "name"]))  # "Bob"

        unsubscribe()
    """

    __slots__ = ("_state", "_listeners")

    def __init__(self, initial: S, /) -> None:
        self._state = initial
        self._listeners: list[Listener[S]] = []

    @property
    def state(self) -> S:
        return self._state

    def select[A](self, lens: Lens[S, A]) -> A:
        return lens.get(self._state)

    def update[A](self, lens: Lens[S, A], value: A) -> S:
        return self._replace(lens.set(value, self._state))

    def modify[A](self, lens: Lens[S, A], fn: Callable[[A], A]) -> S:
        return self._replace(lens.over(fn, self._state))

    def subscribe(self, listener: Listener[S]) -> Callable[[], None]:
        """Register listener; returns a callable that removes it again."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _replace(self, new_state: S) -> S:
        old_state, self._state = self._state, new_state
        logger.debug("state replaced, notifying %d listener(s)", len(self._listeners))
        for listener in list(self._listeners):
            listener(old_state, new_state)
        return new_state


__all__ = ("Listener", "Store")
