"""Host navigation provider interface and an in-memory implementation.

The navigator only reads ``location`` and calls ``navigate``/``back``.
Browsers, desktop shells, and test harnesses each supply their own
provider; ``MemoryNavigation`` is the headless one.
"""

import logging
from collections.abc import Callable
from typing import Protocol, runtime_checkable

from screenroute.routing.paths import normalize

logger = logging.getLogger("screenroute.navigation")

Listener = Callable[[str], None]


@runtime_checkable
class Navigation(Protocol):
    """What a navigator needs from its history provider."""

    @property
    def location(self) -> str: ...

    def navigate(self, to: str, basepath: str = "/") -> None: ...

    def back(self) -> None: ...


class MemoryNavigation:
    """An in-memory history stack.

    Usage::

        nav = MemoryNavigation("/users/42")
        nav.navigate("/posts/42")
        nav.back()
        nav.location  # "/users/42"

    Relative destinations are joined onto the basepath passed to
    ``navigate``; absolute ones are pushed as-is.
    """

    __slots__ = ("_entries", "_listeners")

    def __init__(self, initial: str = "/") -> None:
        self._entries: list[str] = [initial]
        self._listeners: list[Listener] = []

    @property
    def location(self) -> str:
        return self._entries[-1]

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    def navigate(self, to: str, basepath: str = "/") -> None:
        target = to if to.startswith("/") else normalize(to, basepath)
        logger.debug("push %s (from %s)", target, self.location)
        self._entries.append(target)
        self._notify()

    def replace(self, to: str, basepath: str = "/") -> None:
        target = to if to.startswith("/") else normalize(to, basepath)
        logger.debug("replace %s with %s", self.location, target)
        self._entries[-1] = target
        self._notify()

    def back(self) -> None:
        """Pop the current entry. No-op on the first entry."""
        if len(self._entries) == 1:
            return
        self._entries.pop()
        self._notify()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with the new location after every change.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        location = self.location
        for listener in list(self._listeners):
            listener(location)

    def __repr__(self) -> str:
        return f"<MemoryNavigation {self.location!r} depth={len(self._entries)}>"
