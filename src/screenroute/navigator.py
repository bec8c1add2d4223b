"""Navigator: the owned state object behind a group of sibling screens.

One navigator holds the compiled routes, the active index, and an
arbitrary user payload. The index changes only through ``update()``,
which recomputes it from the current location.
"""

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, replace
from types import MappingProxyType
from typing import Any

from screenroute.config import NavigatorConfig, check_basepath
from screenroute.context import basepath as mount_basepath
from screenroute.context import get_basepath
from screenroute.navigation import Navigation
from screenroute.routing.matcher import extract_params, interpolate, resolve_active
from screenroute.routing.paths import split_query
from screenroute.routing.segments import RouteTemplate, compile_route

logger = logging.getLogger("screenroute.navigator")


@dataclass(frozen=True, slots=True)
class Screen:
    """One sibling view as seen by the UI layer."""

    index: int
    path: str
    active: bool
    params: dict[str, str | None] | None
    query: str

    @property
    def props(self) -> dict[str, Any]:
        """Params merged with ``query``, ready to hand to the child view."""
        return {**(self.params or {}), "query": self.query}


@dataclass(frozen=True, slots=True)
class NavigatorSnapshot:
    """Point-in-time view of a navigator."""

    index: int
    state: Mapping[str, Any]
    location: str


ActivePredicate = Callable[[int, Screen], bool]


class Navigator:
    """Resolves the active sibling route and navigates between siblings.

    Usage::

        history = MemoryNavigation("/users/42/posts")
        nav = Navigator(["users/:id", "users/:id/posts"], history)
        nav.index          # 1
        nav.change(0)      # navigates to "/users/42"
        nav.update()       # 0

    The basepath comes from the *basepath* argument, else a non-root
    ``config.basepath``, else the ambient ``get_basepath()``. A relative
    basepath raises ``ConfigurationError``.
    """

    __slots__ = (
        "_basepath",
        "_config",
        "_default_index",
        "_index",
        "_location",
        "_navigation",
        "_routes",
        "_state",
        "_templates",
    )

    def __init__(
        self,
        routes: Sequence[str],
        navigation: Navigation,
        *,
        basepath: str | None = None,
        default_index: int | None = None,
        initial_state: Mapping[str, Any] | None = None,
        config: NavigatorConfig | None = None,
    ) -> None:
        config = config or NavigatorConfig()
        if basepath is None:
            basepath = config.basepath if config.basepath != "/" else get_basepath()
        if default_index is None:
            default_index = config.default_index
        if initial_state is None:
            initial_state = config.initial_state

        self._config = config
        self._basepath = check_basepath(basepath)
        self._navigation = navigation
        self._routes = tuple(routes)
        self._templates = tuple(compile_route(route, basepath) for route in self._routes)
        self._state: dict[str, Any] = dict(initial_state)
        self._location = navigation.location
        self._index = resolve_active(self._templates, self._location, default_index)
        self._default_index = default_index

    # -- Read-only views ------------------------------------------------------

    @property
    def index(self) -> int:
        return self._index

    @property
    def basepath(self) -> str:
        return self._basepath

    @property
    def location(self) -> str:
        return self._location

    @property
    def routes(self) -> tuple[str, ...]:
        return self._routes

    @property
    def templates(self) -> tuple[RouteTemplate, ...]:
        return self._templates

    @property
    def state(self) -> Mapping[str, Any]:
        return MappingProxyType(self._state)

    @property
    def navigation(self) -> Navigation:
        return self._navigation

    # -- Mutation ---------------------------------------------------------------

    def update(self, location: str | None = None) -> int:
        """Recompute the active index if the location changed.

        *location* defaults to the navigation provider's current location.
        Returns the (possibly unchanged) active index.
        """
        if location is None:
            location = self._navigation.location
        if location == self._location:
            return self._index

        self._location = location
        index = resolve_active(self._templates, location, self._default_index)
        if index != self._index:
            if self._config.log_changes:
                logger.debug("active %d -> %d at %s", self._index, index, location)
            self._index = index
        return self._index

    def change(self, next_index: int) -> str | None:
        """Switch to sibling *next_index*, keeping path params from the location.

        Re-reads the provider location through ``update()`` first, so the
        destination never comes from a stale path.

        Does nothing when the navigator has no active child, when
        *next_index* is already active, or when no route exists at
        *next_index*. Returns the destination path, or ``None``.

        Raises ``MissingSegmentError`` if the current location cannot
        supply a parameter of the target route.
        """
        self.update()
        if self._index == -1 or self._index == next_index:
            return None
        if not 0 <= next_index < len(self._templates):
            return None

        to = interpolate(self._templates[next_index], self._location)
        self.navigate(to)
        return to

    def navigate(self, to: str, state: Mapping[str, Any] | None = None) -> None:
        """Merge *state* into the payload, then ask the provider to navigate."""
        if state:
            self.set_state(state)
        logger.debug("navigate %s (basepath %s)", to, self._basepath)
        self._navigation.navigate(to, self._basepath)

    def set_state(self, state: Mapping[str, Any]) -> None:
        """Shallow-merge *state* into the navigator payload."""
        self._state = {**self._state, **state}

    def back(self) -> None:
        self._navigation.back()

    # -- Rendering support --------------------------------------------------

    def screens(self, is_active: ActivePredicate | None = None) -> list[Screen]:
        """Describe every sibling screen for the current location.

        *is_active* receives ``(index, screen)`` and defaults to comparing
        against the active index.
        """
        query = split_query(self._location)
        screens: list[Screen] = []
        for i, template in enumerate(self._templates):
            screen = Screen(
                index=i,
                path=template.path,
                active=i == self._index,
                params=extract_params(template, self._location),
                query=query,
            )
            if is_active is not None:
                screen = replace(screen, active=is_active(i, screen))
            screens.append(screen)
        return screens

    def snapshot(self) -> NavigatorSnapshot:
        return NavigatorSnapshot(index=self._index, state=self.state, location=self._location)

    @contextmanager
    def mount(self) -> Iterator[str | None]:
        """Mount the active screen's path as the ambient basepath.

        Navigators created inside the block resolve their routes under the
        active screen. With no active screen the basepath is left alone
        and ``None`` is yielded.
        """
        if self._index < 0 or self._index >= len(self._templates):
            yield None
            return
        with mount_basepath(self._templates[self._index].path) as path:
            yield path

    def __repr__(self) -> str:
        return f"<Navigator {self._basepath!r} index={self._index} routes={len(self._routes)}>"
