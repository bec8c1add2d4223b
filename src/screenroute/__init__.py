"""Screenroute: active-route resolution for sibling screens.

Decides which of several sibling views is active for a location, pulls
``:name`` parameters out of it, and builds sibling destinations that
keep the current path parameters.

Basic usage::

    from screenroute import MemoryNavigation, Navigator

    history = MemoryNavigation("/users/42")
    nav = Navigator(["users/:id", "users/:id/posts"], history)
    history.subscribe(nav.update)

    nav.index      # 0
    nav.change(1)  # pushes "/users/42/posts"
    nav.index      # 1

The matching core lives in ``screenroute.routing`` and is pure.
"""

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "MemoryNavigation",
    "MissingSegmentError",
    "Navigation",
    "Navigator",
    "NavigatorConfig",
    "RouteTemplate",
    "Screen",
    "ScreenRouteError",
    "basepath",
    "compile_route",
    "extract_params",
    "get_basepath",
    "interpolate",
    "matches",
    "normalize",
    "resolve_active",
    "split_query",
]

_ROUTING = frozenset(
    {
        "RouteTemplate",
        "compile_route",
        "extract_params",
        "interpolate",
        "matches",
        "normalize",
        "resolve_active",
        "split_query",
    }
)


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import screenroute`` cheap while providing a flat top-level API.
    """
    if name in _ROUTING:
        from screenroute import routing

        return getattr(routing, name)

    if name in ("Navigator", "Screen"):
        from screenroute import navigator

        return getattr(navigator, name)

    if name in ("Navigation", "MemoryNavigation"):
        from screenroute import navigation

        return getattr(navigation, name)

    if name in ("basepath", "get_basepath"):
        from screenroute import context

        return getattr(context, name)

    if name == "NavigatorConfig":
        from screenroute.config import NavigatorConfig

        return NavigatorConfig

    if name in ("ScreenRouteError", "ConfigurationError", "MissingSegmentError"):
        from screenroute import errors

        return getattr(errors, name)

    raise AttributeError(f"module 'screenroute' has no attribute {name!r}")
