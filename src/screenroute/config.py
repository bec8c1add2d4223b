"""Navigator configuration.

NavigatorConfig is a frozen dataclass: immutable after creation, shared
safely between navigators that mount the same route list.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from screenroute.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class NavigatorConfig:
    """Navigator configuration. Immutable after creation.

    Override what you need::

        config = NavigatorConfig(basepath="/settings", default_index=0)
    """

    # Prefix under which the sibling routes are interpreted
    basepath: str = "/"

    # Active index when no route matches (-1 = no active child)
    default_index: int = -1

    # Seed for the arbitrary user payload carried by the navigator
    initial_state: Mapping[str, Any] = field(default_factory=dict)

    # Emit debug records when the active index changes
    log_changes: bool = True

    def __post_init__(self) -> None:
        check_basepath(self.basepath)


def check_basepath(basepath: str) -> str:
    """Return *basepath* unchanged, or raise ``ConfigurationError`` if it is relative."""
    if not basepath.startswith("/"):
        msg = f"basepath must be absolute, got {basepath!r}"
        raise ConfigurationError(msg)
    return basepath
