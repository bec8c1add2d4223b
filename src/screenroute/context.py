"""Ambient basepath via ContextVar.

Provides:
- ``basepath_var``: the prefix sibling routes are interpreted under.
- ``basepath()``: a context manager that mounts a nested prefix.

Thread safety:
    ``ContextVar`` is task-local under asyncio and thread-local under
    threads. No locks needed.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

basepath_var: ContextVar[str] = ContextVar("screenroute_basepath", default="/")
"""The ambient basepath. Defaults to ``"/"`` when nothing is mounted."""


def get_basepath() -> str:
    """Return the ambient basepath."""
    return basepath_var.get()


@contextmanager
def basepath(path: str) -> Iterator[str]:
    """Set the ambient basepath for the duration of the block.

    Usage::

        with basepath("/settings"):
            nav = Navigator(["", "profile"], history)  # "/settings", "/settings/profile"
    """
    token = basepath_var.set(path)
    try:
        yield path
    finally:
        basepath_var.reset(token)
