"""Location and template string helpers."""


def strip_query(location: str) -> str:
    """Return the pathname part of *location* (everything before the first ``?``)."""
    pathname, _, _ = location.partition("?")
    return pathname


def split_query(location: str) -> str:
    """Return the raw query string of *location*, or ``""`` if it has none.

    Splits on the first ``?`` only. The query is neither decoded nor parsed.
    """
    _, _, query = location.partition("?")
    return query


def normalize(path: str, basepath: str = "/") -> str:
    """Join a relative route onto *basepath* to form an absolute template.

    ``""`` and ``"/"`` alias the basepath itself::

        normalize("", "/app")        -> "/app"
        normalize("users", "/")      -> "/users"
        normalize("users", "/app")   -> "/app/users"
    """
    if path in ("", "/"):
        return basepath
    prefix = "" if basepath == "/" else basepath
    return f"{prefix}/{path}"
