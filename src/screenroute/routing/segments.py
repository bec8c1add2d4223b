"""Segment and RouteTemplate frozen dataclasses.

A template is parsed once into segments; the matcher never re-parses
template strings for a compiled ``RouteTemplate``.
"""

from dataclasses import dataclass

from screenroute.routing.paths import normalize

ROOT = "/"
PARAM_PREFIX = ":"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed segment of a route template.

    Literal: ``/users``  (is_param=False)
    Param:   ``/:id``    (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


def parse_token(token: str) -> Segment:
    """Parse a single ``/``-delimited token.

    A token is a parameter iff it starts with ``:`` and has a name after it.
    """
    if token.startswith(PARAM_PREFIX) and len(token) > 1:
        return Segment(value=token, is_param=True, param_name=token[1:])
    return Segment(value=token)


def parse_template(path: str) -> list[Segment]:
    """Parse a template string into segments, dropping empty tokens.

    Examples::

        "/users"          -> [Segment("users")]
        "/users/:id"      -> [Segment("users"), Segment(":id", is_param=True, param_name="id")]
        "//a//b/"         -> [Segment("a"), Segment("b")]
        "/"               -> []
    """
    return [parse_token(token) for token in path.split("/") if token]


@dataclass(frozen=True, slots=True)
class RouteTemplate:
    """A compiled, immutable route template.

    ``segments`` drive matching and interpolation (empty tokens dropped).
    ``tokens`` keep the raw positional split, leading empty token included,
    for parameter extraction. ``fallback`` marks a root template that only
    wins when nothing else has matched.
    """

    path: str
    segments: tuple[Segment, ...]
    tokens: tuple[Segment, ...]
    fallback: bool = False

    @property
    def param_names(self) -> tuple[str, ...]:
        return tuple(seg.param_name for seg in self.tokens if seg.param_name is not None)

    @property
    def has_params(self) -> bool:
        return any(seg.is_param for seg in self.tokens)

    def __str__(self) -> str:
        return self.path


def compile_template(path: str, *, fallback: bool | None = None) -> RouteTemplate:
    """Compile an absolute template string.

    *fallback* defaults to ``path == "/"``.
    """
    if fallback is None:
        fallback = path == ROOT
    return RouteTemplate(
        path=path,
        segments=tuple(parse_template(path)),
        tokens=tuple(parse_token(token) for token in path.split("/")),
        fallback=fallback,
    )


def compile_route(route: str, basepath: str = ROOT) -> RouteTemplate:
    """Normalize a relative *route* against *basepath* and compile it.

    A ``"/"`` route stays a fallback under any basepath, even though its
    absolute template is the basepath itself. An empty route is a fallback
    only when it resolves to ``"/"``.
    """
    path = normalize(route, basepath)
    return compile_template(path, fallback=route == ROOT or path == ROOT)
