"""Template matching, active-route resolution, params and interpolation.

Every function accepts either a template string or a compiled
``RouteTemplate``. Strings are compiled on the fly; callers that match
the same templates repeatedly (the navigator) compile them once.
"""

from collections.abc import Sequence

from screenroute.errors import MissingSegmentError
from screenroute.routing.paths import strip_query
from screenroute.routing.segments import ROOT, RouteTemplate, compile_template

TemplateLike = str | RouteTemplate


def _compiled(template: TemplateLike) -> RouteTemplate:
    if isinstance(template, RouteTemplate):
        return template
    return compile_template(template)


def _location_parts(location: str) -> list[str]:
    return [part for part in strip_query(location).split("/") if part]


def matches(template: TemplateLike, location: str) -> bool:
    """Return True if *template* is a prefix match for *location*'s pathname.

    ``"/"`` matches everything. Otherwise every template segment must line
    up with the location segment at the same position: literals compare
    equal, parameters need a non-empty value. Extra trailing location
    segments are allowed so a template can front nested content.
    """
    compiled = _compiled(template)
    if compiled.path == ROOT:
        return True

    parts = _location_parts(location)
    if len(compiled.segments) > len(parts):
        return False

    for seg, part in zip(compiled.segments, parts):
        if seg.is_param:
            if not part:
                return False
        elif seg.value != part:
            return False
    return True


def resolve_active(
    templates: Sequence[TemplateLike],
    location: str,
    default_index: int = -1,
) -> int:
    """Select the active sibling for *location*.

    Single pass in declaration order, no sorting by specificity:

    - a matching non-root template always takes the slot, so the last
      match wins;
    - a matching root template takes the slot only while it still holds
      *default_index*, and a later non-root match can still replace it.
    """
    active = default_index
    for i, template in enumerate(templates):
        compiled = _compiled(template)
        if not matches(compiled, location):
            continue
        if not compiled.fallback or active == default_index:
            active = i
    return active


def extract_params(template: TemplateLike, location: str) -> dict[str, str | None] | None:
    """Map parameter names to the raw location tokens at the same positions.

    Splits are positional and unfiltered and the query is not stripped,
    so ``"/users/:id"`` against ``"/users/42?tab=1"`` captures ``"42?tab=1"``.
    A parameter past the end of the location captures ``None``.

    Returns ``None`` (not ``{}``) when the template has no parameters.
    Duplicate names keep the last captured value.
    """
    compiled = _compiled(template)
    if not compiled.has_params:
        return None

    parts = location.split("/")
    params: dict[str, str | None] = {}
    for i, seg in enumerate(compiled.tokens):
        if seg.param_name is not None:
            params[seg.param_name] = parts[i] if i < len(parts) else None
    return params


def interpolate(template: TemplateLike, location: str) -> str:
    """Fill *template*'s parameters from *location*'s same-position segments.

    Values are carried by position, not by name::

        interpolate("/posts/:id", "/users/42") -> "/posts/42"

    Raises ``MissingSegmentError`` when *location* is too short to supply
    a value for a parameter.
    """
    compiled = _compiled(template)
    parts = _location_parts(location)

    out: list[str] = []
    for i, seg in enumerate(compiled.segments):
        if seg.param_name is None:
            out.append(seg.value)
        elif i < len(parts):
            out.append(parts[i])
        else:
            raise MissingSegmentError(compiled.path, location, seg.param_name)
    return "/" + "/".join(out)
