"""Routing: path-template algebra for sibling screens.

Templates are compiled once into segment tuples; matching, parameter
extraction and interpolation are pure functions of (template, location).
"""

from screenroute.routing.matcher import (
    extract_params,
    interpolate,
    matches,
    resolve_active,
)
from screenroute.routing.paths import normalize, split_query, strip_query
from screenroute.routing.segments import (
    RouteTemplate,
    Segment,
    compile_route,
    compile_template,
    parse_template,
)

__all__ = [
    "RouteTemplate",
    "Segment",
    "compile_route",
    "compile_template",
    "extract_params",
    "interpolate",
    "matches",
    "normalize",
    "parse_template",
    "resolve_active",
    "split_query",
    "strip_query",
]
