"""Screenroute exception hierarchy.

The matching core is total over its inputs and raises nothing except
``MissingSegmentError`` from ``interpolate``. Everything else here is
raised by the navigator and configuration layers.
"""


class ScreenRouteError(Exception):
    """Base for all screenroute-specific errors."""


class ConfigurationError(ScreenRouteError):
    """Raised when navigator configuration is invalid."""


class MissingSegmentError(ScreenRouteError, LookupError):
    """A dynamic segment has no counterpart in the current location.

    Raised by ``interpolate`` instead of producing a malformed path.
    """

    def __init__(self, template: str, location: str, param_name: str) -> None:
        self.template = template
        self.location = location
        self.param_name = param_name
        super().__init__(
            f"Cannot interpolate {template!r} from {location!r}: "
            f"no segment for parameter {param_name!r}"
        )
