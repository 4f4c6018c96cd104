"""Waypoint exception hierarchy.

The matching and resolution functions are total and never raise.
These types cover the registry and command-line layers built on top.
"""


class WaypointError(Exception):
    """Base for all waypoint-specific errors."""


class ConfigurationError(WaypointError):
    """Raised when router configuration or a route specification is invalid.

    Typically raised while building a ``Router`` or parsing CLI arguments.
    """


class RouteNotFound(WaypointError):  # noqa: N818 — mirrors the "no match" outcome
    """No positional route and no default route matched a URI.

    Only raised by ``Router.require()``. ``pick()`` and ``Router.match()``
    return ``None`` for the same outcome.
    """

    def __init__(self, uri: str) -> None:
        self.uri = uri
        super().__init__(f"No route matches {uri!r}")
