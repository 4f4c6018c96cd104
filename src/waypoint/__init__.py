"""Waypoint — declarative route matching for client-side routers.

Give it an unordered list of path patterns and a URI; it picks the
single most specific match, extracts its parameters, and reports the
matched prefix. Links resolve relative to where they are mounted, as if
every path were a directory.

Basic usage::

    from waypoint import RoutePattern, pick, resolve

    routes = [
        RoutePattern("/users/:id", payload="user"),
        RoutePattern("/files/*", payload="files"),
        RoutePattern("", default=True, payload="not-found"),
    ]
    match = pick(routes, "/users/42")
    match.params  # {"id": "42"}

    resolve("settings", "/users/42")  # "/users/42/settings"

Registry with a mount point::

    from waypoint import Router, RouterConfig

    router = Router(RouterConfig(basepath="/app"))
    router.register("users/:id", "user")
    router.match("/app/users/42")
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "LinkState",
    "MatchResult",
    "RankedRoute",
    "RouteNotFound",
    "RoutePattern",
    "Router",
    "RouterBase",
    "RouterConfig",
    "WaypointError",
    "add_query",
    "can_use_dom",
    "combine_paths",
    "host_matches",
    "link_state",
    "pick",
    "rank_route",
    "rank_routes",
    "resolve",
    "segmentize",
    "should_navigate",
    "strip_slashes",
]

# name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "waypoint.errors",
    "RouteNotFound": "waypoint.errors",
    "WaypointError": "waypoint.errors",
    "RouterConfig": "waypoint.config",
    "MatchResult": "waypoint.routing.route",
    "RankedRoute": "waypoint.routing.route",
    "RoutePattern": "waypoint.routing.route",
    "Router": "waypoint.routing.router",
    "RouterBase": "waypoint.routing.router",
    "pick": "waypoint.routing.pick",
    "rank_route": "waypoint.routing.rank",
    "rank_routes": "waypoint.routing.rank",
    "segmentize": "waypoint.routing.segments",
    "add_query": "waypoint.paths",
    "combine_paths": "waypoint.paths",
    "resolve": "waypoint.paths",
    "strip_slashes": "waypoint.paths",
    "LinkState": "waypoint.links",
    "link_state": "waypoint.links",
    "can_use_dom": "waypoint.navigation",
    "host_matches": "waypoint.navigation",
    "should_navigate": "waypoint.navigation",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import waypoint`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    from importlib import import_module

    return getattr(import_module(module_path), name)
