"""Route registry with basepath mounting and nested routers.

Routes are registered in declaration order and matched with ``pick()``
on demand. Nothing is cached: the registry may change between matches.
"""

import logging
import re
import threading
from dataclasses import dataclass

from waypoint._internal.types import Payload
from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError, RouteNotFound
from waypoint.paths import combine_paths
from waypoint.routing.pick import pick
from waypoint.routing.rank import rank_routes
from waypoint.routing.route import MatchResult, RankedRoute, RoutePattern

logger = logging.getLogger("waypoint.routing")

_TRAILING_SPLAT = re.compile(r"\*.*$")


@dataclass(frozen=True, slots=True)
class RouterBase:
    """Where a router is mounted.

    ``path`` prefixes the patterns of registered routes. ``uri`` is the
    concrete URI prefix that links inside the router resolve against.
    """

    path: str
    uri: str


class Router:
    """Registry of routes mounted under a base.

    Usage::

        router = Router(RouterConfig(basepath="/app"))
        router.register("/", "home")
        router.register("users/:id", "user")
        router.register("", "not-found", default=True)
        match = router.match("/app/users/42")

    Nested routers mount under the active match::

        child = router.nested(match)
        child.register("settings", "user-settings")
    """

    __slots__ = ("_base", "_config", "_lock", "_routes")

    def __init__(self, config: RouterConfig | None = None, *, base: RouterBase | None = None) -> None:
        self._config = config or RouterConfig()
        if not self._config.basepath.startswith("/"):
            msg = f"basepath must start with '/', got {self._config.basepath!r}"
            raise ConfigurationError(msg)
        self._base = base or RouterBase(path=self._config.basepath, uri=self._config.basepath)
        self._lock = threading.Lock()
        self._routes: tuple[RoutePattern, ...] = ()

    @property
    def config(self) -> RouterConfig:
        return self._config

    @property
    def base(self) -> RouterBase:
        return self._base

    @property
    def routes(self) -> tuple[RoutePattern, ...]:
        """Registered routes in declaration order."""
        return self._routes

    def register(self, path: str, payload: Payload = None, *, default: bool = False) -> RoutePattern:
        """Register a route and return the stored pattern.

        Non-default paths are mounted under the router base. Default
        routes keep *path* as given; it is never matched against.
        """
        full_path = path if default else combine_paths(self._base.path, path)
        route = RoutePattern(path=full_path, default=default, payload=payload)
        with self._lock:
            self._routes = (*self._routes, route)
        logger.debug("Registered route %r (default=%s)", full_path, default)
        return route

    def unregister(self, route: RoutePattern) -> None:
        """Remove a registered route. Unknown routes are ignored."""
        with self._lock:
            remaining = tuple(r for r in self._routes if r is not route)
            removed = len(remaining) != len(self._routes)
            self._routes = remaining
        if removed:
            logger.debug("Unregistered route %r", route.path)

    def ranked(self) -> list[RankedRoute]:
        return rank_routes(self._routes)

    def match(self, uri: str) -> MatchResult | None:
        """Pick the best registered route for *uri*, or ``None``."""
        result = pick(self._routes, uri)
        level = logging.INFO if self._config.log_matches else logging.DEBUG
        if result is None:
            logger.log(level, "No route matches %r", uri)
        elif result.route.default:
            logger.log(level, "Default route for %r", uri)
        else:
            logger.log(
                level,
                "Matched %r -> %r params=%r",
                uri,
                result.route.path,
                result.params,
            )
        return result

    def require(self, uri: str) -> MatchResult:
        """Like ``match()`` but raise ``RouteNotFound`` instead of returning ``None``."""
        result = self.match(uri)
        if result is None:
            raise RouteNotFound(uri)
        return result

    def child_base(self, match: MatchResult | None) -> RouterBase:
        """Base for a router nested under *match*.

        A trailing splat is dropped from the matched pattern so child
        routes are declared relative to the part before it.
        """
        if match is None:
            return self._base
        if match.route.default:
            path = self._base.path
        else:
            path = _TRAILING_SPLAT.sub("", match.route.path)
        return RouterBase(path=path, uri=match.matched_uri)

    def nested(self, match: MatchResult | None) -> "Router":
        """Create a child router mounted under *match*."""
        return Router(self._config, base=self.child_base(match))
