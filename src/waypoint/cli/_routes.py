"""Route argument parsing shared by ``waypoint pick`` and ``waypoint rank``.

A ROUTE argument is ``PATH`` or ``PATH=PAYLOAD``. The payload is kept
as a string.
"""

import argparse
import sys

from waypoint.config import RouterConfig
from waypoint.errors import ConfigurationError
from waypoint.routing.router import Router


def parse_route_spec(spec: str) -> tuple[str, str | None]:
    """Split a ``PATH[=PAYLOAD]`` argument.

    Raises ``ConfigurationError`` when the path part is empty.
    """
    path, sep, payload = spec.partition("=")
    if not path:
        msg = f"Route {spec!r} has an empty path. Use '/' for the root route."
        raise ConfigurationError(msg)
    return path, payload if sep else None


def build_router(args: argparse.Namespace) -> Router:
    """Build a router from ``args.routes``, ``args.default`` and ``args.basepath``.

    Prints the error and exits with status 2 on an invalid specification.
    """
    try:
        router = Router(RouterConfig(basepath=args.basepath))
        for spec in args.routes:
            path, payload = parse_route_spec(spec)
            router.register(path, payload)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(2) from exc

    if args.default is not None:
        router.register("", args.default, default=True)
    return router
