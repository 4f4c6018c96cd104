"""``waypoint pick`` — match a URI and print the result as JSON."""

import argparse
import json
import sys

from waypoint.cli._routes import build_router
from waypoint.errors import RouteNotFound


def run_pick(args: argparse.Namespace) -> None:
    """Pick the best route for ``args.uri``.

    Exits with code 1 when neither a route nor a default matches.
    """
    router = build_router(args)
    try:
        match = router.require(args.uri)
    except RouteNotFound as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(
        json.dumps(
            {
                "route": match.route.path,
                "default": match.route.default,
                "payload": match.route.payload,
                "params": match.params,
                "uri": match.matched_uri,
            },
            indent=2,
        )
    )
