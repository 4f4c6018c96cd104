"""Waypoint CLI — try patterns, rankings and link resolution from a shell.

Entry point registered as ``waypoint`` in ``pyproject.toml``::

    [project.scripts]
    waypoint = "waypoint.cli:main"
"""

import argparse
import logging
import sys

logger = logging.getLogger("waypoint.cli")


def _add_route_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "routes",
        nargs="+",
        metavar="ROUTE",
        help="Route pattern, optionally with a payload (e.g. /users/:id=user)",
    )
    parser.add_argument(
        "--default",
        default=None,
        metavar="PAYLOAD",
        help="Register a default route carrying PAYLOAD",
    )
    parser.add_argument("--basepath", default="/", help="Mount point for all routes")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``waypoint`` command."""
    parser = argparse.ArgumentParser(
        prog="waypoint",
        description="Waypoint — declarative route matching and path resolution.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log match decisions")
    subparsers = parser.add_subparsers(dest="command")

    # -- waypoint pick ----------------------------------------------------
    pick_parser = subparsers.add_parser("pick", help="Pick the best route for a URI")
    pick_parser.add_argument("uri", help="URI to match (query string is ignored)")
    _add_route_arguments(pick_parser)

    # -- waypoint rank ----------------------------------------------------
    rank_parser = subparsers.add_parser("rank", help="Show routes in match order")
    _add_route_arguments(rank_parser)

    # -- waypoint resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a link against a base path")
    resolve_parser.add_argument("to", help="Link target (e.g. ../settings?tab=2)")
    resolve_parser.add_argument("base", help="Base path the link is rendered under")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(stream=sys.stderr, format="%(name)s: %(message)s")
        logging.getLogger("waypoint").setLevel(logging.DEBUG)

    logger.debug("Running %r with %r", args.command, vars(args))

    if args.command == "pick":
        from waypoint.cli._pick import run_pick

        run_pick(args)
    elif args.command == "rank":
        from waypoint.cli._rank import run_rank

        run_rank(args)
    elif args.command == "resolve":
        from waypoint.cli._resolve import run_resolve

        run_resolve(args)
