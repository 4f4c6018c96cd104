"""``waypoint resolve`` — resolve a link target against a base path."""

import argparse

from waypoint.paths import resolve


def run_resolve(args: argparse.Namespace) -> None:
    print(resolve(args.to, args.base))
