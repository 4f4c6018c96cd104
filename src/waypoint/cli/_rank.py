"""``waypoint rank`` — list routes in the order they are tried."""

import argparse

from waypoint.cli._routes import build_router


def run_rank(args: argparse.Namespace) -> None:
    """Print a SCORE, PATH, PAYLOAD table, best match first."""
    router = build_router(args)

    rows: list[tuple[str, str, str]] = []
    for entry in router.ranked():
        path = "(default)" if entry.route.default else entry.route.path
        payload = "" if entry.route.payload is None else str(entry.route.payload)
        rows.append((str(entry.score), path, payload))

    # Column widths
    max_score = max(max(len(r[0]) for r in rows), 5)  # "SCORE" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:>{max_score}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("SCORE", "PATH", "PAYLOAD"))
    sep_len = max_score + max_path + 4 + max((len(r[2]) for r in rows), default=0)
    print("-" * min(sep_len, 80))
    for score, path, payload in rows:
        print(fmt.format(score, path, payload))
