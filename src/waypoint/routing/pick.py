"""Best-match selection over an unordered route list.

Routes are ranked on every call (see ``waypoint.routing.rank``) and
tried in that order. The first route whose segments all line up with
the URI wins. A default route is remembered while scanning and only
returned when no positional route matches.
"""

from collections.abc import Sequence
from urllib.parse import unquote

from waypoint.routing.rank import rank_routes
from waypoint.routing.route import MatchResult, RoutePattern
from waypoint.routing.segments import Segment, SegmentKind, segmentize


def _match_segments(
    pattern: tuple[Segment, ...],
    uri_segments: list[str],
    is_root_uri: bool,
) -> tuple[dict[str, str], int] | None:
    """Walk *pattern* against *uri_segments*.

    Returns ``(params, consumed)`` on success, ``None`` on a miss.
    ``consumed`` is the number of leading URI segments that make up the
    matched prefix.
    """
    params: dict[str, str] = {}
    length = max(len(uri_segments), len(pattern))
    for index in range(length):
        segment = pattern[index] if index < len(pattern) else None

        if segment is not None and segment.kind is SegmentKind.SPLAT:
            # uri:   /files/documents/work
            # route: /files/* or /files/*splatname
            params[segment.name] = "/".join(unquote(part) for part in uri_segments[index:])
            return params, index

        if index >= len(uri_segments):
            # uri:   /users
            # route: /users/:id
            return None

        uri_segment = uri_segments[index]
        if segment is not None and segment.kind is SegmentKind.DYNAMIC and not is_root_uri:
            params[segment.name] = unquote(uri_segment)
        elif segment is None or segment.text != uri_segment:
            # uri:   /users/123/settings
            # route: /users/:id/profile
            return None

    return params, length


def pick(routes: Sequence[RoutePattern], uri: str) -> MatchResult | None:
    """Pick the best matching route for *uri*.

    Usage::

        routes = [RoutePattern("/users/:id"), RoutePattern("/", default=True)]
        match = pick(routes, "/users/42?tab=posts")
        match.params       # {"id": "42"}
        match.matched_uri  # "/users/42"

    The query string is ignored for matching. Returns ``None`` when no
    route matches and no default route is present.
    """
    uri_pathname = uri.split("?", 1)[0]
    uri_segments = segmentize(uri_pathname)
    is_root_uri = uri_segments[0] == ""

    fallback: MatchResult | None = None

    for ranked in rank_routes(routes):
        route = ranked.route

        if route.default:
            if fallback is None:
                fallback = MatchResult(route=route, params={}, matched_uri=uri)
            continue

        outcome = _match_segments(ranked.segments, uri_segments, is_root_uri)
        if outcome is None:
            continue

        params, consumed = outcome
        return MatchResult(
            route=route,
            params=params,
            matched_uri="/" + "/".join(uri_segments[:consumed]),
        )

    return fallback
