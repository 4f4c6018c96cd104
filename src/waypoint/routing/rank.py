"""Route specificity scoring.

Every segment earns SEGMENT_POINTS, then a bonus by kind where::

    static > dynamic > root > splat

A splat takes the segment points back plus a penalty, so each splat
segment is worth -1 overall. Default routes score 0.
"""

from collections.abc import Sequence

from waypoint.routing.route import RankedRoute, RoutePattern
from waypoint.routing.segments import Segment, SegmentKind, parse_pattern

SEGMENT_POINTS = 4
STATIC_POINTS = 3
DYNAMIC_POINTS = 2
SPLAT_PENALTY = 1
ROOT_POINTS = 1


def _score_segments(segments: Sequence[Segment]) -> int:
    score = 0
    for segment in segments:
        score += SEGMENT_POINTS
        match segment.kind:
            case SegmentKind.ROOT:
                score += ROOT_POINTS
            case SegmentKind.DYNAMIC:
                score += DYNAMIC_POINTS
            case SegmentKind.SPLAT:
                score -= SEGMENT_POINTS + SPLAT_PENALTY
            case SegmentKind.STATIC:
                score += STATIC_POINTS
    return score


def score_route(route: RoutePattern) -> int:
    """Return the specificity score of a single route."""
    if route.default:
        return 0
    return _score_segments(parse_pattern(route.path))


def rank_route(route: RoutePattern, index: int) -> RankedRoute:
    """Classify the pattern once and score it.

    Default routes keep no segments; their path is never matched.
    """
    if route.default:
        return RankedRoute(route=route, score=0, index=index)
    segments = tuple(parse_pattern(route.path))
    return RankedRoute(route=route, score=_score_segments(segments), index=index, segments=segments)


def rank_routes(routes: Sequence[RoutePattern]) -> list[RankedRoute]:
    """Score every route and order them, best first.

    Higher scores come first; equal scores keep declaration order. The
    ``(-score, index)`` key is unique per entry, so the order is total.
    The caller's sequence is never reordered.
    """
    ranked = [rank_route(route, index) for index, route in enumerate(routes)]
    ranked.sort(key=lambda entry: (-entry.score, entry.index))
    return ranked
