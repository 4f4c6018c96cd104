"""RoutePattern, RankedRoute and MatchResult frozen dataclasses."""

from dataclasses import dataclass, field

from waypoint._internal.types import Payload
from waypoint.routing.segments import Segment


@dataclass(frozen=True, slots=True)
class RoutePattern:
    """A route declaration.

    ``path`` is a slash-delimited pattern (``/users/:id``, ``/files/*``).
    A ``default`` route is the fallback when nothing else matches; its
    path is not consulted. ``payload`` is returned untouched on match.

    Equality and hashing look at ``path`` and ``default`` only, so two
    declarations of the same pattern compare equal whatever they carry.
    """

    path: str
    default: bool = False
    payload: Payload = field(default=None, compare=False)


@dataclass(frozen=True, slots=True)
class RankedRoute:
    """A route paired with its specificity score and declaration index.

    ``segments`` is the classified pattern, shared by ranking and
    matching. It is empty for default routes.
    """

    route: RoutePattern
    score: int
    index: int
    segments: tuple[Segment, ...] = ()


@dataclass(frozen=True, slots=True)
class MatchResult:
    """Result of a successful pick.

    ``params`` holds percent-decoded values keyed by parameter or splat
    name. ``matched_uri`` is the absolute path prefix consumed by the
    match; for a default route it is the URI that was picked against.
    """

    route: RoutePattern
    params: dict[str, str]
    matched_uri: str
