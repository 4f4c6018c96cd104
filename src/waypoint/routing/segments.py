"""Path segmentation and segment classification.

A pattern segment is one of four kinds::

    ""         -> ROOT
    "users"    -> STATIC   (name="users")
    ":id"      -> DYNAMIC  (name="id")
    "*rest"    -> SPLAT    (name="rest"; a bare "*" is named "*")

Classification happens once per segment and is shared by the ranker
and the matcher.
"""

import re
from dataclasses import dataclass
from enum import Enum

_EDGE_SLASHES = re.compile(r"^/+|/+$")
_PARAM = re.compile(r"^:(.+)")


def strip_slashes(path: str) -> str:
    """Strip any run of leading and trailing ``/`` from *path*."""
    return _EDGE_SLASHES.sub("", path)


def segmentize(path: str) -> list[str]:
    """Split *path* into segments, ignoring leading and trailing slashes.

    Examples::

        segmentize("/a/b/")  -> ["a", "b"]
        segmentize("/")      -> [""]
        segmentize("")       -> [""]
    """
    return strip_slashes(path).split("/")


class SegmentKind(Enum):
    ROOT = "root"
    STATIC = "static"
    DYNAMIC = "dynamic"
    SPLAT = "splat"


@dataclass(frozen=True, slots=True)
class Segment:
    """A classified segment of a route pattern.

    ``text`` is the raw segment as written in the pattern. ``name`` is the
    parameter name for DYNAMIC and SPLAT segments and the literal text
    otherwise.
    """

    kind: SegmentKind
    text: str
    name: str


def classify(text: str) -> Segment:
    """Classify one raw pattern segment."""
    if text == "":
        return Segment(SegmentKind.ROOT, text, text)
    param = _PARAM.match(text)
    if param is not None:
        return Segment(SegmentKind.DYNAMIC, text, param.group(1))
    if text.startswith("*"):
        return Segment(SegmentKind.SPLAT, text, text[1:] or "*")
    return Segment(SegmentKind.STATIC, text, text)


def parse_pattern(path: str) -> list[Segment]:
    """Segmentize a route pattern and classify every segment."""
    return [classify(part) for part in segmentize(path)]
