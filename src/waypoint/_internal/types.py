"""Shared type aliases and structural protocols used across waypoint modules."""

from typing import Any, Protocol, TypeAlias

# Caller-owned data attached to a route and handed back unchanged on match
Payload: TypeAlias = Any


class PointerEventLike(Protocol):
    """The fields of a DOM click event that navigation decisions read."""

    default_prevented: bool
    button: int
    meta_key: bool
    alt_key: bool
    ctrl_key: bool
    shift_key: bool


class AnchorLike(Protocol):
    """The fields of an anchor element compared for same-origin checks."""

    host: str
    href: str
