"""Predicates for intercepting link clicks in a browser host.

Used when waypoint runs inside a browser Python runtime (Pyodide,
PyScript) and a UI layer decides whether a click on an anchor should be
routed client-side or left to the browser.

Usage::

    from waypoint.navigation import host_matches, should_navigate

    if should_navigate(event) and host_matches(anchor, location.host):
        event.prevent_default()
        navigate(anchor.href)
"""

import sys
from dataclasses import dataclass

from waypoint._internal.types import AnchorLike, PointerEventLike

PRIMARY_BUTTON = 0


@dataclass(frozen=True, slots=True)
class ClickEvent:
    """A plain snapshot of the click fields ``should_navigate`` reads."""

    default_prevented: bool = False
    button: int = PRIMARY_BUTTON
    meta_key: bool = False
    alt_key: bool = False
    ctrl_key: bool = False
    shift_key: bool = False


def should_navigate(event: PointerEventLike) -> bool:
    """Whether a click should become a client-side navigation.

    True only for an unhandled primary-button click with no modifier
    key held. Modified clicks (open in new tab, download, ...) belong to
    the browser.
    """
    return (
        not event.default_prevented
        and event.button == PRIMARY_BUTTON
        and not (event.meta_key or event.alt_key or event.ctrl_key or event.shift_key)
    )


def host_matches(anchor: AnchorLike, host: str) -> bool:
    """Whether *anchor* points at *host*.

    Falls back to prefix checks on ``href`` because some hosts report an
    empty ``anchor.host``.
    """
    return (
        anchor.host == host
        or anchor.href.startswith(f"https://{host}")
        or anchor.href.startswith(f"http://{host}")
    )


def can_use_dom() -> bool:
    """Whether a browser ``window`` with ``document`` and ``location`` is available.

    Looks at an already-imported ``js`` bridge module (as provided by
    Pyodide) and never imports one.
    """
    window = getattr(sys.modules.get("js"), "window", None)
    return window is not None and hasattr(window, "document") and hasattr(window, "location")
