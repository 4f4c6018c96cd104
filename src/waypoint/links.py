"""Link state — where a link points and whether it is the current page."""

from dataclasses import dataclass

from waypoint.paths import resolve


@dataclass(frozen=True, slots=True)
class LinkState:
    """Resolved target and current-page flags for a link."""

    href: str
    is_current: bool
    is_partially_current: bool

    @property
    def aria_current(self) -> str | None:
        """Value for the ``aria-current`` attribute, or ``None`` to omit it."""
        return "page" if self.is_current else None


def link_state(to: str, base_uri: str, pathname: str) -> LinkState:
    """Compute the state of a link to *to* rendered under *base_uri*.

    ``"/"`` links to the mount point itself. *pathname* is the path the
    user is currently on.
    """
    href = base_uri if to == "/" else resolve(to, base_uri)
    return LinkState(
        href=href,
        is_current=href == pathname,
        is_partially_current=pathname.startswith(href),
    )
