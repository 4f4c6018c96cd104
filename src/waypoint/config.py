"""Router configuration.

RouterConfig is a frozen dataclass — immutable after creation, no
string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Router configuration. Immutable after creation.

    Override what you need::

        config = RouterConfig(basepath="/admin", log_matches=True)
    """

    # Mount point prepended to every registered (non-default) route path
    basepath: str = "/"

    # Log match decisions at INFO instead of DEBUG
    log_matches: bool = False
