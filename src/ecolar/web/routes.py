"""
Page routes known to the frontend.

The backend never renders pages; it tells the frontend where to go by
returning a path resolved from a page name.
"""

from typing import Callable

PAGE_PATHS = {
    "Login": "/login",
    "Dashboard": "/dashboard",
    "Onboarding": "/onboarding",
}

Navigate = Callable[[str], None]


def page_url(name: str) -> str:
    """Resolve a page name (e.g. "Dashboard") to its frontend path."""
    try:
        return PAGE_PATHS[name]
    except KeyError:
        raise ValueError(f"Unknown page: {name}") from None


class RecordingNavigator:
    """
    Navigate callable that remembers where it was sent.

    HTTP handlers hand one to the wizard, then report ``redirect_to``.
    """

    def __init__(self):
        self.redirect_to: str | None = None

    def __call__(self, path: str) -> None:
        self.redirect_to = path
