from store.auth import AuthRegistry
from store.models import PAGES, Page


class Navigator:
    """
    Tracks the single active page.

    `navigate_to` only refuses to show the profile to an anonymous user;
    the checkout guard belongs to whoever calls it.
    """

    def __init__(self, auth: AuthRegistry, page: Page = "home") -> None:
        self._auth = auth
        self.page: Page = page

    def navigate_to(self, page: Page) -> Page:
        if page not in PAGES:
            raise ValueError(f"Unknown page: {page!r}")
        if page == "profile" and not self._auth.is_authenticated:
            page = "auth"
        self.page = page
        return page
