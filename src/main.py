from typing import Optional

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import LoadingIndicator

from store.config import NOTIFY_TIMEOUT
from store.models import Notification
from utils.logger import get_logger
from utils.messages import PageChangedMessage, QuitRequestedMessage
from utils.state import GlobalState
from views.base_screen import BaseScreen
from views.scr_auth import AuthScreen
from views.scr_cart import CartScreen
from views.scr_checkout import CheckoutScreen
from views.scr_confirmation import ConfirmationScreen
from views.scr_home import HomeScreen
from views.scr_profile import ProfileScreen

_logger = get_logger(__name__)

SEVERITY = {"success": "information", "info": "information", "error": "error"}
THEMES = {False: "textual-light", True: "textual-dark"}


class StorefrontApp(App):
    BINDINGS = [
        Binding("ctrl+t", "toggle_theme", "Toggle Theme", show=True),
    ]

    # one mode per page
    MODES = {
        "home": HomeScreen,
        "cart": CartScreen,
        "checkout": CheckoutScreen,
        "auth": AuthScreen,
        "profile": ProfileScreen,
        "confirmation": ConfirmationScreen,
    }

    CSS = """
    Sidebar {
        dock: left;
        width: 28;
        padding: 0 1;
    }
    #div-filters, #div-filters Horizontal {
        height: auto;
    }
    #div-filters Input, #div-filters Select {
        width: 1fr;
    }
    .form-error, #label-checkout-error {
        color: $error;
    }
    CartLineWidget Label {
        width: 1fr;
        padding: 1 1;
    }
    #hort-buttons {
        height: auto;
    }
    """

    state: GlobalState

    def __init__(self, state: Optional[GlobalState] = None):
        super().__init__()
        self.state = state or GlobalState()
        self.state.subscribe(self.show_notification)

    def compose(self) -> ComposeResult:
        yield LoadingIndicator()

    async def on_mount(self) -> None:
        self.title = "Storefront"
        self.theme = THEMES[self.state.dark_mode]
        await self.switch_mode(self.state.page)

    def show_notification(self, note: Notification) -> None:
        self.notify(note.message, severity=SEVERITY[note.kind], timeout=NOTIFY_TIMEOUT)

    def action_toggle_theme(self):
        self.theme = THEMES[self.state.toggle_theme()]

    @on(PageChangedMessage)
    async def handle_page_changed(self) -> None:
        page = self.state.page
        if self.current_mode != page:
            _logger.debug(f"Switching to page '{page}'")
            await self.switch_mode(page)
        elif isinstance(self.screen, BaseScreen):
            await self.screen.refresh_view()

    @on(QuitRequestedMessage)
    def handle_quit(self):
        self.exit()


def run() -> None:
    StorefrontApp().run()


if __name__ == "__main__":
    run()
