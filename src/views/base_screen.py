from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.events import ScreenResume
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label, ListItem, ListView, Markdown

from store.models import Page
from store.projections import account_label, cart_badge
from utils.messages import PageChangedMessage
from utils.pure import generate_markdown_table
from views.modal_dialog import DialogModal, QuitDialogModal

MENU = {"home": "Shop", "cart": "Cart", "account": "Account"}


class Sidebar(Container):
    def compose(self) -> ComposeResult:
        yield Label("User Info", id="label-info-1")
        yield Markdown("", id="md-userinfo")
        yield Label("", id="label-cart-badge")
        yield Button("Log out", id="btn-logout", variant="error")
        yield Label("Menu", id="label-info-2")
        yield ListView(
            *[ListItem(Label(v), id="list-menu-item-" + k) for k, v in MENU.items()],
            id="list-menu",
        )

    async def update_info(self) -> None:
        state = self.app.state
        user = state.auth.current_user

        table_rows = [["User", account_label(user)]]
        if user:
            table_rows.append(["Email", user.email])
        md_table_str = generate_markdown_table(None, table_rows, ["l", "l"])
        await self.query_one("#md-userinfo", Markdown).update(md_table_str)

        self.query_one("#label-cart-badge", Label).update(cart_badge(state.cart))
        self.query_one("#btn-logout").display = user is not None
        self.highlight_item(state.page)

    def highlight_item(self, page: Page):
        menu_key = "account" if page in ("auth", "profile") else page
        for item in self.query_one("#list-menu").children:
            item.highlighted = item.id == "list-menu-item-" + menu_key

    async def on_list_view_selected(self, event: ListView.Selected):
        selected = event.item.id.removeprefix("list-menu-item-")
        if selected == "account":
            self.app.state.open_account()
        else:
            self.app.state.navigate(selected)
        self.app.post_message(PageChangedMessage())

    @on(Button.Pressed, "#btn-logout")
    @work()
    async def handle_logout(self):
        if not await self.app.push_screen_wait(
            DialogModal(
                "Are you sure you want to log out?",
                primary_text="Yes",
                secondary_text="No",
                tone="warning",
            )
        ):
            return

        self.app.state.logout()
        self.app.post_message(PageChangedMessage())


class BaseScreen(Screen):
    """
    Inherited by all page screens: header, footer, sidebar and keybindings.

    Subclasses draw their page in `refresh_view`, which runs every time the
    screen becomes active.
    """

    BINDINGS = [
        Binding("ctrl+z", "quit", "Quit App", show=True),
    ]

    def __init__(self):
        super().__init__()
        self.configure()

    def configure(
        self,
        header_sub_title: str = "Storefront",
        show_sidebar: bool = True,
    ) -> None:
        self.sub_title = header_sub_title
        self._show_sidebar = show_sidebar

    def compose(self) -> ComposeResult:
        if self._show_sidebar:
            yield Sidebar()
        yield Header()
        yield Footer(show_command_palette=False)

    @on(ScreenResume)
    async def handle_screen_resume(self) -> None:
        await self.refresh_view()

    async def refresh_view(self) -> None:
        if self._show_sidebar:
            await self.query_one(Sidebar).update_info()

    def go_to(self, page: Page) -> None:
        self.app.state.navigate(page)
        self.app.post_message(PageChangedMessage())

    @work()
    async def action_quit(self):
        await self.app.push_screen_wait(QuitDialogModal())
