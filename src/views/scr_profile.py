from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.widgets import Button, Markdown

from store.projections import profile_markdown
from utils.messages import PageChangedMessage
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal


class ProfileScreen(BaseScreen):
    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="My Profile")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Markdown("", id="md-profile")
        with Horizontal(id="hort-buttons"):
            yield Button("Continue Shopping", id="btn-shop")
            yield Button("Log out", id="btn-profile-logout", variant="error")

    async def refresh_view(self) -> None:
        user = self.app.state.auth.current_user
        if user is None:
            # logged out elsewhere while this page was cached
            self.go_to("profile")
            return
        await super().refresh_view()
        await self.query_one("#md-profile", Markdown).update(profile_markdown(user))

    @on(Button.Pressed, "#btn-shop")
    def handle_continue_shopping(self) -> None:
        self.go_to("home")

    @on(Button.Pressed, "#btn-profile-logout")
    @work()
    async def handle_logout(self) -> None:
        if await self.app.push_screen_wait(
            DialogModal(
                "Are you sure you want to log out?",
                primary_text="Yes",
                secondary_text="No",
                tone="warning",
            )
        ):
            self.app.state.logout()
            self.app.post_message(PageChangedMessage())
