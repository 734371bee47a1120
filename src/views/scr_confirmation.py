from textual import on
from textual.app import ComposeResult
from textual.widgets import Button, Markdown

from store.projections import confirmation_markdown
from views.base_screen import BaseScreen


class ConfirmationScreen(BaseScreen):
    """
    Shown after a successful order with its id and delivery estimate.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Order Confirmed")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Markdown("", id="md-confirmation")
        yield Button("Continue Shopping", id="btn-shop", variant="primary")

    async def refresh_view(self) -> None:
        await super().refresh_view()
        confirmation = self.app.state.orders.last_confirmation
        md = confirmation_markdown(confirmation) if confirmation else "No order placed yet."
        await self.query_one("#md-confirmation", Markdown).update(md)
        self.query_one("#btn-shop").focus()

    @on(Button.Pressed, "#btn-shop")
    def handle_continue_shopping(self) -> None:
        self.go_to("home")
