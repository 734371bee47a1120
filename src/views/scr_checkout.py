from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Input, Label, Markdown

from store.models import PaymentDetails
from store.projections import checkout_summary_markdown
from utils.messages import PageChangedMessage
from utils.pure import format_card_number
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal

FIELD_INPUTS = {
    "full_name": "#input-full-name",
    "email": "#input-email",
    "address": "#input-address",
    "card_number": "#input-card-number",
    "expiry": "#input-expiry",
    "cvv": "#input-cvv",
}


class CheckoutScreen(BaseScreen):
    """
    Order summary plus the (fake) payment form.
    """

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Checkout")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with VerticalScroll():
            yield Markdown("", id="md-checkout-summary")
            with Vertical(id="div-checkout-form"):
                yield Label("Full Name")
                yield Input(placeholder="Jane Doe", id="input-full-name")
                yield Label("Email")
                yield Input(placeholder="user@example.com", id="input-email")
                yield Label("Shipping Address")
                yield Input(placeholder="123 Main St, Anytown, ST 00000", id="input-address")
                yield Label("Card Number")
                yield Input(placeholder="1234 5678 9012 3456", id="input-card-number")
                with Horizontal():
                    yield Input(placeholder="MM/YY", id="input-expiry", max_length=5)
                    yield Input(placeholder="CVV", id="input-cvv", password=True, max_length=4)
                yield Label("", id="label-checkout-error")
                with Horizontal():
                    yield Button("Back to Cart", id="btn-back")
                    yield Button("Place Order", id="btn-submit", variant="primary")

    async def refresh_view(self) -> None:
        await super().refresh_view()
        state = self.app.state
        await self.query_one("#md-checkout-summary", Markdown).update(
            checkout_summary_markdown(state.cart)
        )
        email_input = self.query_one("#input-email", Input)
        if state.auth.current_user and not email_input.value:
            email_input.value = state.auth.current_user.email
        self.query_one("#label-checkout-error", Label).update(
            state.form_errors.get("checkout", "")
        )
        self.query_one("#input-full-name").focus()

    @on(Input.Changed, "#input-card-number")
    def handle_card_number_changed(self, message: Input.Changed) -> None:
        formatted = format_card_number(message.value)
        if formatted != message.value:
            message.input.value = formatted
            message.input.cursor_position = len(formatted)

    def read_details(self) -> PaymentDetails:
        values = {
            name: self.query_one(selector, Input).value.strip()
            for name, selector in FIELD_INPUTS.items()
        }
        return PaymentDetails(**values)

    @on(Button.Pressed, "#btn-submit")
    @work(exclusive=True)
    async def handle_submit(self) -> None:
        for selector in FIELD_INPUTS.values():
            self.query_one(selector).remove_class("-invalid")

        if not all(
            self.query_one(FIELD_INPUTS[name], Input).value.strip()
            for name in ("full_name", "email", "address")
        ):
            self.notify("Make sure all inputs are filled.", severity="error")
            return

        if not await self.app.push_screen_wait(
            DialogModal(
                "Place order? This cannot be undone.",
                primary_text="Yes",
                secondary_text="No",
                tone="positive",
            )
        ):
            return

        state = self.app.state
        if state.place_order(self.read_details()) is None:
            self.query_one("#label-checkout-error", Label).update(
                state.form_errors.get("checkout", "")
            )
            field = getattr(state.last_error, "field", None)
            if field in FIELD_INPUTS:
                bad_input = self.query_one(FIELD_INPUTS[field], Input)
                bad_input.add_class("-invalid")
                bad_input.focus()
            return

        for selector in FIELD_INPUTS.values():
            self.query_one(selector, Input).value = ""
        self.query_one("#label-checkout-error", Label).update("")
        self.app.post_message(PageChangedMessage())

    @on(Button.Pressed, "#btn-back")
    def handle_back(self):
        self.go_to("cart")
