from textual import on, work
from textual.app import ComposeResult
from textual.containers import Horizontal, HorizontalGroup, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Label, Markdown, Rule

from store.projections import EMPTY_CART_MESSAGE, CartRow, cart_rows, totals_markdown
from utils.messages import PageChangedMessage
from views.base_screen import BaseScreen
from views.modal_dialog import DialogModal


class CartLineActionMessage(Message):
    """Posted by a cart line when one of its buttons is pressed."""

    bubble = True

    def __init__(self, product_id: int, delta: int = 0, remove: bool = False) -> None:
        super().__init__()
        self.product_id = product_id
        self.delta = delta
        self.remove = remove


class CartLineWidget(HorizontalGroup):
    def __init__(self, row: CartRow):
        super().__init__()
        self.row = row

    def compose(self) -> ComposeResult:
        yield Label(self.row.title, classes="label-line-title")
        yield Label(self.row.unit_price, classes="label-line-price")
        yield Button("-", classes="btn-line-sub")
        yield Label(str(self.row.quantity), classes="label-line-qty")
        yield Button("+", classes="btn-line-add")
        yield Label(self.row.line_total, classes="label-line-total")
        yield Button("Remove", classes="btn-line-remove", variant="error")

    @on(Button.Pressed, ".btn-line-sub")
    def handle_sub(self):
        self.post_message(CartLineActionMessage(self.row.id, delta=-1))

    @on(Button.Pressed, ".btn-line-add")
    def handle_add(self):
        self.post_message(CartLineActionMessage(self.row.id, delta=1))

    @on(Button.Pressed, ".btn-line-remove")
    def handle_remove(self):
        self.post_message(CartLineActionMessage(self.row.id, remove=True))


class CartScreen(BaseScreen):
    """
    Cart lines with quantity controls, totals, and the way to checkout.
    """

    def __init__(self) -> None:
        super().__init__()
        self.configure(header_sub_title="Cart")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        yield Label(EMPTY_CART_MESSAGE, id="label-cart-empty")
        yield VerticalScroll(id="vertscroll-content")
        yield Rule(line_style="dashed")
        yield Markdown("", id="md-cart-totals")
        with Horizontal(id="hort-buttons"):
            yield Button("Continue Shopping", id="btn-shop")
            yield Button("Proceed to Checkout", id="btn-checkout", variant="primary")

    async def refresh_view(self) -> None:
        await super().refresh_view()
        cart = self.app.state.cart

        content = self.query_one("#vertscroll-content")
        await content.remove_children()
        await content.mount_all([CartLineWidget(row) for row in cart_rows(cart)])

        empty = cart.is_empty()
        self.query_one("#label-cart-empty").display = empty
        self.query_one("#md-cart-totals").display = not empty
        self.query_one("#btn-checkout").disabled = empty
        await self.query_one("#md-cart-totals", Markdown).update(totals_markdown(cart))

    @on(CartLineActionMessage)
    @work(exclusive=True)
    async def handle_line_action(self, message: CartLineActionMessage) -> None:
        state = self.app.state
        if message.remove:
            remove_confirmed = await self.app.push_screen_wait(
                DialogModal(
                    "Do you really want to remove this item from cart?",
                    primary_text="Yes",
                    secondary_text="No",
                    tone="warning",
                )
            )
            if not remove_confirmed:
                return
            state.remove_from_cart(message.product_id)
        else:
            state.change_quantity(message.product_id, message.delta)
        await self.refresh_view()

    @on(Button.Pressed, "#btn-shop")
    def handle_continue_shopping(self) -> None:
        self.go_to("home")

    @on(Button.Pressed, "#btn-checkout")
    def handle_checkout(self) -> None:
        self.app.state.proceed_to_checkout()
        self.app.post_message(PageChangedMessage())
