from textual import events, on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, MarkdownViewer

from store.projections import product_detail_markdown
from utils.pure import clamp_quantity


class ProdDetailModal(ModalScreen[bool]):
    """
    Product detail plus a quantity picker.
    Returns True if the product was added to the cart, False if not.
    """

    CSS = """
    #input-order-qty {
        width: 10;
    }
    #btn-sub-qty, #btn-add-qty {
        min-width: 4;
    }
    """

    order_qty = reactive(1, init=False)

    def __init__(self, product_id: int) -> None:
        super().__init__()
        self._product_id = product_id

    def compose(self) -> ComposeResult:
        with Horizontal(id="hort-prod-detail"):
            yield MarkdownViewer("", show_table_of_contents=False)
            with Vertical():
                yield Label("Quantity")
                with Horizontal():
                    yield Button("-", id="btn-sub-qty")
                    yield Input(value="1", id="input-order-qty", type="integer")
                    yield Button("+", id="btn-add-qty")
                yield Label("", id="label-in-cart")
                with Horizontal():
                    yield Button("Go Back", id="btn-quit")
                    yield Button("Add to Cart", id="btn-addcart", variant="primary")

    async def on_mount(self):
        state = self.app.state
        product = state.catalog.get(self._product_id)
        if product is None:
            self.dismiss(False)
            return

        await self.query_one(MarkdownViewer).document.update(
            product_detail_markdown(product)
        )
        line = state.cart.get(self._product_id)
        if line:
            self.query_one("#label-in-cart", Label).update(f"In cart: {line.quantity}")
        self.watch_order_qty(self.order_qty)
        self.query_one("#btn-addcart").focus()

    def on_key(self, event: events.Key) -> None:
        if event.key == "escape":
            self.dismiss(False)

    def on_input_changed(self, message: Input.Changed) -> None:
        if message.input.id == "input-order-qty" and message.value.isdigit():
            self.order_qty = clamp_quantity(int(message.value), 0)

    def watch_order_qty(self, qty: int) -> None:
        self.query_one("#btn-sub-qty").disabled = qty <= 1
        qty_input = self.query_one("#input-order-qty", Input)
        if qty_input.value != str(qty):
            qty_input.value = str(qty)

    @on(Button.Pressed, "#btn-add-qty")
    def handle_add_qty(self):
        self.order_qty = clamp_quantity(self.order_qty, 1)

    @on(Button.Pressed, "#btn-sub-qty")
    def handle_sub_qty(self):
        self.order_qty = clamp_quantity(self.order_qty, -1)

    @on(Button.Pressed, "#btn-quit")
    def handle_quit(self):
        self.dismiss(False)

    @on(Button.Pressed, "#btn-addcart")
    def handle_addcart(self):
        self.dismiss(self.app.state.add_to_cart(self._product_id, self.order_qty))
