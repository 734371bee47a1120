import asyncio

from textual import on, work
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Button, DataTable, Input, Label, Select

from store.filters import DEFAULT_CRITERIA
from store.models import FilterCriteria
from store.projections import (
    catalog_status,
    category_options,
    filter_count_label,
    product_cards,
)
from views.base_screen import BaseScreen
from views.modal_prod_detail import ProdDetailModal

RATING_OPTIONS = [
    ("Any rating", 0.0),
    ("3+ stars", 3.0),
    ("4+ stars", 4.0),
    ("4.5+ stars", 4.5),
]


def _bound(price: float) -> str:
    return f"{price:g}"


class HomeScreen(BaseScreen):
    """
    Product browsing with the filter panel. Only this page shows the filters.
    """

    # only here to be displayed in footer
    BINDINGS = [
        Binding("enter", "noop", "View Product", show=True, key_display="⏎"),
    ]

    def __init__(self):
        super().__init__()
        self.configure(header_sub_title="Shop")

    def compose(self) -> ComposeResult:
        yield from super().compose()
        with Vertical(id="div-filters"):
            with Horizontal(id="hort-filters-1"):
                yield Input(placeholder="Search products...", id="input-search")
                yield Select(
                    category_options(self.app.state.catalog.categories),
                    allow_blank=False,
                    id="select-category",
                )
                yield Select(
                    RATING_OPTIONS, allow_blank=False, value=0.0, id="select-rating"
                )
            with Horizontal(id="hort-filters-2"):
                yield Label("Price")
                yield Input(_bound(DEFAULT_CRITERIA.min_price), id="input-min-price", type="number")
                yield Label("-")
                yield Input(_bound(DEFAULT_CRITERIA.max_price), id="input-max-price", type="number")
                yield Button("Apply", id="btn-apply", variant="primary")
                yield Button("Clear", id="btn-clear")
        yield Label("", id="label-filter-count")
        yield Label("", id="label-status")
        yield Button("Retry", id="btn-retry", variant="warning")
        yield DataTable(id="table-products")

    def on_mount(self):
        table = self.query_one(DataTable)
        table.cursor_type = "row"
        table.zebra_stripes = True
        table.add_columns("ID", "Product", "Category", "Price", "Rating")

        self.query_one("#btn-retry").display = False
        self.load_catalog()

    async def refresh_view(self) -> None:
        await super().refresh_view()
        self.render_products()

    @on(Button.Pressed, "#btn-retry")
    @work(exclusive=True, group="catalog")
    async def load_catalog(self) -> None:
        state = self.app.state
        load = asyncio.ensure_future(state.load_catalog())
        await asyncio.sleep(0)  # let the load raise its loading flag
        self.render_status()

        if await load:
            select = self.query_one("#select-category", Select)
            select.set_options(category_options(state.catalog.categories))
            if state.filters.criteria.category in state.catalog.categories:
                select.value = state.filters.criteria.category
            self.query_one("#input-search").focus()
        self.render_products()

    def _read_float(self, input_id: str, default: float) -> float:
        try:
            return float(self.query_one(input_id, Input).value)
        except ValueError:
            return default

    def read_criteria(self) -> FilterCriteria:
        return FilterCriteria(
            search=self.query_one("#input-search", Input).value.strip(),
            category=self.query_one("#select-category", Select).value,
            min_price=self._read_float("#input-min-price", DEFAULT_CRITERIA.min_price),
            max_price=self._read_float("#input-max-price", DEFAULT_CRITERIA.max_price),
            min_rating=self.query_one("#select-rating", Select).value,
        )

    @on(Button.Pressed, "#btn-apply")
    @on(Input.Submitted)
    def handle_apply(self) -> None:
        self.app.state.apply_filters(self.read_criteria())
        self.render_products()

    @on(Button.Pressed, "#btn-clear")
    def handle_clear(self) -> None:
        self.query_one("#input-search", Input).value = DEFAULT_CRITERIA.search
        self.query_one("#select-category", Select).value = DEFAULT_CRITERIA.category
        self.query_one("#select-rating", Select).value = DEFAULT_CRITERIA.min_rating
        self.query_one("#input-min-price", Input).value = _bound(DEFAULT_CRITERIA.min_price)
        self.query_one("#input-max-price", Input).value = _bound(DEFAULT_CRITERIA.max_price)
        self.app.state.clear_filters()
        self.render_products()

    def render_products(self) -> None:
        state = self.app.state
        table = self.query_one(DataTable)
        table.clear()
        for card in product_cards(state.filters.filtered):
            table.add_row(
                card.id, card.title, card.category, card.price, card.rating, key=str(card.id)
            )

        shown, total = state.filters.counts
        self.query_one("#label-filter-count", Label).update(filter_count_label(shown, total))
        self.render_status()

    def render_status(self) -> None:
        catalog = self.app.state.catalog
        shown, _ = self.app.state.filters.counts
        self.query_one("#label-status", Label).update(catalog_status(catalog, shown))
        self.query_one("#btn-retry").display = bool(catalog.error) and not catalog.loading

    @on(DataTable.RowSelected)
    @work()
    async def handle_view_product(self, event: DataTable.RowSelected) -> None:
        product_id = int(event.row_key.value)
        if await self.app.push_screen_wait(ProdDetailModal(product_id)):
            await self.refresh_view()

    def action_noop(self) -> None:
        pass
