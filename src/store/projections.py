"""
Pure state -> display projections.

Nothing here touches widgets; the views turn these values into whatever the
rendering surface needs.
"""

from dataclasses import dataclass
from typing import List, Optional, Tuple

from store.cart import CartLedger
from store.catalog import CatalogStore
from store.models import OrderConfirmation, Product, User
from utils.pure import (
    capitalize_label,
    format_long_date,
    format_money,
    generate_markdown_table,
)

NO_PRODUCTS_MESSAGE = "No products found matching your filters."
EMPTY_CART_MESSAGE = "Your cart is empty"
CATALOG_ERROR_MESSAGE = "Failed to load products. Please try again."
LOADING_MESSAGE = "Loading products..."


@dataclass(frozen=True)
class ProductCard:
    id: int
    title: str
    category: str
    price: str
    rating: str
    image: str


@dataclass(frozen=True)
class CartRow:
    id: int
    title: str
    unit_price: str
    quantity: int
    line_total: str
    image: str


@dataclass(frozen=True)
class Totals:
    subtotal: str
    tax: str
    total: str


def product_card(product: Product) -> ProductCard:
    return ProductCard(
        id=product.id,
        title=product.title,
        category=product.category,
        price=format_money(product.price),
        rating=f"⭐ {product.rating.rate} ({product.rating.count} reviews)",
        image=product.image,
    )


def product_cards(products: List[Product]) -> List[ProductCard]:
    return [product_card(p) for p in products]


def product_detail_markdown(product: Product) -> str:
    rows = [
        ["Category", capitalize_label(product.category)],
        ["Price", format_money(product.price)],
        ["Rating", f"{product.rating.rate} / 5 ({product.rating.count} reviews)"],
    ]
    md = f"### {product.title}\n\n"
    md += generate_markdown_table(["Attribute", "Value"], rows, ["l", "l"])
    if product.description:
        md += f"\n\n{product.description}"
    return md


def category_options(categories: List[str]) -> List[Tuple[str, str]]:
    """(label, value) pairs for a category picker."""
    return [(capitalize_label(c), c) for c in categories]


def filter_count_label(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} products"


def catalog_status(catalog: CatalogStore, shown: int) -> str:
    """Status line above the product table; empty when there is nothing to say."""
    if catalog.loading:
        return LOADING_MESSAGE
    if catalog.error:
        return CATALOG_ERROR_MESSAGE
    if len(catalog) and not shown:
        return NO_PRODUCTS_MESSAGE
    return ""


def cart_rows(cart: CartLedger) -> List[CartRow]:
    return [
        CartRow(
            id=line.id,
            title=line.title,
            unit_price=f"{format_money(line.price)} each",
            quantity=line.quantity,
            line_total=format_money(line.line_total),
            image=line.image,
        )
        for line in cart.lines
    ]


def totals(cart: CartLedger) -> Totals:
    return Totals(
        subtotal=format_money(cart.subtotal()),
        tax=format_money(cart.tax()),
        total=format_money(cart.total()),
    )


def totals_markdown(cart: CartLedger) -> str:
    t = totals(cart)
    return generate_markdown_table(
        None,
        [["Subtotal", t.subtotal], ["Tax (10%)", t.tax], ["**Total**", f"**{t.total}**"]],
        ["l", "r"],
    )


def checkout_summary_markdown(cart: CartLedger) -> str:
    rows = [
        [line.title, f"Quantity: {line.quantity}", format_money(line.line_total)]
        for line in cart.lines
    ]
    md = "### Order Summary\n\n"
    md += generate_markdown_table(["Item", "Quantity", "Price"], rows, ["l", "c", "r"])
    return md + "\n\n" + totals_markdown(cart)


def cart_badge(cart: CartLedger) -> str:
    return f"🛒 {cart.item_count()}"


def account_label(user: Optional[User]) -> str:
    return user.username if user else "Login"


def profile_markdown(user: User) -> str:
    return "### My Profile\n\n" + generate_markdown_table(
        None, [["Username", user.username], ["Email", user.email]], ["l", "l"]
    )


def confirmation_markdown(confirmation: OrderConfirmation) -> str:
    rows = [
        ["Order ID", confirmation.order_id],
        ["Estimated delivery", format_long_date(confirmation.delivery_date)],
        ["Items", confirmation.item_count],
        ["Total charged", format_money(confirmation.total)],
    ]
    return "### Order Confirmed!\n\n" + generate_markdown_table(None, rows, ["l", "l"])
