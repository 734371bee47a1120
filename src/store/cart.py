# line-item cart with quantity merge and derived totals
from dataclasses import replace
from typing import Dict, List, Optional

from store.catalog import CatalogStore
from store.errors import UnknownProductError, ValidationFailure
from store.models import CartLine
from utils.logger import get_logger

_logger = get_logger(__name__)

TAX_RATE = 0.10


class CartLedger:
    """
    One line per product id, each with quantity >= 1.
    Lines keep the order in which products were first added.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog
        self._lines: Dict[int, CartLine] = {}

    @property
    def lines(self) -> List[CartLine]:
        return list(self._lines.values())

    def get(self, product_id: int) -> Optional[CartLine]:
        return self._lines.get(product_id)

    def __contains__(self, product_id: int) -> bool:
        return product_id in self._lines

    def __len__(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    def add_item(self, product_id: int, quantity: int = 1) -> CartLine:
        """
        Add `quantity` of a catalog product, merging into its existing line.
        Title, price and image are copied from the product on first add only.
        """
        if quantity < 1:
            raise ValidationFailure("Quantity must be at least 1", field="quantity")
        product = self._catalog.get(product_id)
        if product is None:
            raise UnknownProductError(product_id)

        existing = self._lines.get(product_id)
        if existing:
            line = replace(existing, quantity=existing.quantity + quantity)
        else:
            line = CartLine(
                id=product.id,
                title=product.title,
                price=product.price,
                image=product.image,
                quantity=quantity,
            )
        self._lines[product_id] = line
        _logger.debug(f"Cart: product {product_id} now x{line.quantity}")
        return line

    def remove_item(self, product_id: int) -> bool:
        """Returns False if there was no such line."""
        removed = self._lines.pop(product_id, None) is not None
        if removed:
            _logger.debug(f"Cart: removed product {product_id}")
        return removed

    def change_quantity(self, product_id: int, delta: int) -> Optional[CartLine]:
        """
        Shift a line's quantity by `delta`. The line is dropped once it reaches
        zero. Returns the updated line, or None if the line is gone or never existed.
        """
        existing = self._lines.get(product_id)
        if existing is None:
            return None
        quantity = existing.quantity + delta
        if quantity <= 0:
            self.remove_item(product_id)
            return None
        line = replace(existing, quantity=quantity)
        self._lines[product_id] = line
        return line

    def clear(self) -> None:
        self._lines.clear()

    def subtotal(self) -> float:
        return sum(line.price * line.quantity for line in self._lines.values())

    def tax(self) -> float:
        return self.subtotal() * TAX_RATE

    def total(self) -> float:
        return self.subtotal() + self.tax()

    def item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())
