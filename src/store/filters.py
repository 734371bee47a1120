# derives the visible product subset from the catalog and the active criteria
from typing import List, Tuple

from store.catalog import CatalogStore
from store.models import ALL_CATEGORIES, FilterCriteria, Product

DEFAULT_CRITERIA = FilterCriteria()


def matches(product: Product, criteria: FilterCriteria) -> bool:
    """All four predicates must hold."""
    return (
        criteria.search.lower() in product.title.lower()
        and criteria.category in (ALL_CATEGORIES, product.category)
        and criteria.min_price <= product.price <= criteria.max_price
        and product.rating.rate >= criteria.min_rating
    )


class FilterEngine:
    """
    Owns the active FilterCriteria. `filtered` is only ever rebuilt from the
    catalog, never edited in place.
    """

    def __init__(self, catalog: CatalogStore) -> None:
        self._catalog = catalog
        self.criteria = DEFAULT_CRITERIA
        self.filtered: List[Product] = []

    def apply(self, criteria: FilterCriteria) -> List[Product]:
        self.criteria = criteria
        return self.refresh()

    def clear(self) -> List[Product]:
        return self.apply(DEFAULT_CRITERIA)

    def refresh(self) -> List[Product]:
        """Recompute under the current criteria, e.g. after the catalog reloads."""
        self.filtered = [p for p in self._catalog.products if matches(p, self.criteria)]
        return self.filtered

    @property
    def counts(self) -> Tuple[int, int]:
        """(shown, total)"""
        return len(self.filtered), len(self._catalog.products)
