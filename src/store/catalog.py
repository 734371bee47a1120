# fetches the product catalog and derives category facets
from typing import Dict, List, Optional

import httpx

from store.config import CATALOG_URL, FETCH_TIMEOUT
from store.errors import FetchFailure
from store.models import ALL_CATEGORIES, Product
from utils.logger import get_logger

_logger = get_logger(__name__)


def parse_products(payload) -> List[Product]:
    """Turn a decoded catalog body into products, or raise FetchFailure."""
    if not isinstance(payload, list):
        raise FetchFailure("Catalog response is not a list of products")
    try:
        return [Product.from_json(raw) for raw in payload]
    except (KeyError, TypeError, ValueError) as e:
        raise FetchFailure(f"Catalog response does not match the product schema: {e}") from e


def derive_categories(products: List[Product]) -> List[str]:
    """Distinct categories in first-seen order, led by the "all" sentinel."""
    seen = dict.fromkeys(p.category for p in products)
    seen.pop(ALL_CATEGORIES, None)
    return [ALL_CATEGORIES, *seen]


class CatalogStore:
    """
    Holds the fetched products.

    Only the most recent `load()` may change state: a response arriving
    after a newer load started is dropped.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url or CATALOG_URL
        self.timeout = FETCH_TIMEOUT if timeout is None else timeout
        self._transport = transport

        self.products: List[Product] = []
        self.categories: List[str] = [ALL_CATEGORIES]
        self.error: Optional[str] = None
        self.loading = False

        self._by_id: Dict[int, Product] = {}
        self._generation = 0

    def get(self, product_id: int) -> Optional[Product]:
        return self._by_id.get(product_id)

    def __len__(self) -> int:
        return len(self.products)

    def replace(self, products: List[Product]) -> None:
        self.products = list(products)
        self._by_id = {p.id: p for p in self.products}
        self.categories = derive_categories(self.products)
        self.loading = False
        self.error = None

    async def _fetch(self) -> List[Product]:
        async with httpx.AsyncClient(
            timeout=self.timeout, transport=self._transport
        ) as client:
            try:
                response = await client.get(self.url)
                response.raise_for_status()
                payload = response.json()
            except (httpx.HTTPError, httpx.InvalidURL) as e:
                raise FetchFailure(f"Failed to fetch products: {e}") from e
            except ValueError as e:  # body is not JSON
                raise FetchFailure(f"Catalog response is not valid JSON: {e}") from e
        return parse_products(payload)

    async def load(self) -> bool:
        """
        Fetch the catalog and replace the product collection.

        Returns True when the products were replaced, False when this call was
        superseded by a newer one. Raises FetchFailure (after setting `error`)
        when the fetch fails; the previous products stay in place.
        """
        self._generation += 1
        token = self._generation
        self.loading = True
        self.error = None
        _logger.info(f"Loading catalog from {self.url}...")

        try:
            products = await self._fetch()
        except FetchFailure as e:
            if token != self._generation:
                _logger.debug(f"Ignoring failure of superseded catalog load: {e}")
                return False
            self.error = e.message
            _logger.error(e.message)
            raise
        finally:
            if token == self._generation:
                self.loading = False

        if token != self._generation:
            _logger.info("Discarding stale catalog response.")
            return False

        self.replace(products)
        _logger.info(
            f"Catalog loaded: {len(products)} products in "
            f"{len(self.categories) - 1} categories."
        )
        return True
