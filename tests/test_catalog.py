import asyncio
import unittest

import httpx
from sample_data import RAW_PRODUCTS

from store.catalog import CatalogStore, derive_categories, parse_products
from store.errors import FetchFailure

CATALOG_URL = "https://catalog.test/products"


def make_catalog(handler) -> CatalogStore:
    return CatalogStore(url=CATALOG_URL, timeout=1, transport=httpx.MockTransport(handler))


class CatalogStoreTestCase(unittest.IsolatedAsyncioTestCase):
    # ---------- successful loads ----------

    async def test_load_replaces_products_and_categories(self):
        seen_urls = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen_urls.append(str(request.url))
            return httpx.Response(200, json=RAW_PRODUCTS)

        catalog = make_catalog(handler)
        self.assertTrue(await catalog.load())

        self.assertEqual(seen_urls, [CATALOG_URL])
        self.assertEqual([p.id for p in catalog.products], [1, 2, 3, 4])
        self.assertEqual(catalog.categories, ["all", "clothing", "electronics", "jewelery"])
        self.assertEqual(catalog.get(2).rating.count, 120)
        self.assertEqual(catalog.get(2).description, "Two buttons and a wheel.")
        self.assertIsNone(catalog.get(99))
        self.assertIsNone(catalog.error)
        self.assertFalse(catalog.loading)

    # ---------- failures ----------

    async def test_non_2xx_sets_error_and_keeps_products(self):
        responses = [httpx.Response(200, json=RAW_PRODUCTS), httpx.Response(503)]
        catalog = make_catalog(lambda request: responses.pop(0))

        await catalog.load()
        with self.assertRaises(FetchFailure):
            await catalog.load()
        self.assertIsNotNone(catalog.error)
        self.assertFalse(catalog.loading)
        self.assertEqual(len(catalog), 4)

    async def test_first_load_failure_leaves_catalog_empty(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        catalog = make_catalog(handler)
        with self.assertRaises(FetchFailure):
            await catalog.load()
        self.assertEqual(catalog.products, [])
        self.assertEqual(catalog.categories, ["all"])
        self.assertTrue(catalog.error)

    async def test_timeout_is_a_fetch_failure(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with self.assertRaises(FetchFailure):
            await make_catalog(handler).load()

    async def test_invalid_json_is_a_fetch_failure(self):
        catalog = make_catalog(lambda request: httpx.Response(200, text="<html>oops</html>"))
        with self.assertRaises(FetchFailure):
            await catalog.load()

    async def test_schema_mismatch_is_a_fetch_failure(self):
        broken = [dict(RAW_PRODUCTS[0]), {"id": 2, "title": "No price"}]
        catalog = make_catalog(lambda request: httpx.Response(200, json=broken))
        with self.assertRaises(FetchFailure):
            await catalog.load()
        self.assertEqual(catalog.products, [])

    async def test_failed_load_can_be_retried(self):
        responses = [httpx.Response(500), httpx.Response(200, json=RAW_PRODUCTS)]
        catalog = make_catalog(lambda request: responses.pop(0))

        with self.assertRaises(FetchFailure):
            await catalog.load()
        self.assertTrue(await catalog.load())
        self.assertIsNone(catalog.error)
        self.assertEqual(len(catalog), 4)

    async def test_malformed_url_is_a_fetch_failure(self):
        catalog = CatalogStore(url="http://[::1", timeout=1)
        with self.assertRaises(FetchFailure):
            await catalog.load()
        self.assertFalse(catalog.loading)
        self.assertTrue(catalog.error)

    # ---------- superseded loads ----------

    async def test_stale_response_is_discarded(self):
        release_first = asyncio.Event()
        calls = 0

        async def handler(request):
            nonlocal calls
            calls += 1
            if calls == 1:
                await release_first.wait()
                return httpx.Response(200, json=RAW_PRODUCTS[:1])
            return httpx.Response(200, json=RAW_PRODUCTS[1:])

        catalog = make_catalog(handler)
        first = asyncio.create_task(catalog.load())
        while calls < 1:
            await asyncio.sleep(0)

        self.assertTrue(await catalog.load())
        release_first.set()
        self.assertFalse(await first)
        self.assertEqual([p.id for p in catalog.products], [2, 3, 4])

    async def test_stale_failure_does_not_set_error(self):
        release_first = asyncio.Event()
        calls = 0

        async def handler(request):
            nonlocal calls
            calls += 1
            if calls == 1:
                await release_first.wait()
                return httpx.Response(500)
            return httpx.Response(200, json=RAW_PRODUCTS)

        catalog = make_catalog(handler)
        first = asyncio.create_task(catalog.load())
        while calls < 1:
            await asyncio.sleep(0)

        await catalog.load()
        release_first.set()
        self.assertFalse(await first)
        self.assertIsNone(catalog.error)
        self.assertEqual(len(catalog), 4)


class CatalogHelpersTestCase(unittest.TestCase):
    def test_parse_products_requires_a_list(self):
        with self.assertRaises(FetchFailure):
            parse_products({"products": RAW_PRODUCTS})

    def test_parse_products_rejects_out_of_range_rating(self):
        bad = dict(RAW_PRODUCTS[0], rating={"rate": 7, "count": 1})
        with self.assertRaises(FetchFailure):
            parse_products([bad])

    def test_categories_are_distinct_in_first_seen_order(self):
        products = parse_products(RAW_PRODUCTS[::-1])
        self.assertEqual(derive_categories(products), ["all", "jewelery", "clothing", "electronics"])
        self.assertEqual(derive_categories([]), ["all"])
