import unittest
from datetime import date, datetime

from sample_data import PRODUCTS

from store import projections
from store.cart import CartLedger
from store.catalog import CatalogStore
from store.models import OrderConfirmation, User
from utils.pure import (
    capitalize_label,
    clamp_quantity,
    format_card_number,
    format_long_date,
    format_money,
    generate_markdown_table,
)


class ProjectionsTestCase(unittest.TestCase):
    def setUp(self):
        catalog = CatalogStore()
        catalog.replace(PRODUCTS)
        self.cart = CartLedger(catalog)

    def test_product_card(self):
        card = projections.product_card(PRODUCTS[0])
        self.assertEqual(card.price, "$20.00")
        self.assertEqual(card.rating, "⭐ 4.5 (10 reviews)")
        self.assertEqual(card.category, "clothing")

    def test_category_options_capitalise_labels_only(self):
        self.assertEqual(
            projections.category_options(["all", "men's clothing"]),
            [("All", "all"), ("Men's clothing", "men's clothing")],
        )

    def test_filter_count_label(self):
        self.assertEqual(projections.filter_count_label(2, 20), "Showing 2 of 20 products")

    def test_catalog_status(self):
        empty = CatalogStore()
        self.assertEqual(projections.catalog_status(empty, 0), "")
        empty.loading = True
        self.assertEqual(projections.catalog_status(empty, 0), "Loading products...")
        empty.loading, empty.error = False, "boom"
        self.assertEqual(
            projections.catalog_status(empty, 0), projections.CATALOG_ERROR_MESSAGE
        )

        stocked = CatalogStore()
        stocked.replace(PRODUCTS)
        self.assertEqual(projections.catalog_status(stocked, 0), projections.NO_PRODUCTS_MESSAGE)
        self.assertEqual(projections.catalog_status(stocked, 4), "")

    def test_cart_rows_and_totals(self):
        self.cart.add_item(1, 2)
        self.cart.add_item(2)
        rows = projections.cart_rows(self.cart)
        self.assertEqual([r.id for r in rows], [1, 2])
        self.assertEqual(rows[0].unit_price, "$20.00 each")
        self.assertEqual(rows[0].line_total, "$40.00")

        t = projections.totals(self.cart)
        self.assertEqual((t.subtotal, t.tax, t.total), ("$75.50", "$7.55", "$83.05"))
        self.assertEqual(projections.cart_badge(self.cart), "🛒 3")

    def test_checkout_summary_lists_every_line(self):
        self.cart.add_item(1, 2)
        self.cart.add_item(3)
        md = projections.checkout_summary_markdown(self.cart)
        self.assertIn("Red Shirt", md)
        self.assertIn("Blue Jeans", md)
        self.assertIn("Quantity: 2", md)
        self.assertIn("$105.59", md)  # (40 + 55.99) * 1.1

    def test_account_and_profile(self):
        user = User("demo_user", "user@example.com", "password123")
        self.assertEqual(projections.account_label(None), "Login")
        self.assertEqual(projections.account_label(user), "demo_user")
        md = projections.profile_markdown(user)
        self.assertIn("user@example.com", md)
        self.assertNotIn("password123", md)

    def test_confirmation_markdown(self):
        confirmation = OrderConfirmation(
            order_id="ORD-ABC123XYZ",
            delivery_date=date(2026, 10, 25),
            placed_at=datetime(2026, 10, 18),
            total=44.0,
            item_count=2,
        )
        md = projections.confirmation_markdown(confirmation)
        self.assertIn("ORD-ABC123XYZ", md)
        self.assertIn("October 25, 2026", md)
        self.assertIn("$44.00", md)

    def test_product_detail_includes_description(self):
        md = projections.product_detail_markdown(PRODUCTS[1])
        self.assertTrue(md.startswith("### Wireless Mouse"))
        self.assertIn("Two buttons and a wheel.", md)


class PureHelpersTestCase(unittest.TestCase):
    def test_markdown_table(self):
        md = generate_markdown_table(["A", "B"], [["x", 1]], ["l", "r"])
        self.assertEqual(md, "| A | B |\n| :--- | ---: |\n| x | 1 |")

    def test_markdown_table_first_row_as_header_and_escaping(self):
        md = generate_markdown_table(None, [["k", "v"], ["a|b", "c"]])
        self.assertEqual(md.splitlines()[0], "| k | v |")
        self.assertIn("a\\|b", md)
        self.assertEqual(generate_markdown_table(None, []), "")

    def test_markdown_table_align_mismatch(self):
        with self.assertRaises(ValueError):
            generate_markdown_table(["A"], [["x"]], ["l", "r"])

    def test_formatters(self):
        self.assertEqual(format_money(3), "$3.00")
        self.assertEqual(capitalize_label("electronics"), "Electronics")
        self.assertEqual(capitalize_label(""), "")
        self.assertEqual(format_card_number("4111111111111111"), "4111 1111 1111 1111")
        self.assertEqual(format_card_number("4111 11"), "4111 11")
        self.assertEqual(format_long_date(date(2026, 1, 5)), "January 5, 2026")

    def test_clamp_quantity(self):
        self.assertEqual(clamp_quantity(1, -1), 1)
        self.assertEqual(clamp_quantity(3, 2), 5)
