from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Callable, Deque, Dict, List, Optional

import httpx

from store.auth import AuthRegistry
from store.cart import CartLedger
from store.catalog import CatalogStore
from store.errors import FetchFailure, StorefrontError, ValidationFailure
from store.filters import FilterEngine
from store.models import (
    FilterCriteria,
    Notification,
    NotificationKind,
    OrderConfirmation,
    Page,
    PaymentDetails,
)
from store.navigation import Navigator
from store.orders import OrderDesk
from store.projections import CATALOG_ERROR_MESSAGE, EMPTY_CART_MESSAGE
from utils.logger import get_logger

_logger = get_logger(__name__)

NotificationListener = Callable[[Notification], None]


@dataclass
class GlobalState:
    """
    Centralized application state shared by screens.

    Each command method mutates the components below, then reports the outcome
    as a Notification; StorefrontError never leaves these methods.

    Fields:
      - catalog / filters / cart / auth / navigator / orders: core components
      - dark_mode: theme flag, light by default
      - form_errors: inline error per form ("login", "signup", "checkout")
      - last_error: the most recent failure, for focusing the offending field
      - notifications: recent notifications, newest last
    """

    catalog: CatalogStore = field(default_factory=CatalogStore)
    auth: AuthRegistry = field(default_factory=AuthRegistry)
    dark_mode: bool = False

    filters: FilterEngine = field(init=False)
    cart: CartLedger = field(init=False)
    navigator: Navigator = field(init=False)
    orders: OrderDesk = field(init=False)

    form_errors: Dict[str, str] = field(default_factory=dict)
    notifications: Deque[Notification] = field(
        default_factory=lambda: deque(maxlen=50)
    )
    last_error: Optional[StorefrontError] = field(default=None, init=False)
    _listeners: List[NotificationListener] = field(
        default_factory=list, init=False, repr=False
    )

    def __post_init__(self) -> None:
        self.filters = FilterEngine(self.catalog)
        self.cart = CartLedger(self.catalog)
        self.navigator = Navigator(self.auth)
        self.orders = OrderDesk(self.cart, self.navigator)

    @classmethod
    def with_transport(cls, transport: httpx.AsyncBaseTransport, **kwargs) -> GlobalState:
        """State whose catalog fetches go through the given httpx transport."""
        return cls(catalog=CatalogStore(transport=transport), **kwargs)

    # ---------------------------
    # Notification channel
    # ---------------------------

    def subscribe(self, listener: NotificationListener) -> None:
        self._listeners.append(listener)

    def notify(self, message: str, kind: NotificationKind = "info") -> Notification:
        note = Notification(message, kind)
        self.notifications.append(note)
        for listener in self._listeners:
            listener(note)
        return note

    def _fail(self, error: StorefrontError, form: Optional[str] = None) -> None:
        self.last_error = error
        if form:
            self.form_errors[form] = error.message
        self.notify(error.message, "error")

    # ---------------------------
    # Catalog & filters
    # ---------------------------

    @property
    def page(self) -> Page:
        return self.navigator.page

    async def load_catalog(self) -> bool:
        """True if the catalog was replaced by this call."""
        try:
            replaced = await self.catalog.load()
        except FetchFailure:
            self.notify(CATALOG_ERROR_MESSAGE, "error")
            return False
        if replaced:
            self.filters.refresh()
        return replaced

    def apply_filters(self, criteria: FilterCriteria) -> None:
        self.filters.apply(criteria)

    def clear_filters(self) -> None:
        self.filters.clear()

    # ---------------------------
    # Cart
    # ---------------------------

    def add_to_cart(self, product_id: int, quantity: int = 1) -> bool:
        try:
            self.cart.add_item(product_id, quantity)
        except StorefrontError as e:
            self._fail(e)
            return False
        self.notify("Item added to cart!", "success")
        return True

    def remove_from_cart(self, product_id: int) -> bool:
        if not self.cart.remove_item(product_id):
            return False
        self.notify("Item removed from cart", "info")
        return True

    def change_quantity(self, product_id: int, delta: int) -> bool:
        """False if the product had no cart line."""
        if product_id not in self.cart:
            return False
        if self.cart.change_quantity(product_id, delta) is None:
            self.notify("Item removed from cart", "info")
        return True

    # ---------------------------
    # Auth
    # ---------------------------

    def login(self, email: str, password: str) -> bool:
        try:
            user = self.auth.login(email, password)
        except StorefrontError as e:
            self._fail(e, form="login")
            return False
        self.form_errors.pop("login", None)
        self.notify(f"Welcome back, {user.username}!", "success")
        self.navigator.navigate_to("home")
        return True

    def signup(self, username: str, email: str, password: str) -> bool:
        try:
            user = self.auth.signup(username, email, password)
        except ValidationFailure as e:
            self._fail(e, form="signup")
            return False
        self.form_errors.pop("signup", None)
        self.notify(f"Account created! Welcome, {user.username}!", "success")
        self.navigator.navigate_to("home")
        return True

    def logout(self) -> None:
        self.auth.logout()
        self.notify("Logged out successfully", "info")
        self.navigator.navigate_to("home")

    # ---------------------------
    # Navigation & checkout
    # ---------------------------

    def navigate(self, page: Page) -> Page:
        return self.navigator.navigate_to(page)

    def open_account(self) -> Page:
        return self.navigate("profile" if self.auth.is_authenticated else "auth")

    def proceed_to_checkout(self) -> Page:
        """Checkout needs a logged in user and something in the cart."""
        if not self.auth.is_authenticated:
            self.notify("Please login to proceed to checkout", "error")
            return self.navigate("auth")
        if self.cart.is_empty():
            self.notify(EMPTY_CART_MESSAGE, "error")
            return self.page
        return self.navigate("checkout")

    def place_order(self, details: PaymentDetails) -> Optional[OrderConfirmation]:
        try:
            confirmation = self.orders.place_order(details)
        except ValidationFailure as e:
            self._fail(e, form="checkout")
            return None
        self.form_errors.pop("checkout", None)
        self.notify("Order placed successfully!", "success")
        return confirmation

    def toggle_theme(self) -> bool:
        self.dark_mode = not self.dark_mode
        return self.dark_mode
