# checkout: payment field checks, order ids and delivery dates
import random
import re
import string
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from store.cart import CartLedger
from store.errors import ValidationFailure
from store.models import OrderConfirmation, PaymentDetails
from store.navigation import Navigator
from utils.logger import get_logger

_logger = get_logger(__name__)

ORDER_ID_PREFIX = "ORD-"
ORDER_ID_LENGTH = 9
ORDER_ID_ALPHABET = string.digits + string.ascii_uppercase
DELIVERY_DAYS = 7
MIN_CARD_DIGITS = 13
EXPIRY_PATTERN = re.compile(r"^\d{2}/\d{2}$")


def generate_order_id(rng: Optional[random.Random] = None) -> str:
    """Not cryptographic; only has to look like an order number."""
    chars = (rng or random).choices(ORDER_ID_ALPHABET, k=ORDER_ID_LENGTH)
    return ORDER_ID_PREFIX + "".join(chars)


def validate_payment(details: PaymentDetails) -> None:
    """
    Syntactic checks only, in order: card number, expiry, CVV.
    The card length counts digits only; spaces from the grouped display
    format are ignored, so "4111 1111 111" (11 digits) is rejected.
    Raises ValidationFailure for the first one that fails.
    """
    card_digits = "".join(details.card_number.split())
    if len(card_digits) < MIN_CARD_DIGITS:
        raise ValidationFailure("Invalid card number", field="card_number")
    if not EXPIRY_PATTERN.match(details.expiry):
        raise ValidationFailure("Invalid expiry date format (MM/YY)", field="expiry")
    if len(details.cvv) != 3:
        raise ValidationFailure("Invalid CVV", field="cvv")


def delivery_date_for(placed_at: datetime) -> date:
    return (placed_at + timedelta(days=DELIVERY_DAYS)).date()


class OrderDesk:
    """
    Finalises checkout. The id factory, validator and clock are swappable so a
    real payment backend can replace the placeholders.
    """

    def __init__(
        self,
        cart: CartLedger,
        navigator: Navigator,
        id_factory: Callable[[], str] = generate_order_id,
        validator: Callable[[PaymentDetails], None] = validate_payment,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._cart = cart
        self._navigator = navigator
        self._id_factory = id_factory
        self._validator = validator
        self._clock = clock
        self.last_confirmation: Optional[OrderConfirmation] = None

    def place_order(self, details: PaymentDetails) -> OrderConfirmation:
        """
        Validate, then empty the cart and move to the confirmation page.
        Nothing changes if validation fails.
        """
        self._validator(details)

        placed_at = self._clock()
        confirmation = OrderConfirmation(
            order_id=self._id_factory(),
            delivery_date=delivery_date_for(placed_at),
            placed_at=placed_at,
            total=self._cart.total(),
            item_count=self._cart.item_count(),
        )
        self._cart.clear()
        self.last_confirmation = confirmation
        self._navigator.navigate_to("confirmation")
        _logger.info(
            f"Order {confirmation.order_id} placed: "
            f"{confirmation.item_count} items, ${confirmation.total:.2f}"
        )
        return confirmation
