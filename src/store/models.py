# provide dataclass models

from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, get_args

Page = Literal["home", "cart", "checkout", "auth", "profile", "confirmation"]
PAGES = get_args(Page)

NotificationKind = Literal["success", "error", "info"]

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class Rating:
    rate: float  # 0..5
    count: int


@dataclass(frozen=True)
class Product:
    id: int
    title: str
    price: float
    category: str
    image: str
    rating: Rating
    description: str = ""

    @classmethod
    def from_json(cls, raw: dict) -> "Product":
        """
        Build a product from one catalog record.
        Raises KeyError / TypeError / ValueError if the record does not fit the schema.
        """
        rating = raw["rating"]
        price = float(raw["price"])
        rate = float(rating["rate"])
        count = int(rating["count"])
        if price < 0 or not 0 <= rate <= 5 or count < 0:
            raise ValueError(f"product {raw.get('id')!r} has out of range values")
        return cls(
            id=int(raw["id"]),
            title=str(raw["title"]),
            price=price,
            category=str(raw["category"]),
            image=str(raw["image"]),
            rating=Rating(rate=rate, count=count),
            description=str(raw.get("description") or ""),
        )


@dataclass(frozen=True)
class FilterCriteria:
    search: str = ""
    category: str = ALL_CATEGORIES
    min_price: float = 0.0
    max_price: float = 1000.0
    min_rating: float = 0.0


@dataclass(frozen=True)
class CartLine:
    id: int  # product id
    title: str
    price: float  # unit price captured when first added
    image: str
    quantity: int

    @property
    def line_total(self) -> float:
        return self.price * self.quantity


@dataclass(frozen=True)
class User:
    username: str
    email: str
    password: str


@dataclass(frozen=True)
class PaymentDetails:
    full_name: str
    email: str
    address: str
    card_number: str
    expiry: str  # MM/YY
    cvv: str


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: str
    delivery_date: date
    placed_at: datetime
    total: float
    item_count: int


@dataclass(frozen=True)
class Notification:
    message: str
    kind: NotificationKind = "info"
