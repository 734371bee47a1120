from typing import Optional


class StorefrontError(Exception):
    """Base class for every failure the storefront reports back to the user."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FetchFailure(StorefrontError):
    """Catalog could not be fetched or did not parse as a product list."""


class ValidationFailure(StorefrontError):
    """
    A submitted form value was rejected.
    `field` names the input responsible, for inline display.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class AuthFailure(StorefrontError):
    """Login credentials did not match any registered user."""


class UnknownProductError(StorefrontError, LookupError):
    """A product id was used that is not part of the current catalog."""

    def __init__(self, product_id: int):
        super().__init__(f"Product {product_id} is not in the catalog")
        self.product_id = product_id
