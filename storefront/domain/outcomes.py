"""Result types returned by the page and checkout services.

Each request evaluates to exactly one member of a union, so the web layer
renders by matching on the type instead of re-checking the payload.
"""

from typing import Literal

from pydantic import BaseModel

from .product import ProductDetail


class ProductError(BaseModel):
    kind: Literal["error"] = "error"
    message: str


class ProductNotFound(BaseModel):
    kind: Literal["not_found"] = "not_found"
    handle: str


class ProductUnavailable(BaseModel):
    kind: Literal["unavailable"] = "unavailable"
    title: str


class ProductReady(BaseModel):
    kind: Literal["ready"] = "ready"
    product: ProductDetail
    price_label: str  # locale formatted, e.g. "SGD 13.50"


ProductOutcome = ProductError | ProductNotFound | ProductUnavailable | ProductReady


class CheckoutRedirect(BaseModel):
    """Send the browser to the externally hosted checkout page."""

    url: str
    cart_id: str | None = None


class CheckoutError(BaseModel):
    """Structured checkout failure; dumps to ``{"error": message}``."""

    error: str


CheckoutResult = CheckoutRedirect | CheckoutError
