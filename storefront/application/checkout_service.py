import httpx
from loguru import logger

from storefront.domain.interfaces import IStorefrontRepository
from storefront.domain.outcomes import CheckoutError, CheckoutRedirect, CheckoutResult
from storefront.domain.product import Cart, CartUserError
from storefront.infrastructure.storefront_client import StorefrontTransportError

MISSING_VARIANT = "Variant ID is missing."
GRAPHQL_FAILURE = "Failed to create cart due to GraphQL errors."
MISSING_CHECKOUT_URL = "Failed to get checkout URL."
UNEXPECTED_FAILURE = "An unexpected error occurred during checkout."


class CheckoutService:
    """Creates a one-item cart and hands back where to send the shopper.

    Every call creates a new remote cart; repeated submissions are not
    deduplicated.
    """

    def __init__(self, repository: IStorefrontRepository) -> None:
        self._repository = repository

    def checkout(self, variant_id: str | None) -> CheckoutResult:
        if not variant_id or not variant_id.strip():
            logger.error("No variant ID provided to checkout")
            return CheckoutError(error=MISSING_VARIANT)

        try:
            response = self._repository.create_cart(variant_id, quantity=1)
        except (StorefrontTransportError, httpx.HTTPError, ValueError) as exc:
            logger.error(f"Cart creation failed for {variant_id}: {exc}")
            return CheckoutError(error=UNEXPECTED_FAILURE)

        if response.has_errors:
            logger.error(f"GraphQL errors during cart creation: {response.error_messages()}")
            return CheckoutError(error=GRAPHQL_FAILURE)

        payload = (response.data or {}).get("cartCreate") or {}

        try:
            user_errors = [
                CartUserError.model_validate(e) for e in payload.get("userErrors") or []
            ]
        except ValueError as exc:
            logger.error(f"Unexpected userErrors shape: {exc}")
            return CheckoutError(error=UNEXPECTED_FAILURE)

        if user_errors:
            messages = "; ".join(e.message for e in user_errors)
            logger.warning(f"User errors on cart creation: {messages}")
            return CheckoutError(error=f"Could not create cart: {messages}")

        raw_cart = payload.get("cart") or {}
        if not raw_cart.get("checkoutUrl"):
            logger.error(f"Cart created without a checkout URL. Payload: {payload}")
            return CheckoutError(error=MISSING_CHECKOUT_URL)

        cart = Cart(id=raw_cart.get("id") or "", checkout_url=raw_cart["checkoutUrl"])
        logger.info(f"Cart {cart.id} created, redirecting to checkout")
        return CheckoutRedirect(url=cart.checkout_url, cart_id=cart.id or None)
