from decimal import InvalidOperation

import httpx
from loguru import logger

from storefront.application.pricing import format_money, to_decimal
from storefront.domain.interfaces import IStorefrontRepository
from storefront.domain.outcomes import (
    ProductError,
    ProductNotFound,
    ProductOutcome,
    ProductReady,
    ProductUnavailable,
)
from storefront.domain.product import Money, ProductDetail, ProductImage, ProductVariant
from storefront.infrastructure.storefront_client import StorefrontTransportError


class ProductService:
    """Loads one product by handle and classifies the result for rendering."""

    def __init__(self, repository: IStorefrontRepository, locale: str = "en_US") -> None:
        self._repository = repository
        self._locale = locale

    def load(self, handle: str) -> ProductOutcome:
        """Return the render outcome for ``handle``.

        Checked in order: fetch/GraphQL errors, missing product, missing
        purchasable variant, then the ready detail view.
        """
        try:
            response = self._repository.fetch_product_by_handle(handle)
        except (StorefrontTransportError, httpx.HTTPError, ValueError) as exc:
            logger.error(f"Fetching product '{handle}' failed: {exc}")
            return ProductError(message=str(exc))

        if response.has_errors:
            logger.error(f"GraphQL errors fetching product '{handle}': {response.error_messages()}")
            return ProductError(message=response.error_messages())

        node = (response.data or {}).get("productByHandle")
        if not node:
            logger.info(f"Product '{handle}' not found")
            return ProductNotFound(handle=handle)

        try:
            product = self._map(node, handle)
        except (KeyError, TypeError, InvalidOperation, ValueError) as exc:
            logger.error(f"Unexpected product payload for '{handle}': {exc!r}")
            return ProductError(message="Received an invalid product payload.")

        variant = product.first_variant
        if variant is None or not variant.id:
            logger.warning(f"Product '{handle}' has no purchasable variant")
            return ProductUnavailable(title=product.title)

        return ProductReady(
            product=product,
            price_label=format_money(
                product.price.amount, product.price.currency_code, self._locale
            ),
        )

    @staticmethod
    def _map(node: dict, handle: str) -> ProductDetail:
        """Map a raw ``productByHandle`` node to a ``ProductDetail``."""
        min_price = node["priceRange"]["minVariantPrice"]

        variants = []
        for edge in (node.get("variants") or {}).get("edges") or []:
            raw = edge.get("node") or {}
            # A variant without an id cannot be added to a cart
            if not raw.get("id"):
                continue
            raw_price = raw.get("price")
            variants.append(
                ProductVariant(
                    id=raw["id"],
                    title=raw.get("title") or "",
                    price=Money(
                        amount=to_decimal(raw_price["amount"]),
                        currency_code=raw_price["currencyCode"],
                    )
                    if raw_price
                    else None,
                )
            )

        images = [
            ProductImage(src=edge["node"]["transformedSrc"], alt_text=edge["node"].get("altText"))
            for edge in (node.get("images") or {}).get("edges") or []
            if edge.get("node") and edge["node"].get("transformedSrc")
        ]

        return ProductDetail(
            id=node.get("id") or handle,
            handle=node.get("handle") or handle,
            title=node["title"],
            description_html=node.get("descriptionHtml") or "",
            price=Money(
                amount=to_decimal(min_price["amount"]),
                currency_code=min_price["currencyCode"],
            ),
            variants=variants,
            images=images,
        )
