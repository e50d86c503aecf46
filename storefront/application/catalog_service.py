from decimal import InvalidOperation

import httpx
from loguru import logger

from storefront.application.pricing import format_list_price
from storefront.domain.interfaces import IStorefrontRepository
from storefront.domain.product import ProductSummary
from storefront.infrastructure.storefront_client import StorefrontTransportError

# Shown whenever the live catalog cannot be used, so the grid is never empty
FALLBACK_PRODUCTS: tuple[ProductSummary, ...] = (
    ProductSummary(
        id="1",
        name="Focus Paper Refill",
        href="#",
        price="$13",
        description="3 sizes available",
        image_src="https://fastly.picsum.photos/id/1070/600/600.jpg?hmac=WdshjrfPzYB1b5i82jm_qYAORJjBjhd2lNyC6c1rFdw",
        image_alt="Person using a pen to cross a task off a productivity paper card.",
    ),
    ProductSummary(
        id="2",
        name="Productivity Planner",
        href="#",
        price="$22",
        description="Undated weekly layout",
        image_src="https://fastly.picsum.photos/id/868/600/600.jpg?hmac=z_O3S-q7nYD9UC8Ki10KwUY2xnLgKFnHqkSWLu37YQ8",
        image_alt="Open planner on a desk with a pen placed on top.",
    ),
    ProductSummary(
        id="3",
        name="Task Management Notebook",
        href="#",
        price="$18",
        description="Hardcover, 120 pages",
        image_src="https://fastly.picsum.photos/id/783/600/600.jpg?hmac=zpPpcRXoJELFXXp2dyVDwa6dd82RJ7s8v5M_4uEw8vU",
        image_alt="Notebook with task checklists written and highlighted.",
    ),
)


class CatalogService:
    """Builds the featured products grid for the homepage."""

    def __init__(
        self,
        repository: IStorefrontRepository,
        count: int = 6,
        price_prefix: str = "S$",
        placeholder_image: str = "/static/placeholder.svg",
    ) -> None:
        self._repository = repository
        self._count = count
        self._price_prefix = price_prefix
        self._placeholder_image = placeholder_image

    def featured_products(self) -> list[ProductSummary]:
        """Return the first products of the catalog, in API order.

        Falls back to ``FALLBACK_PRODUCTS`` when the request fails, the
        response carries GraphQL errors, or no products come back.
        """
        try:
            response = self._repository.fetch_products(first=self._count)
        except (StorefrontTransportError, httpx.HTTPError, ValueError) as exc:
            logger.warning(f"Product listing failed, using fallback products: {exc}")
            return list(FALLBACK_PRODUCTS)

        # Partial responses are not trusted: any error means the fallback grid
        if response.has_errors:
            logger.warning(
                f"Product listing returned GraphQL errors, using fallback products: "
                f"{response.error_messages()}"
            )
            return list(FALLBACK_PRODUCTS)

        edges = ((response.data or {}).get("products") or {}).get("edges") or []

        try:
            products = [self._map(edge["node"]) for edge in edges]
        except (KeyError, TypeError, InvalidOperation, ValueError) as exc:
            logger.warning(f"Unexpected product listing shape, using fallback products: {exc!r}")
            return list(FALLBACK_PRODUCTS)

        if not products:
            logger.info("Product listing is empty, using fallback products")
            return list(FALLBACK_PRODUCTS)

        logger.debug(f"Loaded {len(products)} featured product(s)")
        return products

    def _map(self, node: dict) -> ProductSummary:
        """Map a raw ``products.edges[].node`` to a ``ProductSummary``."""
        image_edges = (node.get("images") or {}).get("edges") or []
        image = image_edges[0]["node"] if image_edges else None

        return ProductSummary(
            id=node["handle"],
            name=node["title"],
            href=f"/products/{node['handle']}",
            price=format_list_price(
                node["priceRange"]["minVariantPrice"]["amount"], self._price_prefix
            ),
            description=node.get("description") or "",
            image_src=(image or {}).get("transformedSrc") or self._placeholder_image,
            image_alt=(image or {}).get("altText") or node["title"],
        )
