from loguru import logger

from storefront.domain.graphql import GraphQLResponse
from storefront.domain.interfaces import IStorefrontClient
from storefront.infrastructure.queries import (
    CART_CREATE_MUTATION,
    PRODUCT_BY_HANDLE_QUERY,
    PRODUCTS_QUERY,
)


class StorefrontRepository:
    """Named Storefront API calls, each returning the parsed response envelope.

    Nothing here inspects ``errors`` or validates domain data; that is left to
    the application services.
    """

    def __init__(self, client: IStorefrontClient) -> None:
        self._client = client

    def fetch_products(self, first: int = 6) -> GraphQLResponse:
        body = self._client.execute(PRODUCTS_QUERY, {"first": first})
        return GraphQLResponse.model_validate(body)

    def fetch_product_by_handle(self, handle: str) -> GraphQLResponse:
        logger.debug(f"Fetching product '{handle}'")
        body = self._client.execute(PRODUCT_BY_HANDLE_QUERY, {"handle": handle})
        return GraphQLResponse.model_validate(body)

    def create_cart(self, merchandise_id: str, quantity: int = 1) -> GraphQLResponse:
        cart_input = {
            "lines": [{"merchandiseId": merchandise_id, "quantity": quantity}],
        }
        body = self._client.execute(CART_CREATE_MUTATION, {"input": cart_input})
        return GraphQLResponse.model_validate(body)
