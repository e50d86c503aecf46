from typing import Protocol

from .graphql import GraphQLResponse


class IStorefrontClient(Protocol):
    def execute(self, query: str, variables: dict | None = None) -> dict:
        """Send one GraphQL document and return the parsed JSON body."""
        ...


class IStorefrontRepository(Protocol):
    def fetch_products(self, first: int = 6) -> GraphQLResponse: ...

    def fetch_product_by_handle(self, handle: str) -> GraphQLResponse: ...

    def create_cart(self, merchandise_id: str, quantity: int = 1) -> GraphQLResponse: ...
