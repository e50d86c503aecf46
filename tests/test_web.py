"""Route-level tests for the Flask storefront using a stubbed GraphQL client."""

from unittest.mock import MagicMock

import pytest

from storefront.entrypoints.settings import Config
from storefront.entrypoints.web import create_app
from storefront.infrastructure.queries import (
    CART_CREATE_MUTATION,
    PRODUCT_BY_HANDLE_QUERY,
    PRODUCTS_QUERY,
)
from storefront.infrastructure.storefront_client import (
    StorefrontGraphQLClient,
    StorefrontTransportError,
)
from storefront.infrastructure.storefront_repository import StorefrontRepository

PRODUCT = {
    "id": "gid://shopify/Product/1",
    "handle": "ceramic-mug",
    "title": "Ceramic Mug",
    "descriptionHtml": "<p>Holds <strong>coffee</strong>.</p>",
    "priceRange": {"minVariantPrice": {"amount": "13.5", "currencyCode": "SGD"}},
    "images": {"edges": []},
    "variants": {
        "edges": [
            {
                "node": {
                    "id": "gid://shopify/ProductVariant/42",
                    "title": "Default Title",
                    "price": {"amount": "13.5", "currencyCode": "SGD"},
                }
            }
        ]
    },
}


def _router(responses: dict[str, dict | Exception]):
    """Helper: dispatch ``execute`` calls to canned responses by GraphQL document."""

    def execute(query: str, variables: dict | None = None) -> dict:
        response = responses[query]
        if isinstance(response, Exception):
            raise response
        return response

    return execute


@pytest.fixture()
def gql() -> MagicMock:
    return MagicMock(spec=StorefrontGraphQLClient)


@pytest.fixture()
def client(gql: MagicMock):
    config = Config(_env_file=None, SECRET_KEY="test", REVALIDATE_SECONDS=3600)
    app = create_app(config, repository=StorefrontRepository(gql))
    app.config["TESTING"] = True
    with app.test_client() as c:
        yield c


# ---------------------------------------------------------------------------
# Homepage
# ---------------------------------------------------------------------------


def test_health(client) -> None:
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json["status"] == "ok"


def test_home_lists_products(client, gql: MagicMock) -> None:
    node = {
        "title": "Ceramic Mug",
        "handle": "ceramic-mug",
        "description": "Holds coffee.",
        "priceRange": {"minVariantPrice": {"amount": "13.5"}},
        "images": {"edges": []},
    }
    gql.execute.side_effect = _router(
        {PRODUCTS_QUERY: {"data": {"products": {"edges": [{"node": node}]}}}}
    )

    r = client.get("/")

    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Ceramic Mug" in html
    assert "S$13.50" in html
    assert 'href="/products/ceramic-mug"' in html
    assert "Focus Paper Refill" not in html


def test_home_falls_back_when_api_fails(client, gql: MagicMock) -> None:
    gql.execute.side_effect = StorefrontTransportError(500, "Internal Server Error")

    r = client.get("/")

    assert r.status_code == 200
    html = r.get_data(as_text=True)
    for name in ("Focus Paper Refill", "Productivity Planner", "Task Management Notebook"):
        assert name in html


def test_home_sets_revalidation_window(client, gql: MagicMock) -> None:
    gql.execute.return_value = {"data": {"products": {"edges": []}}}

    r = client.get("/")

    assert "public" in r.headers["Cache-Control"]
    assert "max-age=3600" in r.headers["Cache-Control"]


# ---------------------------------------------------------------------------
# Product detail
# ---------------------------------------------------------------------------


def test_product_page_renders_detail(client, gql: MagicMock) -> None:
    gql.execute.side_effect = _router(
        {PRODUCT_BY_HANDLE_QUERY: {"data": {"productByHandle": PRODUCT}}}
    )

    r = client.get("/products/ceramic-mug")

    assert r.status_code == 200
    html = r.get_data(as_text=True)
    assert "Ceramic Mug" in html
    assert "13.50" in html
    assert "<p>Holds <strong>coffee</strong>.</p>" in html
    assert 'value="gid://shopify/ProductVariant/42"' in html
    assert "Variant:" not in html
    assert "No image available" in html
    assert "max-age=3600" in r.headers["Cache-Control"]


def test_product_page_not_found(client, gql: MagicMock) -> None:
    gql.execute.return_value = {"data": {"productByHandle": None}}

    r = client.get("/products/missing")

    assert r.status_code == 404
    html = r.get_data(as_text=True)
    assert "Product Not Found" in html
    assert "Error Loading Product Data" not in html


def test_product_page_error(client, gql: MagicMock) -> None:
    gql.execute.return_value = {"data": None, "errors": [{"message": "Access denied"}]}

    r = client.get("/products/ceramic-mug")

    assert r.status_code == 502
    html = r.get_data(as_text=True)
    assert "Error Loading Product Data" in html
    assert "Access denied" in html
    assert "no-store" in r.headers["Cache-Control"]


def test_product_page_unavailable(client, gql: MagicMock) -> None:
    gql.execute.return_value = {
        "data": {"productByHandle": {**PRODUCT, "variants": {"edges": []}}}
    }

    r = client.get("/products/ceramic-mug")

    assert r.status_code == 200
    assert "Product Variant Not Available" in r.get_data(as_text=True)


# ---------------------------------------------------------------------------
# Checkout
# ---------------------------------------------------------------------------


def test_checkout_redirects_to_hosted_checkout(client, gql: MagicMock) -> None:
    gql.execute.side_effect = _router(
        {
            CART_CREATE_MUTATION: {
                "data": {
                    "cartCreate": {
                        "cart": {
                            "id": "gid://shopify/Cart/1",
                            "checkoutUrl": "https://shop.example/checkout/abc",
                        },
                        "userErrors": [],
                    }
                }
            }
        }
    )

    r = client.post(
        "/products/ceramic-mug/checkout",
        data={"variant_id": "gid://shopify/ProductVariant/42"},
    )

    assert r.status_code == 303
    assert r.headers["Location"] == "https://shop.example/checkout/abc"


def test_checkout_error_is_shown_on_product_page(client, gql: MagicMock) -> None:
    gql.execute.side_effect = _router(
        {
            CART_CREATE_MUTATION: {
                "data": {
                    "cartCreate": {
                        "cart": None,
                        "userErrors": [{"field": None, "message": "Insufficient stock"}],
                    }
                }
            },
            PRODUCT_BY_HANDLE_QUERY: {"data": {"productByHandle": PRODUCT}},
        }
    )

    r = client.post(
        "/products/ceramic-mug/checkout",
        data={"variant_id": "gid://shopify/ProductVariant/42"},
        follow_redirects=True,
    )

    assert r.status_code == 200
    assert "Could not create cart: Insufficient stock" in r.get_data(as_text=True)
    assert "no-store" in r.headers["Cache-Control"]


def test_checkout_without_variant_makes_no_api_call(client, gql: MagicMock) -> None:
    r = client.post("/products/ceramic-mug/checkout", data={})

    assert r.status_code == 303
    assert r.headers["Location"].endswith("/products/ceramic-mug")
    gql.execute.assert_not_called()


def test_unknown_route_renders_html_404(client) -> None:
    r = client.get("/nope/nope")

    assert r.status_code == 404
    assert "Page Not Found" in r.get_data(as_text=True)
