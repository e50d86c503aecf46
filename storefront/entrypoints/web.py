from __future__ import annotations

from datetime import UTC, datetime

from flask import (
    Flask,
    Response,
    flash,
    get_flashed_messages,
    make_response,
    redirect,
    render_template,
    request,
    url_for,
)
from loguru import logger
from werkzeug.exceptions import HTTPException

from storefront.application.catalog_service import CatalogService
from storefront.application.checkout_service import CheckoutService
from storefront.application.product_service import ProductService
from storefront.domain.interfaces import IStorefrontRepository
from storefront.domain.outcomes import (
    CheckoutRedirect,
    ProductError,
    ProductNotFound,
    ProductReady,
    ProductUnavailable,
)
from storefront.entrypoints.settings import Config, get_config
from storefront.infrastructure.storefront_client import StorefrontGraphQLClient
from storefront.infrastructure.storefront_repository import StorefrontRepository


def _revalidate(response: Response, seconds: int) -> Response:
    """Mark a page as fresh for ``seconds``; after that it is fetched again."""
    response.cache_control.public = True
    response.cache_control.max_age = seconds
    return response


def _no_store(response: Response) -> Response:
    response.cache_control.no_store = True
    return response


def create_app(
    config: Config | None = None,
    repository: IStorefrontRepository | None = None,
) -> Flask:
    config = config or get_config()
    if repository is None:
        repository = StorefrontRepository(
            StorefrontGraphQLClient(
                endpoint=config.STOREFRONT_API_URL,
                access_token=config.STOREFRONT_ACCESS_TOKEN,
                timeout=config.REQUEST_TIMEOUT,
            )
        )

    catalog = CatalogService(
        repository,
        count=config.FEATURED_PRODUCT_COUNT,
        price_prefix=config.LIST_PRICE_PREFIX,
        placeholder_image=config.PLACEHOLDER_IMAGE,
    )
    products = ProductService(repository, locale=config.PRICE_LOCALE)
    checkout = CheckoutService(repository)

    app = Flask(__name__, template_folder="templates", static_folder="static")
    app.config["SECRET_KEY"] = config.SECRET_KEY
    revalidate_seconds = config.REVALIDATE_SECONDS

    @app.context_processor
    def inject_footer():
        return {"current_year": datetime.now(UTC).year}

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    @app.get("/")
    def home():
        featured = catalog.featured_products()
        response = make_response(render_template("home.html", products=featured))
        return _revalidate(response, revalidate_seconds)

    @app.get("/products/<handle>")
    def product_detail(handle: str):
        outcome = products.load(handle)
        errors = get_flashed_messages(category_filter=["error"])

        match outcome:
            case ProductError(message=message):
                page = render_template("product_error.html", message=message)
                return _no_store(make_response(page, 502))
            case ProductNotFound():
                page = render_template("product_not_found.html", handle=handle)
                return _revalidate(make_response(page, 404), revalidate_seconds)
            case ProductUnavailable(title=title):
                page = render_template("product_unavailable.html", title=title)
                return _revalidate(make_response(page, 200), revalidate_seconds)
            case ProductReady(product=product, price_label=price_label):
                page = render_template(
                    "product_detail.html",
                    product=product,
                    price_label=price_label,
                    checkout_errors=errors,
                )
                response = make_response(page, 200)
                if errors:
                    return _no_store(response)
                return _revalidate(response, revalidate_seconds)

    @app.post("/products/<handle>/checkout")
    def product_checkout(handle: str):
        result = checkout.checkout(request.form.get("variant_id"))

        if isinstance(result, CheckoutRedirect):
            # 303 so the browser follows with a GET to the hosted checkout
            return redirect(result.url, code=303)

        flash(result.error, "error")
        return redirect(url_for("product_detail", handle=handle), code=303)

    @app.errorhandler(404)
    def not_found(err: HTTPException):
        return render_template("error.html", title="Page Not Found", message=err.description), 404

    @app.errorhandler(500)
    def server_error(err: HTTPException):
        logger.error(f"Unhandled error on {request.path}: {err}")
        return render_template(
            "error.html", title="Something Went Wrong", message="Unexpected server error."
        ), 500

    return app
