from loguru import logger

from storefront.entrypoints.settings import get_config
from storefront.entrypoints.web import create_app


def main() -> None:
    config = get_config()
    if not config.STOREFRONT_API_URL or not config.STOREFRONT_ACCESS_TOKEN:
        logger.warning(
            "STOREFRONT_API_URL / STOREFRONT_ACCESS_TOKEN not set, "
            "the homepage will show fallback products only."
        )

    app = create_app(config)
    logger.info(f"Serving storefront on http://{config.HOST}:{config.PORT}")
    app.run(host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
