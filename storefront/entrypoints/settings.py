from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    STOREFRONT_API_URL: str = ""
    STOREFRONT_ACCESS_TOKEN: str = ""
    REQUEST_TIMEOUT: float = 10.0

    SECRET_KEY: str = "dev-secret"
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Pages are considered fresh for this long (seconds)
    REVALIDATE_SECONDS: int = 3600
    FEATURED_PRODUCT_COUNT: int = 6
    LIST_PRICE_PREFIX: str = "S$"
    PRICE_LOCALE: str = "en_US"
    PLACEHOLDER_IMAGE: str = "/static/placeholder.svg"


@lru_cache
def get_config() -> Config:
    """Process-wide settings, read from the environment on first use."""
    return Config()
