from decimal import Decimal

from pydantic import BaseModel, Field

# Shopify gives single-variant products a variant titled "Default Title"
DEFAULT_VARIANT_TITLE = "Default Title"


class ProductSummary(BaseModel):
    """One card in the featured products grid."""

    id: str  # product handle, or a static id for fallback items
    name: str
    href: str
    price: str  # already formatted, e.g. "S$13.50"
    description: str
    image_src: str
    image_alt: str


class Money(BaseModel):
    amount: Decimal
    currency_code: str


class ProductImage(BaseModel):
    src: str
    alt_text: str | None = None


class ProductVariant(BaseModel):
    """A purchasable configuration; ``id`` is the cart merchandise id."""

    id: str  # Shopify GID, e.g. "gid://shopify/ProductVariant/123"
    title: str = ""
    price: Money | None = None


class ProductDetail(BaseModel):
    """Domain model for the product detail page."""

    id: str
    handle: str
    title: str
    description_html: str = ""
    price: Money
    variants: list[ProductVariant] = Field(default_factory=list)
    images: list[ProductImage] = Field(default_factory=list)

    @property
    def first_variant(self) -> ProductVariant | None:
        return self.variants[0] if self.variants else None

    @property
    def image(self) -> ProductImage | None:
        return self.images[0] if self.images else None

    @property
    def image_alt(self) -> str:
        image = self.image
        return (image.alt_text if image else None) or self.title

    @property
    def variant_label(self) -> str | None:
        """Variant title worth showing, or ``None`` for the generic default."""
        variant = self.first_variant
        if variant is None or not variant.title or variant.title == DEFAULT_VARIANT_TITLE:
            return None
        return variant.title


class Cart(BaseModel):
    """Remote cart; only its checkout URL is ever used."""

    id: str
    checkout_url: str


class CartUserError(BaseModel):
    field: list[str] | None = None
    message: str
