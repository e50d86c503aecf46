from decimal import ROUND_HALF_UP, Decimal

from babel.numbers import format_currency

_CENTS = Decimal("0.01")


def to_decimal(amount: str | int | float | Decimal) -> Decimal:
    """Parse an API money amount (the Storefront API sends strings like "13.5")."""
    return Decimal(str(amount))


def format_list_price(amount: str | Decimal, prefix: str = "S$") -> str:
    """Fixed-currency price for product cards: ``"13.5"`` -> ``"S$13.50"``."""
    value = to_decimal(amount).quantize(_CENTS, rounding=ROUND_HALF_UP)
    return f"{prefix}{value}"


def format_money(amount: str | Decimal, currency_code: str, locale: str = "en_US") -> str:
    """Locale-aware price in the product's own currency.

    ``format_money("13.5", "SGD")`` gives ``"SGD 13.50"`` for ``en_US`` and
    ``format_money("13.5", "USD")`` gives ``"$13.50"``.
    """
    return format_currency(to_decimal(amount), currency_code, locale=locale)
