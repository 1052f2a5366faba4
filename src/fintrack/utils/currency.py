"""Currency formatting."""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

from fintrack.domain.entities import Currency, Language

CURRENCY_SYMBOLS = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.TRY: "₺",
}

CURRENCY_NAMES = {
    Currency.USD: "US Dollar",
    Currency.EUR: "Euro",
    Currency.TRY: "Turkish Lira",
}

# (thousands separator, decimal separator) per language
_SEPARATORS = {
    Language.EN: (",", "."),
    Language.TR: (".", ","),
}

_CENT = Decimal("0.01")


def format_currency(
    amount: Union[Decimal, int, float],
    currency: Currency = Currency.USD,
    language: Language = Language.EN,
) -> str:
    """Render an amount with currency symbol and grouping.

    Args:
        amount: Amount to render; negative amounts get a leading minus sign
        currency: Currency whose symbol is used
        language: Language that decides the separators

    Returns:
        Formatted string, e.g. "$1,234.56" or "₺1.234,56"
    """
    value = Decimal(str(amount)).quantize(_CENT, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    # Plain "{:,.2f}" gives en grouping; swap separators for other languages
    text = f"{abs(value):,.2f}"
    thousands, decimal_point = _SEPARATORS.get(language, _SEPARATORS[Language.EN])
    if (thousands, decimal_point) != (",", "."):
        text = text.replace(",", "\0").replace(".", decimal_point).replace("\0", thousands)
    return f"{sign}{CURRENCY_SYMBOLS[currency]}{text}"
