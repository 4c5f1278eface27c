"""Currency formatting for display.

Amounts are rendered the way the id-ID locale renders IDR: a currency symbol,
``.`` as the thousands separator, ``,`` as the decimal separator, and at most
two fraction digits with trailing zeros dropped ("Rp 1.234", "Rp 1.234,5").
"""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

DEFAULT_CURRENCY = "IDR"

_SYMBOLS = {
    "IDR": "Rp",
    "USD": "US$",
    "EUR": "€",
    "SGD": "SGD",
}

_NON_NUMERIC = re.compile(r"[^0-9,\-]")


def format_currency(amount: Decimal | int | float | str, currency_code: str = DEFAULT_CURRENCY) -> str:
    """Format ``amount`` as a localized currency string.

    Raises ``ValueError`` when ``amount`` is not a number.
    """
    try:
        value = Decimal(str(amount))
    except InvalidOperation as exc:
        raise ValueError(f"Not a numeric amount: {amount!r}") from exc
    if not value.is_finite():
        raise ValueError(f"Not a finite amount: {amount!r}")

    value = value.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer_part, _, fraction = f"{abs(value):f}".partition(".")
    fraction = fraction.rstrip("0")

    grouped = f"{int(integer_part):,}".replace(",", ".")
    number = f"{grouped},{fraction}" if fraction else grouped

    symbol = _SYMBOLS.get(currency_code.upper(), currency_code.upper())
    return f"{sign}{symbol} {number}"


def parse_currency_string(text: str) -> Decimal:
    """Parse a string produced by ``format_currency`` back to a Decimal.

    Grouping dots are discarded and the decimal comma becomes a point.
    Returns ``Decimal("0")`` when no digits are present.
    """
    cleaned = _NON_NUMERIC.sub("", text).replace(",", ".")
    if not any(ch.isdigit() for ch in cleaned):
        return Decimal("0")
    try:
        return Decimal(cleaned)
    except InvalidOperation as exc:
        raise ValueError(f"Not a currency string: {text!r}") from exc
