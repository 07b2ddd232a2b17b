"""Display currencies.

Currency is a label for rendering amounts; nothing here converts values.
"""

from __future__ import annotations

import os
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple


class Currency(NamedTuple):
    symbol: str
    label: str
    # Minor-unit digits shown when rendering (ISO 4217 exponent).
    fraction_digits: int


CURRENCIES: dict[str, Currency] = {
    "BRL": Currency("R$", "Brazilian Real (R$)", 2),
    "USD": Currency("$", "US Dollar ($)", 2),
    "EUR": Currency("€", "Euro (€)", 2),
    "GBP": Currency("£", "British Pound (£)", 2),
    "JPY": Currency("¥", "Japanese Yen (¥)", 0),
}

DEFAULT_CURRENCY = "BRL"


def normalize_currency(code: str) -> str:
    """Return the upper-cased code, raising ``ValueError`` when unsupported."""

    c = code.strip().upper()
    if c not in CURRENCIES:
        raise ValueError(
            f"unsupported currency: {code!r} (expected one of {', '.join(CURRENCIES)})"
        )
    return c


def default_currency() -> str:
    """Currency from ``BA_CURRENCY`` when set and supported, else BRL."""

    env_val = os.getenv("BA_CURRENCY")
    if env_val and env_val.strip():
        try:
            return normalize_currency(env_val)
        except ValueError:
            return DEFAULT_CURRENCY
    return DEFAULT_CURRENCY


def format_currency(value: float, currency: str) -> str:
    """Render ``value`` as ``<symbol><1,234.56>`` with a leading minus sign.

    Uses the currency's own number of fraction digits (``¥1,235`` for JPY)
    and rounds halves away from zero. A value that rounds to zero prints
    without a sign.
    """

    cur = CURRENCIES[normalize_currency(currency)]
    step = Decimal(1).scaleb(-cur.fraction_digits)
    q = Decimal(str(value)).quantize(step, rounding=ROUND_HALF_UP)
    sign = "-" if q < 0 else ""
    return f"{sign}{cur.symbol}{abs(q):,.{cur.fraction_digits}f}"


__all__ = [
    "CURRENCIES",
    "Currency",
    "DEFAULT_CURRENCY",
    "default_currency",
    "format_currency",
    "normalize_currency",
]
