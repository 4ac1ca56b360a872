"""Utility functions shared across the waybill report builders."""
from __future__ import annotations

import math
import unicodedata
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Tuple

UNKNOWN_CUSTOMER = "Unknown Customer"
UNKNOWN_PRODUCT = "Unknown Product"
UNKNOWN_CARRIER = "Unknown"
NOT_AVAILABLE = "N/A"
DASH = "-"


def to_number(value: object) -> Optional[float]:
    """Coerce an extracted value to float; returns None for anything non-numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return number if math.isfinite(number) else None
    if not isinstance(value, str):
        return None

    cleaned = value.strip()
    if not cleaned:
        return None
    # Rightmost separator is the decimal one when both appear (1.234,56 vs 1,234.56)
    if "," in cleaned and "." in cleaned:
        if cleaned.rindex(",") > cleaned.rindex("."):
            cleaned = cleaned.replace(".", "").replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    elif "," in cleaned:
        parts = cleaned.split(",")
        if len(parts) == 2 and len(parts[-1]) != 3:
            cleaned = cleaned.replace(",", ".")
        else:
            cleaned = cleaned.replace(",", "")
    try:
        number = float(cleaned)
    except ValueError:
        return None
    return number if math.isfinite(number) else None


def to_text(value: object) -> Optional[str]:
    """Coerce an extracted value to str; numbers are stringified, other shapes dropped."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return format_number(value)
    return None


def format_number(value: float) -> str:
    """Locale-independent rendering: integral values drop the trailing '.0'."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def round_money(value: float) -> Decimal:
    """Two decimals with exact halves rounded up (0.125 -> 0.13, 2.675 -> 2.67)."""
    return Decimal(value).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)


def format_money(value: Optional[float]) -> str:
    """Fixed two decimals, missing values render as 0.00."""
    return str(round_money(value or 0))


def format_currency(value: Optional[float], currency: str = "") -> str:
    if not value:
        return DASH
    return f"{currency}{round_money(value)}"


def format_text(value: Optional[str]) -> str:
    return value or DASH


def format_qty(value: Optional[float]) -> str:
    if not value:
        return DASH
    return format_number(value)


def collation_key(value: str) -> Tuple[str, str, str, str]:
    """Sort key approximating a locale collation compare.

    Primary strength ignores case and accents, secondary breaks ties on
    accents, tertiary puts lowercase first, and the raw string keeps the
    order total.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return (base.casefold(), decomposed.casefold(), value.swapcase(), value)
