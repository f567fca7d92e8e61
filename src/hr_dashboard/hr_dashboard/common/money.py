from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from ..core.constants import MONEY_PLACES

ZERO = Decimal("0")


def to_money(value: Any) -> Decimal:
    """Lenient amount coercion: absent, blank or unparsable values become 0."""

    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, bool):
        return ZERO
    try:
        d = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return ZERO
    return d if d.is_finite() else ZERO


def quantize(value: Decimal) -> Decimal:
    return value.quantize(Decimal(MONEY_PLACES), rounding=ROUND_HALF_UP)
