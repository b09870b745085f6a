"""Conversion between human decimal strings and smallest-unit integers."""

from __future__ import annotations

import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext

from .constants import MAX_DECIMALS, MAX_UINT256
from .errors import AmountOverflow, InvalidAmount

# Plain positional decimals only: no sign, exponent, separators or whitespace.
_DECIMAL_RE = re.compile(r"[0-9]+(\.[0-9]*)?|\.[0-9]+")


def _check_decimals(decimals: int) -> None:
    if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
        raise InvalidAmount(f"Decimals out of range: {decimals!r}")


def parse_units(value: str, decimals: int) -> int:
    """Scale a decimal string like ``"1.5"`` into smallest units.

    Fractional digits beyond ``decimals`` are rounded half-up, the same way
    viem's ``parseUnits`` treats them.
    """

    _check_decimals(decimals)
    if not isinstance(value, str):
        raise InvalidAmount(f"Token amount must be a decimal string, got {type(value).__name__}")

    if value.startswith("-"):
        raise InvalidAmount("Token amount must be non-negative", details={"value": value})
    if not _DECIMAL_RE.fullmatch(value):
        raise InvalidAmount(f"Token amount is not a decimal number: {value!r}", details={"value": value})

    with localcontext() as ctx:
        # Enough precision for any uint256 plus every fractional digit.
        ctx.prec = len(value) + MAX_DECIMALS + 80
        try:
            scaled = (Decimal(value) * (Decimal(10) ** decimals)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
        except InvalidOperation as exc:
            raise InvalidAmount(f"Token amount is not a decimal number: {value!r}") from exc

    raw = int(scaled)
    if raw > MAX_UINT256:
        raise AmountOverflow(raw, label="token amount")
    return raw


def format_units(raw_value: int, decimals: int) -> str:
    """Render smallest units as a plain decimal string without trailing zeros."""

    _check_decimals(decimals)
    if raw_value < 0:
        raise InvalidAmount("Token amount must be non-negative")

    whole, fraction = divmod(raw_value, 10 ** decimals)
    if decimals == 0 or fraction == 0:
        return str(whole)
    fraction_text = str(fraction).rjust(decimals, "0").rstrip("0")
    return f"{whole}.{fraction_text}"


__all__ = ['parse_units', 'format_units']
