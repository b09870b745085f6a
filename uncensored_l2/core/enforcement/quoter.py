"""
Reverse constant-product quoting.

Integer math mirrors the V2 router library exactly::

    amount_in = reserve_in * amount_out * 1000 // ((reserve_out - amount_out) * 997) + 1
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ...providers.base import ChainReadProvider
from .constants import AMM_FEE_DENOMINATOR, AMM_FEE_NUMERATOR, MAX_UINT256
from .errors import (
    AmountOverflow,
    ChainReadError,
    EnforcementError,
    InsufficientLiquidity,
    InvalidAmount,
    InvalidPath,
    ReservesUnavailable,
)
from .models import SwapPath, TokenAmount


def get_amount_in(amount_out: int, reserve_in: int, reserve_out: int) -> int:
    """Input required on one hop to receive exactly ``amount_out``."""
    if amount_out <= 0:
        raise InvalidAmount("Desired output amount must be positive")
    if reserve_in <= 0 or reserve_out <= 0:
        raise InsufficientLiquidity(
            "Pool has no liquidity",
            details={"reserve_in": reserve_in, "reserve_out": reserve_out},
        )
    if amount_out >= reserve_out:
        raise InsufficientLiquidity(
            "Desired amount exceeds pool reserves",
            details={"amount_out": amount_out, "reserve_out": reserve_out},
        )

    numerator = reserve_in * amount_out * AMM_FEE_DENOMINATOR
    denominator = (reserve_out - amount_out) * AMM_FEE_NUMERATOR
    amount_in = numerator // denominator + 1
    if amount_in > MAX_UINT256:
        raise AmountOverflow(amount_in, label="amount in")
    return amount_in


def get_amounts_in(amount_out: int, reserves: Sequence[Tuple[int, int]]) -> List[int]:
    """Walk hops backwards, returning the amount at every path position.

    ``reserves[i]`` holds ``(reserve_in, reserve_out)`` for hop ``i``. The
    last entry of the result is ``amount_out`` and the first is the input
    the caller must supply.
    """
    if not reserves:
        raise InvalidPath("Path must contain at least one hop")

    amounts = [0] * (len(reserves) + 1)
    amounts[-1] = amount_out
    for i in range(len(reserves) - 1, -1, -1):
        reserve_in, reserve_out = reserves[i]
        amounts[i] = get_amount_in(amounts[i + 1], reserve_in, reserve_out)
    return amounts


class AmmQuoter:
    """Quotes the native input for a desired token output on a two-hop path."""

    def __init__(self, provider: ChainReadProvider, *, logger: Optional[logging.Logger] = None) -> None:
        self._provider = provider
        self._logger = logger or logging.getLogger(__name__)

    async def _read_reserves(self, path: SwapPath, chain_name: str) -> Tuple[int, int]:
        try:
            return await self._provider.get_reserves(chain_name, path.token_in, path.token_out)
        except ReservesUnavailable:
            raise
        except ChainReadError as exc:
            raise ReservesUnavailable(exc.message, chain=chain_name, details=exc.details) from exc
        except EnforcementError:
            raise
        except Exception as exc:
            self._logger.warning("getReserves() failed on %s: %s", chain_name, exc)
            raise ReservesUnavailable(f"Could not read reserves on {chain_name}", chain=chain_name) from exc

    async def amounts_in(self, path: SwapPath, chain_name: str, desired_amount_out: TokenAmount) -> TokenAmount:
        if len(path) != 2:
            raise InvalidPath(f"Swap path must contain exactly 2 addresses, got {len(path)}")

        reserve_in, reserve_out = await self._read_reserves(path, chain_name)
        amounts = get_amounts_in(desired_amount_out.raw_value, [(reserve_in, reserve_out)])

        self._logger.debug(
            "Quoted %s on %s: amount_out=%d reserve_in=%d reserve_out=%d amount_in=%d",
            path.token_out,
            chain_name,
            desired_amount_out.raw_value,
            reserve_in,
            reserve_out,
            amounts[0],
        )
        # Native input always carries 18 decimals on the supported chains.
        return TokenAmount(raw_value=amounts[0], decimals=18)


__all__ = ['AmmQuoter', 'get_amount_in', 'get_amounts_in']
