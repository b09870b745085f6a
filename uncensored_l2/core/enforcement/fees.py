"""Per-chain surcharge on top of the quoted input."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .chain_registry import ChainRegistry
from .constants import FEE_RATE_DENOMINATOR, MAX_UINT256
from .errors import AmountOverflow, InvalidAmount
from .models import FeeAdjustedAmount, TokenAmount


class FeeRateSource(ABC):
    """Supplies the surcharge rate (parts per thousand) for a chain."""

    @abstractmethod
    async def get_fee_rate(self, chain_name: str) -> int:
        pass


class RegistryFeeRateSource(FeeRateSource):
    """Static rates taken from the chain registry."""

    def __init__(self, registry: ChainRegistry) -> None:
        self._registry = registry

    async def get_fee_rate(self, chain_name: str) -> int:
        return self._registry.fee_rate(chain_name)


def apply_fee_rate(amount_in: int, fee_rate_per_mille: int) -> FeeAdjustedAmount:
    """``amount_in + amount_in * rate // 1000 + 1``.

    The trailing unit is always added so the surcharged value strictly exceeds
    the raw quote, even at a zero rate.
    """
    if isinstance(fee_rate_per_mille, bool) or not isinstance(fee_rate_per_mille, int):
        raise InvalidAmount(f"Fee rate must be an integer, got {fee_rate_per_mille!r}")
    if fee_rate_per_mille < 0:
        raise InvalidAmount("Fee rate must be non-negative")
    if amount_in < 0:
        raise InvalidAmount("Amount must be non-negative")

    fee = amount_in * fee_rate_per_mille // FEE_RATE_DENOMINATOR
    adjusted = FeeAdjustedAmount(amount_in=amount_in, fee=fee, fee_rate_per_mille=fee_rate_per_mille)
    if adjusted.adjusted > MAX_UINT256:
        raise AmountOverflow(adjusted.adjusted, label="amount in with fee")
    return adjusted


class FeeCalculator:
    def __init__(self, rate_source: FeeRateSource) -> None:
        self._rate_source = rate_source

    async def apply_fee(self, amount_in: TokenAmount, chain_name: str) -> FeeAdjustedAmount:
        rate = await self._rate_source.get_fee_rate(chain_name)
        return apply_fee_rate(amount_in.raw_value, rate)


__all__ = ['FeeRateSource', 'RegistryFeeRateSource', 'FeeCalculator', 'apply_fee_rate']
