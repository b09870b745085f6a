"""SwapQuoteBuilder turns a validated tool request into enforcement tx params."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Callable, Optional

from ...config import settings as default_settings
from ...providers.base import ChainReadProvider
from .amounts import parse_units
from .calldata import CalldataEncoder
from .chain_registry import ChainRegistry
from .constants import SWAP_SIGNATURE
from .errors import EnforcementError, InvalidAmount, SwapPreparationFailed
from .fees import FeeCalculator, FeeRateSource, RegistryFeeRateSource
from .metadata import TokenMetadataResolver
from .models import (
    ChainConfig,
    FeeAdjustedAmount,
    Quote,
    SwapPath,
    SwapTransactionParams,
    TokenAmount,
    checksum_address,
)
from .quoter import AmmQuoter


@dataclass(frozen=True)
class PreparedSwap:
    """Everything computed for one request; ``params`` is what callers submit."""

    chain: ChainConfig
    path: SwapPath
    decimals: int
    quote: Quote
    fee: FeeAdjustedAmount
    params: SwapTransactionParams


class SwapQuoteBuilder:
    """Orchestrates registry lookup, decimals, quoting, fees and encoding.

    ``build`` raises the precise error kind for each failure.
    ``prepare_swap`` is the tool-facing entry point and collapses every
    failure into ``SwapPreparationFailed``.
    """

    def __init__(
        self,
        registry: ChainRegistry,
        provider: ChainReadProvider,
        *,
        fee_source: Optional[FeeRateSource] = None,
        encoder: Optional[CalldataEncoder] = None,
        clock: Callable[[], float] = time.time,
        deadline_seconds: Optional[int] = None,
        gas_limit: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._registry = registry
        self._metadata = TokenMetadataResolver(provider)
        self._quoter = AmmQuoter(provider)
        self._fees = FeeCalculator(fee_source or RegistryFeeRateSource(registry))
        self._encoder = encoder or CalldataEncoder()
        self._clock = clock
        self._deadline_seconds = deadline_seconds or default_settings.deadline_seconds
        self._gas_limit = gas_limit or default_settings.enforcement_gas_limit
        self._logger = logger or logging.getLogger(__name__)

    def _deadline(self) -> int:
        # Whole seconds, rounded half up.
        return int(math.floor(self._clock() + self._deadline_seconds + 0.5))

    async def build(
        self,
        chain_name: str,
        token_address: str,
        token_amount: str,
        user_address: str,
    ) -> PreparedSwap:
        chain = self._registry.resolve(chain_name)
        decimals = await self._metadata.decimals_of(token_address, chain_name)
        path = SwapPath.build(chain.wrapped_native, token_address)

        amount_out = TokenAmount(raw_value=parse_units(token_amount, decimals), decimals=decimals)
        if amount_out.raw_value == 0:
            raise InvalidAmount("Token amount must be greater than zero", chain=chain_name)

        amount_in = await self._quoter.amounts_in(path, chain_name, amount_out)
        fee = await self._fees.apply_fee(amount_in, chain_name)
        deadline = self._deadline()

        encoded = self._encoder.encode(
            SWAP_SIGNATURE,
            [amount_out.raw_value, path.as_list(), user_address, deadline],
        )

        params = SwapTransactionParams(
            proxy_address=checksum_address(chain.proxy_address),
            router_address=checksum_address(chain.router_address),
            amount_in_with_fee=str(fee.adjusted),
            gas_limit=self._gas_limit,
            is_contract_creation=False,
            calldata=encoded.to_hex(),
        )
        quote = Quote(amount_in=amount_in, amount_out_min=amount_out, deadline=deadline)

        self._logger.info(
            "Prepared enforcement swap on %s: amount_out=%d amount_in=%d fee=%d deadline=%d",
            chain_name,
            amount_out.raw_value,
            amount_in.raw_value,
            fee.fee,
            deadline,
        )
        return PreparedSwap(
            chain=chain,
            path=path,
            decimals=decimals,
            quote=quote,
            fee=fee,
            params=params,
        )

    async def prepare_swap(
        self,
        chain_name: str,
        token_address: str,
        token_amount: str,
        user_address: str,
    ) -> SwapTransactionParams:
        try:
            prepared = await self.build(chain_name, token_address, token_amount, user_address)
        except EnforcementError as exc:
            self._logger.warning(
                "Swap preparation failed on %s (%s): %s", chain_name, exc.kind, exc.message
            )
            raise SwapPreparationFailed() from exc
        except Exception as exc:
            self._logger.exception("Unexpected error preparing swap on %s", chain_name)
            raise SwapPreparationFailed() from exc
        return prepared.params


__all__ = ['PreparedSwap', 'SwapQuoteBuilder']
