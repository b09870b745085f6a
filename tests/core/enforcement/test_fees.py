"""
Tests for the per-chain fee surcharge.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from uncensored_l2.config import Settings
from uncensored_l2.core.enforcement import (
    AmountOverflow,
    ChainRegistry,
    FeeCalculator,
    InvalidAmount,
    RegistryFeeRateSource,
    TokenAmount,
    UnsupportedChain,
    apply_fee_rate,
)
from uncensored_l2.core.enforcement.constants import MAX_UINT256


class TestApplyFeeRate:

    def test_half_percent(self):
        result = apply_fee_rate(100_000, 5)

        assert result.fee == 500
        assert result.adjusted == 100_501

    def test_zero_rate_still_adds_rounding_unit(self):
        result = apply_fee_rate(100_000, 0)

        assert result.fee == 0
        assert result.adjusted == 100_001
        assert result.adjusted != result.amount_in

    def test_fee_is_floored(self):
        # 999 * 3 / 1000 = 2.997
        assert apply_fee_rate(999, 3).fee == 2

    @pytest.mark.parametrize("amount_in,rate", [(0, 3), (1, 0), (1, 1000), (10**30, 2500), (12_345, 999)])
    def test_adjusted_always_exceeds_input(self, amount_in, rate):
        result = apply_fee_rate(amount_in, rate)

        assert result.adjusted == amount_in + amount_in * rate // 1000 + 1
        assert result.adjusted > amount_in

    def test_rate_above_one_thousand_is_additive(self):
        assert apply_fee_rate(1_000, 2_000).adjusted == 3_001

    def test_negative_rate_rejected(self):
        with pytest.raises(InvalidAmount):
            apply_fee_rate(1_000, -1)

    def test_overflow_detected(self):
        with pytest.raises(AmountOverflow):
            apply_fee_rate(MAX_UINT256, 0)

    def test_str_is_decimal_adjusted_value(self):
        assert str(apply_fee_rate(100_000, 5)) == "100501"


class TestFeeCalculator:

    @pytest.mark.asyncio
    async def test_uses_registry_rate(self):
        registry = ChainRegistry.from_settings(
            Settings(_env_file=None, fee_rates_per_mille={"optimism": 5})
        )
        calculator = FeeCalculator(RegistryFeeRateSource(registry))

        result = await calculator.apply_fee(TokenAmount(100_000, 18), "optimism")

        assert result.adjusted == 100_501
        assert result.fee_rate_per_mille == 5

    @pytest.mark.asyncio
    async def test_dynamic_rate_source(self):
        source = MagicMock()
        source.get_fee_rate = AsyncMock(return_value=10)
        calculator = FeeCalculator(source)

        result = await calculator.apply_fee(TokenAmount(1_000, 18), "ink")

        assert result.adjusted == 1_011
        source.get_fee_rate.assert_awaited_once_with("ink")

    @pytest.mark.asyncio
    async def test_unknown_chain(self):
        registry = ChainRegistry.from_settings(Settings(_env_file=None))
        calculator = FeeCalculator(RegistryFeeRateSource(registry))

        with pytest.raises(UnsupportedChain):
            await calculator.apply_fee(TokenAmount(1_000, 18), "polygon")
