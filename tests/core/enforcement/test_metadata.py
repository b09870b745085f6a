"""
Tests for token decimals resolution.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from uncensored_l2.core.enforcement import (
    ChainReadError,
    MetadataUnavailable,
    TokenMetadataResolver,
    UnsupportedChain,
)

TOKEN = "0x1111111111111111111111111111111111111111"


def make_provider(decimals=18, error=None):
    provider = MagicMock()
    provider.get_decimals = AsyncMock(return_value=decimals, side_effect=error)
    return provider


class TestTokenMetadataResolver:

    @pytest.mark.asyncio
    async def test_returns_decimals(self):
        provider = make_provider(6)
        resolver = TokenMetadataResolver(provider)

        assert await resolver.decimals_of(TOKEN, "base") == 6
        provider.get_decimals.assert_awaited_once_with("base", TOKEN)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("decimals", [0, 255])
    async def test_boundary_decimals(self, decimals):
        resolver = TokenMetadataResolver(make_provider(decimals))

        assert await resolver.decimals_of(TOKEN, "base") == decimals

    @pytest.mark.asyncio
    @pytest.mark.parametrize("decimals", [-1, 256, None, "18"])
    async def test_invalid_decimals(self, decimals):
        resolver = TokenMetadataResolver(make_provider(decimals))

        with pytest.raises(MetadataUnavailable):
            await resolver.decimals_of(TOKEN, "base")

    @pytest.mark.asyncio
    async def test_read_failure_is_not_retried(self):
        provider = make_provider(error=ChainReadError("rpc down"))
        resolver = TokenMetadataResolver(provider)

        with pytest.raises(MetadataUnavailable):
            await resolver.decimals_of(TOKEN, "base")
        assert provider.get_decimals.await_count == 1

    @pytest.mark.asyncio
    async def test_unexpected_error_is_wrapped(self):
        resolver = TokenMetadataResolver(make_provider(error=ConnectionError("reset")))

        with pytest.raises(MetadataUnavailable) as exc_info:
            await resolver.decimals_of(TOKEN, "base")
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_unsupported_chain_passes_through(self):
        resolver = TokenMetadataResolver(make_provider(error=UnsupportedChain("zora")))

        with pytest.raises(UnsupportedChain):
            await resolver.decimals_of(TOKEN, "zora")
