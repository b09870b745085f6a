"""Token decimals lookup."""

from __future__ import annotations

import logging
from typing import Optional

from ...providers.base import ChainReadProvider
from .constants import MAX_DECIMALS
from .errors import ChainReadError, EnforcementError, MetadataUnavailable


class TokenMetadataResolver:
    """Reads a token's decimal precision with a single, unretried chain read."""

    def __init__(self, provider: ChainReadProvider, *, logger: Optional[logging.Logger] = None) -> None:
        self._provider = provider
        self._logger = logger or logging.getLogger(__name__)

    async def decimals_of(self, token_address: str, chain_name: str) -> int:
        try:
            decimals = await self._provider.get_decimals(chain_name, token_address)
        except MetadataUnavailable:
            raise
        except ChainReadError as exc:
            raise MetadataUnavailable(exc.message, chain=chain_name, details=exc.details) from exc
        except EnforcementError:
            raise
        except Exception as exc:
            self._logger.warning("decimals() read failed for %s on %s: %s", token_address, chain_name, exc)
            raise MetadataUnavailable(
                f"Could not read decimals for {token_address}",
                chain=chain_name,
            ) from exc

        if isinstance(decimals, bool) or not isinstance(decimals, int) or not 0 <= decimals <= MAX_DECIMALS:
            raise MetadataUnavailable(
                f"Token reported invalid decimals: {decimals!r}",
                chain=chain_name,
                details={"token": token_address},
            )
        return decimals


__all__ = ['TokenMetadataResolver']
