import logging
from typing import Any, Dict, Optional, Tuple, Type

import httpx

from ..config import settings
from ..core.enforcement.calldata import encode
from ..core.enforcement.chain_registry import ChainRegistry
from ..core.enforcement.constants import MAX_DECIMALS, ZERO_ADDRESS
from ..core.enforcement.errors import (
    ChainReadError,
    InsufficientLiquidity,
    MetadataUnavailable,
    ReservesUnavailable,
)
from ..core.enforcement.models import is_evm_address, normalize_address
from .base import ChainReadProvider

logger = logging.getLogger(__name__)

WORD_HEX = 64


def _words(result: str, count: int, error_cls: Type[ChainReadError], what: str) -> list:
    """Split an ``eth_call`` hex result into ``count`` integer words."""
    body = result[2:] if isinstance(result, str) and result.startswith("0x") else ""
    if len(body) < WORD_HEX * count:
        raise error_cls(f"Empty or short result for {what}", details={"result": result})
    try:
        return [int(body[i * WORD_HEX:(i + 1) * WORD_HEX], 16) for i in range(count)]
    except ValueError as exc:
        raise error_cls(f"Malformed result for {what}", details={"result": result}) from exc


class JsonRpcChainReader(ChainReadProvider):
    """Reads token decimals and V2 pair reserves through plain ``eth_call``."""

    name = "jsonrpc"

    def __init__(
        self,
        registry: ChainRegistry,
        *,
        client: Optional[httpx.AsyncClient] = None,
        timeout_s: Optional[int] = None,
    ):
        self.registry = registry
        self.timeout_s = timeout_s or settings.request_timeout_seconds
        self._client = client
        self._request_id = 0

    async def ready(self) -> bool:
        return all(config.rpc_url for config in self.registry.configs.values())

    async def health_check(self) -> Dict[str, Any]:
        if not await self.ready():
            return {"status": "unavailable", "reason": "RPC URL missing for one or more chains"}
        return {"status": "healthy", "chains": self.registry.supported_chains()}

    async def _post(self, url: str, payload: Dict[str, Any]) -> httpx.Response:
        if self._client is not None:
            return await self._client.post(url, json=payload, timeout=self.timeout_s)
        async with httpx.AsyncClient() as client:
            return await client.post(
                url,
                json=payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout_s,
            )

    async def eth_call(
        self,
        chain: str,
        to: str,
        data: str,
        *,
        error_cls: Type[ChainReadError] = ChainReadError,
    ) -> str:
        config = self.registry.resolve(chain)
        self._request_id += 1
        payload = {
            "jsonrpc": "2.0",
            "method": "eth_call",
            "params": [{"to": to, "data": data}, "latest"],
            "id": self._request_id,
        }

        try:
            response = await self._post(config.rpc_url, payload)
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("eth_call to %s on %s failed: %s", to, chain, exc)
            raise error_cls(f"RPC request failed on {chain}: {exc}", chain=chain) from exc

        if "error" in body:
            raise error_cls(
                f"RPC error on {chain}: {body['error']}",
                chain=chain,
                details={"error": body["error"], "to": to},
            )
        return body.get("result", "0x")

    async def get_decimals(self, chain: str, token_address: str) -> int:
        if not is_evm_address(token_address):
            raise MetadataUnavailable(f"Not a token address: {token_address!r}", chain=chain)

        result = await self.eth_call(
            chain,
            token_address,
            encode("decimals()", []).to_hex(),
            error_cls=MetadataUnavailable,
        )
        (decimals,) = _words(result, 1, MetadataUnavailable, "decimals()")
        if decimals > MAX_DECIMALS:
            raise MetadataUnavailable(f"decimals() returned {decimals}", chain=chain)
        return decimals

    async def get_factory(self, chain: str) -> str:
        router = self.registry.resolve(chain).router_address
        result = await self.eth_call(
            chain, router, encode("factory()", []).to_hex(), error_cls=ReservesUnavailable
        )
        (factory,) = _words(result, 1, ReservesUnavailable, "factory()")
        return "0x" + format(factory, "040x")

    async def get_pair(self, chain: str, token_a: str, token_b: str) -> str:
        factory = await self.get_factory(chain)
        result = await self.eth_call(
            chain,
            factory,
            encode("getPair(address,address)", [token_a, token_b]).to_hex(),
            error_cls=ReservesUnavailable,
        )
        (pair,) = _words(result, 1, ReservesUnavailable, "getPair()")
        return "0x" + format(pair, "040x")

    async def get_reserves(self, chain: str, token_a: str, token_b: str) -> Tuple[int, int]:
        pair = await self.get_pair(chain, token_a, token_b)
        if pair == ZERO_ADDRESS:
            raise InsufficientLiquidity(
                "No liquidity pool exists for this token",
                chain=chain,
                details={"token_a": token_a, "token_b": token_b},
            )

        result = await self.eth_call(
            chain, pair, encode("getReserves()", []).to_hex(), error_cls=ReservesUnavailable
        )
        reserve0, reserve1, _ = _words(result, 3, ReservesUnavailable, "getReserves()")

        # Pairs store reserves by sorted token address.
        if normalize_address(token_a) < normalize_address(token_b):
            return reserve0, reserve1
        return reserve1, reserve0
