"""
JsonRpcChainReader tests against a mocked JSON-RPC transport.
"""

import json

import httpx
import pytest

from uncensored_l2.config import Settings
from uncensored_l2.core.enforcement import (
    ChainRegistry,
    InsufficientLiquidity,
    MetadataUnavailable,
    ReservesUnavailable,
)
from uncensored_l2.core.enforcement.constants import WRAPPED_NATIVE_ADDRESS, ZERO_ADDRESS
from uncensored_l2.providers.rpc import JsonRpcChainReader

TOKEN = "0x1111111111111111111111111111111111111111"
FACTORY = "0x3333333333333333333333333333333333333333"
PAIR = "0x4444444444444444444444444444444444444444"
RPC_URL = "https://rpc.test/optimism"


def word(value) -> str:
    if isinstance(value, int):
        return format(value, "064x")
    return value[2:].rjust(64, "0")


def result(*words) -> dict:
    return {"result": "0x" + "".join(word(w) for w in words)}


@pytest.fixture
def registry():
    return ChainRegistry.from_settings(
        Settings(_env_file=None, rpc_urls={"optimism": RPC_URL})
    )


def make_reader(registry, responder):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        payload = json.loads(request.content)
        call = payload["params"][0]
        calls.append((str(request.url), call["to"], call["data"]))
        body = responder(call["to"], call["data"])
        if isinstance(body, httpx.Response):
            return body
        return httpx.Response(200, json={"jsonrpc": "2.0", "id": payload["id"], **body})

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return JsonRpcChainReader(registry, client=client), calls


def pool_responder(registry, *, pair=PAIR, reserves=(7, 9)):
    router = registry.resolve("optimism").router_address

    def respond(to, data):
        if to == router and data == "0xc45a0155":
            return result(FACTORY)
        if to == FACTORY and data.startswith("0xe6a43905"):
            return result(pair)
        if to == PAIR and data == "0x0902f1ac":
            return result(reserves[0], reserves[1], 1_700_000_000)
        raise AssertionError(f"unexpected call to {to} with {data}")

    return respond


class TestGetDecimals:

    @pytest.mark.asyncio
    async def test_reads_decimals(self, registry):
        reader, calls = make_reader(registry, lambda to, data: result(6))

        assert await reader.get_decimals("optimism", TOKEN) == 6
        assert calls == [(RPC_URL, TOKEN, "0x313ce567")]

    @pytest.mark.asyncio
    async def test_rpc_error(self, registry):
        reader, _ = make_reader(
            registry, lambda to, data: {"error": {"code": -32000, "message": "execution reverted"}}
        )

        with pytest.raises(MetadataUnavailable):
            await reader.get_decimals("optimism", TOKEN)

    @pytest.mark.asyncio
    async def test_empty_result_from_non_contract(self, registry):
        reader, _ = make_reader(registry, lambda to, data: {"result": "0x"})

        with pytest.raises(MetadataUnavailable):
            await reader.get_decimals("optimism", TOKEN)

    @pytest.mark.asyncio
    async def test_http_failure(self, registry):
        reader, _ = make_reader(registry, lambda to, data: httpx.Response(503, text="busy"))

        with pytest.raises(MetadataUnavailable):
            await reader.get_decimals("optimism", TOKEN)

    @pytest.mark.asyncio
    async def test_decimals_out_of_range(self, registry):
        reader, _ = make_reader(registry, lambda to, data: result(256))

        with pytest.raises(MetadataUnavailable):
            await reader.get_decimals("optimism", TOKEN)

    @pytest.mark.asyncio
    async def test_invalid_token_address_skips_rpc(self, registry):
        reader, calls = make_reader(registry, lambda to, data: result(18))

        with pytest.raises(MetadataUnavailable):
            await reader.get_decimals("optimism", "0x1234")
        assert calls == []


class TestGetReserves:

    @pytest.mark.asyncio
    async def test_orders_reserves_by_request(self, registry):
        # TOKEN sorts below WETH so it is token0 of the pair.
        reader, calls = make_reader(registry, pool_responder(registry, reserves=(7, 9)))

        assert await reader.get_reserves("optimism", WRAPPED_NATIVE_ADDRESS, TOKEN) == (9, 7)
        assert await reader.get_reserves("optimism", TOKEN, WRAPPED_NATIVE_ADDRESS) == (7, 9)
        assert [c[2][:10] for c in calls[:3]] == ["0xc45a0155", "0xe6a43905", "0x0902f1ac"]

    @pytest.mark.asyncio
    async def test_get_pair_encodes_both_tokens(self, registry):
        reader, calls = make_reader(registry, pool_responder(registry))

        await reader.get_pair("optimism", WRAPPED_NATIVE_ADDRESS, TOKEN)

        assert calls[1][2] == "0xe6a43905" + word(WRAPPED_NATIVE_ADDRESS) + word(TOKEN)

    @pytest.mark.asyncio
    async def test_missing_pool(self, registry):
        reader, _ = make_reader(registry, pool_responder(registry, pair=ZERO_ADDRESS))

        with pytest.raises(InsufficientLiquidity):
            await reader.get_reserves("optimism", WRAPPED_NATIVE_ADDRESS, TOKEN)

    @pytest.mark.asyncio
    async def test_short_reserves_result(self, registry):
        respond = pool_responder(registry)

        def truncated(to, data):
            if data == "0x0902f1ac":
                return result(1)
            return respond(to, data)

        reader, _ = make_reader(registry, truncated)

        with pytest.raises(ReservesUnavailable):
            await reader.get_reserves("optimism", WRAPPED_NATIVE_ADDRESS, TOKEN)


class TestHealth:

    @pytest.mark.asyncio
    async def test_healthy_when_all_chains_have_rpc(self, registry):
        reader = JsonRpcChainReader(registry)

        status = await reader.health_check()

        assert status["status"] == "healthy"
        assert "optimism" in status["chains"]
