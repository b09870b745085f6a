import pytest
from pydantic import ValidationError

from uncensored_l2.config import Settings
from uncensored_l2.core.enforcement import ChainRegistry


def test_defaults_without_env(monkeypatch):
    """Enforcement defaults apply when nothing is configured."""

    monkeypatch.delenv("FEE_RATES", raising=False)
    monkeypatch.delenv("FEE_RATES_PER_MILLE", raising=False)

    settings = Settings(_env_file=None)

    assert settings.default_fee_rate_per_mille == 3
    assert settings.deadline_seconds == 172800
    assert settings.enforcement_gas_limit == 500000
    assert settings.fee_rates_per_mille == {}


def test_fee_rates_legacy_alias(monkeypatch):
    """Per-chain fee rates load from the short FEE_RATES variable."""

    monkeypatch.setenv("FEE_RATES", '{"base": 5}')

    settings = Settings(_env_file=None)

    assert settings.fee_rates_per_mille == {"base": 5}
    assert ChainRegistry.from_settings(settings).fee_rate("base") == 5


def test_address_overrides_from_env(monkeypatch):
    """JSON-encoded per-chain overrides are parsed from the environment."""

    router = "0x00000000000000000000000000000000000000AA"
    monkeypatch.setenv("ROUTER_ADDRESSES", f'{{"ink": "{router}"}}')
    monkeypatch.setenv("RPC_URLS", '{"ink": "https://ink.example"}')

    registry = ChainRegistry.from_settings(Settings(_env_file=None))

    assert registry.resolve("ink").router_address == router.lower()
    assert registry.resolve("ink").rpc_url == "https://ink.example"


def test_invalid_override_fails_fast():
    settings = Settings(_env_file=None, proxy_addresses={"base": "not-an-address"})

    with pytest.raises(ValueError):
        ChainRegistry.from_settings(settings)


def test_gas_limit_lower_bound():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, enforcement_gas_limit=1000)


def test_is_debug():
    assert Settings(_env_file=None, log_level="debug").is_debug
    assert not Settings(_env_file=None).is_debug
