"""Static registry of enforcement contracts per supported chain."""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from .constants import CHAIN_METADATA, UNVERIFIED_CONTRACT_CHAINS, WRAPPED_NATIVE_ADDRESS
from .errors import UnsupportedChain
from .models import ChainConfig, is_evm_address, normalize_address


class ChainRegistry:
    """Immutable chain name → ChainConfig lookup.

    Built once at process start (usually via ``from_settings``) and shared by
    reference; nothing mutates it afterwards.

    Usage:
        registry = ChainRegistry.from_settings(settings)
        config = registry.resolve("base")
    """

    def __init__(self, configs: Mapping[str, ChainConfig]) -> None:
        self._configs: Mapping[str, ChainConfig] = MappingProxyType(dict(configs))

    @classmethod
    def from_settings(cls, settings, *, logger: Optional[logging.Logger] = None) -> "ChainRegistry":
        """Merge the compiled-in chain table with per-chain overrides from settings."""

        log = logger or logging.getLogger(__name__)
        for source in (
            settings.rpc_urls,
            settings.router_addresses,
            settings.proxy_addresses,
            settings.fee_rates_per_mille,
        ):
            unknown = set(source) - set(CHAIN_METADATA)
            if unknown:
                log.warning("Ignoring overrides for unknown chains: %s", sorted(unknown))

        configs: Dict[str, ChainConfig] = {}
        for name, meta in CHAIN_METADATA.items():
            router = settings.router_addresses.get(name, meta['router'])
            proxy = settings.proxy_addresses.get(name, meta['proxy'])
            for label, address in (('router', router), ('proxy', proxy)):
                if not is_evm_address(address):
                    raise ValueError(f"Invalid {label} address configured for {name}: {address!r}")

            if name in UNVERIFIED_CONTRACT_CHAINS:
                defaults = [
                    label for label, source in (('router', settings.router_addresses), ('proxy', settings.proxy_addresses))
                    if name not in source
                ]
                if defaults:
                    log.warning("Using unverified %s address(es) for %s; set an override before mainnet use", '/'.join(defaults), name)

            fee_rate = int(settings.fee_rates_per_mille.get(name, settings.default_fee_rate_per_mille))
            if fee_rate < 0:
                raise ValueError(f"Fee rate for {name} must be non-negative")

            configs[name] = ChainConfig(
                name=name,
                chain_id=meta['chain_id'],
                router_address=normalize_address(router),
                proxy_address=normalize_address(proxy),
                fee_rate_per_mille=fee_rate,
                rpc_url=settings.rpc_urls.get(name, meta['rpc_url']),
                wrapped_native=WRAPPED_NATIVE_ADDRESS,
                display_name=meta['name'],
            )

        log.info("Chain registry loaded: %d chains", len(configs))
        return cls(configs)

    def resolve(self, chain_name: str) -> ChainConfig:
        config = self._configs.get(chain_name) if isinstance(chain_name, str) else None
        if config is None:
            raise UnsupportedChain(str(chain_name), supported=self.supported_chains())
        return config

    def is_supported(self, chain_name: str) -> bool:
        return chain_name in self._configs

    def supported_chains(self) -> List[str]:
        return list(self._configs.keys())

    def fee_rate(self, chain_name: str) -> int:
        return self.resolve(chain_name).fee_rate_per_mille

    @property
    def configs(self) -> Mapping[str, ChainConfig]:
        return self._configs


__all__ = ['ChainRegistry']
