"""Process-wide wiring for the enforcement swap builder."""

from __future__ import annotations

from typing import Optional

from ..config import settings
from ..core.enforcement.builder import SwapQuoteBuilder
from ..core.enforcement.chain_registry import ChainRegistry
from ..providers.base import ChainReadProvider
from ..providers.rpc import JsonRpcChainReader

# Module-level singletons for convenience
_default_registry: Optional[ChainRegistry] = None
_default_builder: Optional[SwapQuoteBuilder] = None


def get_chain_registry() -> ChainRegistry:
    """Get or create the registry built from settings at first use."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ChainRegistry.from_settings(settings)
    return _default_registry


def get_swap_builder(provider: Optional[ChainReadProvider] = None) -> SwapQuoteBuilder:
    """
    Get or create the default SwapQuoteBuilder.

    Args:
        provider: Optional chain-read provider; replaces the cached builder when given.

    Returns:
        SwapQuoteBuilder instance.
    """
    global _default_builder
    if _default_builder is None or provider is not None:
        registry = get_chain_registry()
        _default_builder = SwapQuoteBuilder(
            registry,
            provider or JsonRpcChainReader(registry),
            deadline_seconds=settings.deadline_seconds,
            gas_limit=settings.enforcement_gas_limit,
        )
    return _default_builder


def reset_swap_builder() -> None:
    """Drop cached instances so the next call rebuilds from current settings."""
    global _default_registry, _default_builder
    _default_registry = None
    _default_builder = None


__all__ = ["get_chain_registry", "get_swap_builder", "reset_swap_builder"]
