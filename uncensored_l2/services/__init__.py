"""Service layer helpers"""

from .swap_builder import get_chain_registry, get_swap_builder, reset_swap_builder

__all__ = [
    "get_chain_registry",
    "get_swap_builder",
    "reset_swap_builder",
]
