"""
Enforcement Swap Preparation

Builds the L1 enforcement parameters for an ETH → token swap on an OP-stack L2:
- ChainRegistry: router/proxy contracts and fee rates per chain
- TokenMetadataResolver: token decimals
- AmmQuoter: reverse constant-product quoting
- FeeCalculator: per-chain surcharge
- CalldataEncoder: router calldata
- SwapQuoteBuilder: the single entry point

Usage:
    from uncensored_l2.services.swap_builder import get_swap_builder

    builder = get_swap_builder()
    params = await builder.prepare_swap("base", token, "10", recipient)
"""

from .amounts import format_units, parse_units
from .builder import PreparedSwap, SwapQuoteBuilder
from .calldata import CalldataEncoder, canonical_signature, encode, function_selector
from .chain_registry import ChainRegistry
from .constants import SUPPORTED_CHAINS
from .errors import (
    AmountOverflow,
    ChainReadError,
    EncodingError,
    EnforcementError,
    ErrorCategory,
    InsufficientLiquidity,
    InvalidAmount,
    InvalidPath,
    MetadataUnavailable,
    ReservesUnavailable,
    SwapPreparationFailed,
    UnsupportedChain,
)
from .fees import FeeCalculator, FeeRateSource, RegistryFeeRateSource, apply_fee_rate
from .metadata import TokenMetadataResolver
from .models import (
    ChainConfig,
    EncodedCall,
    FeeAdjustedAmount,
    Quote,
    SwapPath,
    SwapTransactionParams,
    TokenAmount,
)
from .quoter import AmmQuoter, get_amount_in, get_amounts_in

__all__ = [
    # Pipeline
    "SwapQuoteBuilder",
    "PreparedSwap",
    "ChainRegistry",
    "TokenMetadataResolver",
    "AmmQuoter",
    "FeeCalculator",
    "FeeRateSource",
    "RegistryFeeRateSource",
    "CalldataEncoder",
    "SUPPORTED_CHAINS",
    # Pure helpers
    "parse_units",
    "format_units",
    "get_amount_in",
    "get_amounts_in",
    "apply_fee_rate",
    "encode",
    "canonical_signature",
    "function_selector",
    # Models
    "ChainConfig",
    "TokenAmount",
    "SwapPath",
    "Quote",
    "FeeAdjustedAmount",
    "EncodedCall",
    "SwapTransactionParams",
    # Errors
    "ErrorCategory",
    "EnforcementError",
    "UnsupportedChain",
    "MetadataUnavailable",
    "ReservesUnavailable",
    "ChainReadError",
    "InvalidPath",
    "InsufficientLiquidity",
    "InvalidAmount",
    "AmountOverflow",
    "EncodingError",
    "SwapPreparationFailed",
]
