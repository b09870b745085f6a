"""
Error kinds raised while preparing an enforcement swap.

Every internal failure keeps its own class so callers and tests can tell
them apart. The public entry point collapses all of them into
``SwapPreparationFailed``.
"""

from enum import Enum
from typing import Any, Dict, Optional


class ErrorCategory(str, Enum):
    """Categories of preparation errors."""

    VALIDATION = "validation"     # Caller supplied bad input
    PROVIDER = "provider"         # Chain read failed
    LIQUIDITY = "liquidity"       # Pool cannot fill the request
    ENCODING = "encoding"         # Calldata could not be built
    UNKNOWN = "unknown"


class EnforcementError(Exception):
    """Base class for all swap preparation errors."""

    category: ErrorCategory = ErrorCategory.UNKNOWN

    def __init__(
        self,
        message: str,
        *,
        chain: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.chain = chain
        self.details: Dict[str, Any] = details or {}

    @property
    def kind(self) -> str:
        return type(self).__name__


class UnsupportedChain(EnforcementError):
    """Chain name is not one of the supported networks."""

    category = ErrorCategory.VALIDATION

    def __init__(self, chain: str, supported: Optional[list] = None):
        super().__init__(
            f"Unsupported chain '{chain}'",
            chain=chain,
            details={"supported": list(supported or [])},
        )


class InvalidPath(EnforcementError):
    """Swap path is not exactly [wrapped native, token]."""

    category = ErrorCategory.VALIDATION


class InvalidAmount(EnforcementError):
    """Token amount is not a usable non-negative decimal."""

    category = ErrorCategory.VALIDATION


class AmountOverflow(InvalidAmount):
    """A computed amount does not fit in uint256."""

    def __init__(self, value: int, *, label: str = "amount", chain: Optional[str] = None):
        super().__init__(
            f"{label} exceeds uint256",
            chain=chain,
            details={"label": label, "bits": value.bit_length()},
        )


class InsufficientLiquidity(EnforcementError):
    """Pool reserves cannot deliver the requested output."""

    category = ErrorCategory.LIQUIDITY


class EncodingError(EnforcementError):
    """Arguments could not be ABI-encoded."""

    category = ErrorCategory.ENCODING


class ChainReadError(EnforcementError):
    """A read against the chain failed."""

    category = ErrorCategory.PROVIDER


class MetadataUnavailable(ChainReadError):
    """Token decimals could not be read."""


class ReservesUnavailable(ChainReadError):
    """Pool reserves could not be read."""


class SwapPreparationFailed(Exception):
    """Single user-facing failure returned by the tool boundary."""

    DEFAULT_MESSAGE = "Failed to prepare enforcement transaction parameters for the swap."

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
        self.message = message


__all__ = [
    "ErrorCategory",
    "EnforcementError",
    "UnsupportedChain",
    "InvalidPath",
    "InvalidAmount",
    "AmountOverflow",
    "InsufficientLiquidity",
    "EncodingError",
    "ChainReadError",
    "MetadataUnavailable",
    "ReservesUnavailable",
    "SwapPreparationFailed",
]
