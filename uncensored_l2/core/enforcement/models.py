"""Typed models used by the enforcement swap pipeline."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, List, NamedTuple, Tuple

from eth_utils import is_address, is_checksum_address, to_checksum_address

from .constants import MAX_DECIMALS, MAX_UINT256
from .errors import AmountOverflow, InvalidAmount, InvalidPath

_EVM_ADDRESS_RE = re.compile(r"0x[a-fA-F0-9]{40}")


def is_evm_address(value: Any) -> bool:
    """Return True for a 0x-prefixed 20-byte hex address with a valid (or absent) checksum."""

    if not isinstance(value, str) or not _EVM_ADDRESS_RE.fullmatch(value) or not is_address(value):
        return False
    body = value[2:]
    if body == body.lower() or body == body.upper():
        return True
    return is_checksum_address(value)


def normalize_address(value: str) -> str:
    """Lowercase form used for comparisons and calldata words."""

    return value.lower()


def checksum_address(value: str) -> str:
    return to_checksum_address(value)


@dataclass(frozen=True)
class ChainConfig:
    """Contracts and endpoints for one supported network."""

    name: str
    chain_id: int
    router_address: str
    proxy_address: str
    fee_rate_per_mille: int
    rpc_url: str
    wrapped_native: str
    display_name: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            "chain": self.name,
            "name": self.display_name or self.name,
            "chain_id": self.chain_id,
            "router_address": checksum_address(self.router_address),
            "proxy_address": checksum_address(self.proxy_address),
            "wrapped_native": checksum_address(self.wrapped_native),
            "fee_rate_per_mille": self.fee_rate_per_mille,
        }


@dataclass(frozen=True)
class TokenAmount:
    """A token quantity in its smallest unit."""

    raw_value: int
    decimals: int

    def __post_init__(self) -> None:
        if isinstance(self.raw_value, bool) or not isinstance(self.raw_value, int):
            raise InvalidAmount(f"Token amount must be an integer, got {type(self.raw_value).__name__}")
        if self.raw_value < 0:
            raise InvalidAmount("Token amount must be non-negative")
        if self.raw_value > MAX_UINT256:
            raise AmountOverflow(self.raw_value)
        if not 0 <= self.decimals <= MAX_DECIMALS:
            raise InvalidAmount(f"Decimals out of range: {self.decimals}")

    def __str__(self) -> str:
        return str(self.raw_value)


@dataclass(frozen=True)
class SwapPath:
    """Two-hop path from the wrapped native asset to the target token."""

    hops: Tuple[str, ...]

    def __post_init__(self) -> None:
        if len(self.hops) != 2:
            raise InvalidPath(
                f"Swap path must contain exactly 2 addresses, got {len(self.hops)}",
                details={"length": len(self.hops)},
            )
        for hop in self.hops:
            if not is_evm_address(hop):
                raise InvalidPath(f"Invalid address in swap path: {hop!r}")
        if normalize_address(self.hops[0]) == normalize_address(self.hops[1]):
            raise InvalidPath("Swap path cannot route a token to itself")

    @classmethod
    def build(cls, wrapped_native: str, token: str) -> "SwapPath":
        return cls(hops=(wrapped_native, token))

    @property
    def token_in(self) -> str:
        return self.hops[0]

    @property
    def token_out(self) -> str:
        return self.hops[-1]

    def as_list(self) -> List[str]:
        return list(self.hops)

    def __len__(self) -> int:
        return len(self.hops)


@dataclass(frozen=True)
class Quote:
    amount_in: TokenAmount
    amount_out_min: TokenAmount
    deadline: int


@dataclass(frozen=True)
class FeeAdjustedAmount:
    """Quoted input plus the chain surcharge and a one-unit rounding guard."""

    amount_in: int
    fee: int
    fee_rate_per_mille: int

    @property
    def adjusted(self) -> int:
        return self.amount_in + self.fee + 1

    def __str__(self) -> str:
        return str(self.adjusted)


@dataclass(frozen=True)
class EncodedCall:
    """Function selector plus ABI-encoded arguments."""

    selector: bytes
    argument_bytes: bytes

    @property
    def data(self) -> bytes:
        return self.selector + self.argument_bytes

    def to_hex(self) -> str:
        return "0x" + self.data.hex()


class SwapTransactionParams(NamedTuple):
    """Parameters for the L1 enforcement deposit, in submission order."""

    proxy_address: str
    router_address: str
    amount_in_with_fee: str
    gas_limit: int
    is_contract_creation: bool
    calldata: str

    def as_list(self) -> List[Any]:
        return list(self)


__all__ = [
    "ChainConfig",
    "TokenAmount",
    "SwapPath",
    "Quote",
    "FeeAdjustedAmount",
    "EncodedCall",
    "SwapTransactionParams",
    "is_evm_address",
    "normalize_address",
    "checksum_address",
]
