"""
Contract calldata encoding.

Supports the static ABI types the router swap needs (``uintN``, ``intN``,
``address``, ``bool``) plus dynamic arrays of those types.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Any, List, Sequence, Tuple

from eth_utils import keccak

from .errors import EncodingError
from .models import EncodedCall, is_evm_address

WORD_SIZE = 32

_SIGNATURE_RE = re.compile(r"^\s*([A-Za-z_$][A-Za-z0-9_$]*)\s*\((.*)\)\s*$")
_DATA_LOCATIONS = {"calldata", "memory", "storage", "payable", "indexed"}
_INT_RE = re.compile(r"(u?int)([0-9]*)")
_UINT_TEXT_RE = re.compile(r"[0-9]+|0x[0-9a-fA-F]+")


def _strip_0x(value: str) -> str:
    return value[2:] if value.startswith("0x") else value


def _canonical_type(raw: str) -> str:
    base = raw.strip()
    array_suffix = ""
    while base.endswith("[]"):
        base = base[:-2].strip()
        array_suffix += "[]"

    match = _INT_RE.fullmatch(base)
    if match:
        prefix, bits = match.groups()
        if not bits:
            bits = "256"
        width = int(bits)
        if width % 8 != 0 or not 8 <= width <= 256:
            raise EncodingError(f"Invalid integer width: {raw}")
        base = f"{prefix}{width}"
    elif base not in {"address", "bool"}:
        raise EncodingError(f"Unsupported ABI type: {raw}")

    return base + array_suffix


@lru_cache(maxsize=64)
def canonical_signature(signature: str) -> Tuple[str, Tuple[str, ...]]:
    """Reduce a human-readable signature to ``name(type,...)`` and its types.

    ``swap(uint amountOutMin, address[] calldata path)`` becomes
    ``swap(uint256,address[])``.
    """

    match = _SIGNATURE_RE.match(signature or "")
    if not match:
        raise EncodingError(f"Malformed function signature: {signature!r}")
    name, params = match.groups()

    types: List[str] = []
    if params.strip():
        for param in params.split(","):
            tokens = [tok for tok in param.split() if tok not in _DATA_LOCATIONS]
            if not tokens:
                raise EncodingError(f"Empty parameter in signature: {signature!r}")
            types.append(_canonical_type(tokens[0]))

    return f"{name}({','.join(types)})", tuple(types)


def function_selector(signature: str) -> bytes:
    canonical, _ = canonical_signature(signature)
    return keccak(text=canonical)[:4]


def _encode_uint(value: Any, bits: int = 256) -> bytes:
    if isinstance(value, bool):
        raise EncodingError("Boolean passed where an unsigned integer was expected")
    if isinstance(value, str):
        if not _UINT_TEXT_RE.fullmatch(value):
            raise EncodingError(f"Invalid integer value: {value!r}")
        value = int(value, 16) if value.startswith("0x") else int(value)
    if not isinstance(value, int):
        raise EncodingError(f"Expected integer, got {type(value).__name__}")
    if value < 0:
        raise EncodingError("Value must be non-negative")
    if value >= 1 << bits:
        raise EncodingError(f"Value does not fit in uint{bits}")
    return value.to_bytes(WORD_SIZE, "big")


def _encode_int(value: Any, bits: int = 256) -> bytes:
    if isinstance(value, bool) or not isinstance(value, int):
        raise EncodingError(f"Expected integer, got {type(value).__name__}")
    bound = 1 << (bits - 1)
    if not -bound <= value < bound:
        raise EncodingError(f"Value does not fit in int{bits}")
    return value.to_bytes(WORD_SIZE, "big", signed=True)


def _encode_address(address: Any) -> bytes:
    if isinstance(address, (bytes, bytearray)):
        if len(address) != 20:
            raise EncodingError(f"Address must be 20 bytes, got {len(address)}")
        return bytes(address).rjust(WORD_SIZE, b"\x00")
    if not is_evm_address(address):
        raise EncodingError(f"Invalid address: {address!r}")
    return bytes.fromhex(_strip_0x(address).lower()).rjust(WORD_SIZE, b"\x00")


def _encode_bool(value: Any) -> bytes:
    if not isinstance(value, bool):
        raise EncodingError(f"Expected bool, got {type(value).__name__}")
    return _encode_uint(int(value))


def _encode_static(abi_type: str, value: Any) -> bytes:
    if abi_type == "address":
        return _encode_address(value)
    if abi_type == "bool":
        return _encode_bool(value)
    if abi_type.startswith("uint"):
        return _encode_uint(value, int(abi_type[4:]))
    if abi_type.startswith("int"):
        return _encode_int(value, int(abi_type[3:]))
    raise EncodingError(f"Unsupported ABI type: {abi_type}")


def _is_dynamic(abi_type: str) -> bool:
    return abi_type.endswith("[]")


def _encode_array(abi_type: str, values: Any) -> bytes:
    element_type = abi_type[:-2]
    if _is_dynamic(element_type):
        raise EncodingError(f"Nested dynamic arrays are not supported: {abi_type}")
    if isinstance(values, (str, bytes)) or not isinstance(values, Sequence):
        raise EncodingError(f"Expected a sequence for {abi_type}")
    body = b"".join(_encode_static(element_type, item) for item in values)
    return _encode_uint(len(values)) + body


def encode_arguments(types: Sequence[str], args: Sequence[Any]) -> bytes:
    """ABI-encode ``args`` as a tuple of ``types`` (head words, then tails)."""

    if len(types) != len(args):
        raise EncodingError(f"Expected {len(types)} arguments, got {len(args)}")

    head_size = WORD_SIZE * len(types)
    heads: List[bytes] = []
    tails: List[bytes] = []
    tail_offset = head_size

    for abi_type, value in zip(types, args):
        if _is_dynamic(abi_type):
            tail = _encode_array(abi_type, value)
            heads.append(_encode_uint(tail_offset))
            tails.append(tail)
            tail_offset += len(tail)
        else:
            heads.append(_encode_static(abi_type, value))

    return b"".join(heads) + b"".join(tails)


def encode(signature: str, args: Sequence[Any]) -> EncodedCall:
    """
    Build the calldata for ``signature`` called with ``args``.

    Args:
        signature: Canonical or human-readable function signature
        args: Ordered argument values (ints or decimal strings for integers,
            0x-prefixed hex strings for addresses)

    Returns:
        EncodedCall with the 4-byte selector and the argument bytes

    Raises:
        EncodingError: If the signature or any argument is malformed
    """
    _, types = canonical_signature(signature)
    return EncodedCall(
        selector=function_selector(signature),
        argument_bytes=encode_arguments(types, list(args)),
    )


class CalldataEncoder:
    """Thin object wrapper so the builder can take an encoder by injection."""

    def encode(self, signature: str, args: Sequence[Any]) -> EncodedCall:
        return encode(signature, args)


__all__ = [
    'CalldataEncoder',
    'canonical_signature',
    'encode',
    'encode_arguments',
    'function_selector',
]
