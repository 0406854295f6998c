from __future__ import annotations

from collections.abc import Iterable

from eth_abi import decode as abi_decode

from v3_staker.core.constants.uniswap_v3_staker_abi import UNISWAP_V3_STAKER_ABI
from v3_staker.core.utils.calldata import (
    encode_function_call,
    function_selector,
    normalize_bytes,
)

MULTICALL_SELECTOR = function_selector(UNISWAP_V3_STAKER_ABI, "multicall")


def encode_multicall(calldatas: Iterable[bytes | str]) -> bytes:
    """Aggregate call payloads into one ``multicall(bytes[])`` payload.

    A single payload is returned unchanged since it needs no aggregation.
    """
    payloads = [normalize_bytes(c) for c in calldatas]
    if not payloads:
        raise ValueError("multicall requires at least one call")
    if len(payloads) == 1:
        return payloads[0]
    return encode_function_call(UNISWAP_V3_STAKER_ABI, "multicall", [payloads])


def decode_multicall(calldata: bytes | str) -> list[bytes]:
    raw = normalize_bytes(calldata)
    if raw[:4] != MULTICALL_SELECTOR:
        raise ValueError(f"Not a multicall payload: 0x{raw[:4].hex()}")
    (payloads,) = abi_decode(["bytes[]"], raw[4:])
    return [bytes(p) for p in payloads]
