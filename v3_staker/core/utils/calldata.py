"""Offline ABI call encoding.

Mirrors ``contract.encode_abi(fn_name, args)`` without needing a web3
instance: the canonical signature and argument types are read from a minimal
ABI list, so the same constants serve both encoding and decoding.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from eth_abi import decode as abi_decode
from eth_abi import encode as abi_encode
from eth_utils import function_signature_to_4byte_selector
from hexbytes import HexBytes


@dataclass(frozen=True)
class MethodParameters:
    """Calldata plus the native value to attach when sending it."""

    calldata: bytes
    value: int = 0

    def to_hex(self) -> dict[str, str]:
        return {"calldata": "0x" + self.calldata.hex(), "value": hex(self.value)}


def abi_type(param: dict[str, Any]) -> str:
    kind = str(param["type"])
    if not kind.startswith("tuple"):
        return kind
    inner = ",".join(abi_type(c) for c in param.get("components", []))
    return f"({inner}){kind[len('tuple'):]}"


def _function_abi(abi: Sequence[dict[str, Any]], fn_name: str) -> dict[str, Any]:
    for item in abi:
        if item.get("type") == "function" and item.get("name") == fn_name:
            return item
    raise ValueError(f"Function '{fn_name}' not found in ABI")


def input_types(abi: Sequence[dict[str, Any]], fn_name: str) -> list[str]:
    return [abi_type(p) for p in _function_abi(abi, fn_name).get("inputs", [])]


def function_selector(abi: Sequence[dict[str, Any]], fn_name: str) -> bytes:
    signature = f"{fn_name}({','.join(input_types(abi, fn_name))})"
    return function_signature_to_4byte_selector(signature)


def encode_function_call(
    abi: Sequence[dict[str, Any]], fn_name: str, args: Sequence[Any]
) -> bytes:
    types = input_types(abi, fn_name)
    if len(types) != len(args):
        raise ValueError(
            f"{fn_name} expects {len(types)} arguments, got {len(args)}"
        )
    return function_selector(abi, fn_name) + abi_encode(types, list(args))


def decode_function_call(
    abi: Sequence[dict[str, Any]], calldata: bytes | str
) -> tuple[str, tuple[Any, ...]]:
    """Return ``(fn_name, args)`` for calldata produced against ``abi``."""
    raw = normalize_bytes(calldata)
    selector = raw[:4]
    for item in abi:
        if item.get("type") != "function":
            continue
        name = str(item["name"])
        if function_selector(abi, name) == selector:
            return name, tuple(abi_decode(input_types(abi, name), raw[4:]))
    raise ValueError(f"Unknown selector 0x{selector.hex()}")


def require_uint(value: Any, name: str) -> int:
    # bool is an int subclass but never a meaningful uint argument
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}: {value!r}")
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


def normalize_bytes(data: bytes | str | None) -> bytes:
    if data is None:
        return b""
    if isinstance(data, HexBytes):
        return bytes(data)
    if isinstance(data, (bytes, bytearray)):
        return bytes(data)
    if isinstance(data, str):
        # HexBytes accepts both "0x"-prefixed and bare hex strings
        return bytes(HexBytes(data))
    raise TypeError("Unsupported calldata type")
