"""Uniswap V3 pool identity.

The staker only needs a pool's address, so incentive keys accept anything
implementing :class:`PoolAddressProvider`. :class:`Pool` derives the address
the same way the factory deploys it (CREATE2 over the sorted token pair and
fee tier).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from eth_abi import encode as abi_encode
from eth_utils import keccak, to_checksum_address

from v3_staker.core.constants.contracts import POOL_INIT_CODE_HASH, UNISWAP_V3_FACTORY
from v3_staker.core.utils.calldata import require_uint


@runtime_checkable
class PoolAddressProvider(Protocol):
    def address(self) -> str: ...


def sort_tokens(token_a: str, token_b: str) -> tuple[str, str]:
    a = to_checksum_address(token_a)
    b = to_checksum_address(token_b)
    if int(a, 16) == int(b, 16):
        raise ValueError(f"Pool tokens must differ, got {a} twice")
    return (a, b) if int(a, 16) < int(b, 16) else (b, a)


def compute_pool_address(
    *,
    factory_address: str,
    token_a: str,
    token_b: str,
    fee: int,
    init_code_hash: bytes = POOL_INIT_CODE_HASH,
) -> str:
    token0, token1 = sort_tokens(token_a, token_b)
    salt = keccak(
        abi_encode(
            ["address", "address", "uint24"],
            [token0, token1, require_uint(fee, "fee")],
        )
    )
    factory = bytes.fromhex(to_checksum_address(factory_address)[2:])
    digest = keccak(b"\xff" + factory + salt + bytes(init_code_hash))
    return to_checksum_address(digest[12:])


@dataclass(frozen=True)
class Pool:
    """A pool keyed by its sorted token pair, so argument order is irrelevant."""

    token0: str
    token1: str
    fee: int
    factory_address: str = UNISWAP_V3_FACTORY
    init_code_hash: bytes = field(default=POOL_INIT_CODE_HASH, repr=False)

    def __post_init__(self) -> None:
        token0, token1 = sort_tokens(self.token0, self.token1)
        object.__setattr__(self, "token0", token0)
        object.__setattr__(self, "token1", token1)
        object.__setattr__(self, "fee", require_uint(self.fee, "fee"))
        object.__setattr__(
            self, "factory_address", to_checksum_address(self.factory_address)
        )

    def address(self) -> str:
        return compute_pool_address(
            factory_address=self.factory_address,
            token_a=self.token0,
            token_b=self.token1,
            fee=self.fee,
            init_code_hash=self.init_code_hash,
        )


@dataclass(frozen=True)
class PoolAddress:
    """An already-resolved pool address."""

    value: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", to_checksum_address(self.value))

    def address(self) -> str:
        return self.value
