"""UniswapV3Staker calldata builders.

A position can be staked in several incentive programs at once. Rewards can
only be claimed for a program after the position is unstaked from it, so every
workflow emits, per incentive key and in caller order: ``unstakeToken`` then
``claimReward``, optionally followed by ``stakeToken`` to resume the program.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from eth_abi import encode as abi_encode
from eth_utils import to_checksum_address
from loguru import logger

from v3_staker.core.constants.uniswap_v3_staker_abi import (
    INCENTIVE_KEY_COMPONENTS,
    UNISWAP_V3_STAKER_ABI,
)
from v3_staker.core.utils.calldata import (
    MethodParameters,
    abi_type,
    encode_function_call,
    normalize_bytes,
    require_uint,
)
from v3_staker.core.utils.multicall import encode_multicall
from v3_staker.core.utils.pool import PoolAddressProvider

IncentiveKeyTuple = tuple[str, str, int, int, str]

INCENTIVE_KEY_TYPE = abi_type({"type": "tuple", "components": INCENTIVE_KEY_COMPONENTS})


class EmptyIncentiveKeyListError(ValueError):
    kind = "EmptyIncentiveKeyList"

    def __init__(self, operation: str):
        self.operation = operation
        super().__init__(f"{operation} requires at least one incentive key")


@dataclass(frozen=True)
class IncentiveKey:
    """Identifies a unique staking program."""

    # Token rewarded for participating in the program.
    reward_token: str
    # Pool the staked positions must provide liquidity in.
    pool: PoolAddressProvider
    start_time: int
    end_time: int
    # Receives any remaining reward tokens at end_time.
    refundee: str

    def __post_init__(self) -> None:
        # Addresses compare by value, not by spelling.
        for name in ("reward_token", "refundee"):
            object.__setattr__(self, name, to_checksum_address(getattr(self, name)))


@dataclass(frozen=True)
class ClaimOptions:
    token_id: int
    # Address rewards are sent to.
    recipient: str
    # Amount of reward_token to claim. None or 0 claims everything accrued.
    amount: int | None = None


@dataclass(frozen=True)
class WithdrawOptions:
    # The position is sent to owner on withdraw.
    owner: str
    # Passed to safeTransferFrom when the position is returned to owner.
    data: bytes | str | None = None


@dataclass(frozen=True)
class FullWithdrawOptions:
    claim_options: ClaimOptions
    withdraw_options: WithdrawOptions


def _require_keys(
    incentive_keys: Sequence[IncentiveKey], operation: str
) -> list[IncentiveKey]:
    keys = list(incentive_keys)
    if not keys:
        raise EmptyIncentiveKeyListError(operation)
    return keys


def encode_incentive_key(incentive_key: IncentiveKey) -> IncentiveKeyTuple:
    return (
        incentive_key.reward_token,
        to_checksum_address(incentive_key.pool.address()),
        require_uint(incentive_key.start_time, "start_time"),
        require_uint(incentive_key.end_time, "end_time"),
        incentive_key.refundee,
    )


def encode_stake(incentive_key: IncentiveKey, token_id: int) -> bytes:
    return encode_function_call(
        UNISWAP_V3_STAKER_ABI,
        "stakeToken",
        [encode_incentive_key(incentive_key), require_uint(token_id, "token_id")],
    )


def encode_claim(
    incentive_key: IncentiveKey, options: ClaimOptions
) -> tuple[bytes, bytes]:
    """Return the ``unstakeToken`` and ``claimReward`` calldata, in that order."""
    unstake = encode_function_call(
        UNISWAP_V3_STAKER_ABI,
        "unstakeToken",
        [
            encode_incentive_key(incentive_key),
            require_uint(options.token_id, "token_id"),
        ],
    )
    claim = encode_function_call(
        UNISWAP_V3_STAKER_ABI,
        "claimReward",
        [
            incentive_key.reward_token,
            to_checksum_address(options.recipient),
            require_uint(0 if options.amount is None else options.amount, "amount"),
        ],
    )
    return unstake, claim


def collect_rewards(
    incentive_keys: Sequence[IncentiveKey], options: ClaimOptions
) -> MethodParameters:
    """Collect rewards from every program in ``incentive_keys`` at once.

    The position is re-staked after each claim so it keeps earning. A single
    recipient and amount apply across all programs.
    """
    keys = _require_keys(incentive_keys, "collect_rewards")

    calldatas: list[bytes] = []
    for incentive_key in keys:
        calldatas.extend(encode_claim(incentive_key, options))
        calldatas.append(encode_stake(incentive_key, options.token_id))

    logger.debug(
        f"collect_rewards: token_id={options.token_id} keys={len(keys)} "
        f"calls={len(calldatas)}"
    )
    return MethodParameters(calldata=encode_multicall(calldatas), value=0)


def withdraw_token(
    incentive_keys: Sequence[IncentiveKey], withdraw_options: FullWithdrawOptions
) -> MethodParameters:
    """Unstake from every program, claim, then withdraw the position.

    ``incentive_keys`` must include every program the token is staked in,
    otherwise ``withdrawToken`` reverts on-chain.
    """
    keys = _require_keys(incentive_keys, "withdraw_token")
    claim_options = withdraw_options.claim_options
    options = withdraw_options.withdraw_options

    calldatas: list[bytes] = []
    for incentive_key in keys:
        calldatas.extend(encode_claim(incentive_key, claim_options))

    calldatas.append(
        encode_function_call(
            UNISWAP_V3_STAKER_ABI,
            "withdrawToken",
            [
                require_uint(claim_options.token_id, "token_id"),
                to_checksum_address(options.owner),
                normalize_bytes(options.data),
            ],
        )
    )

    logger.debug(
        f"withdraw_token: token_id={claim_options.token_id} keys={len(keys)} "
        f"calls={len(calldatas)}"
    )
    return MethodParameters(calldata=encode_multicall(calldatas), value=0)


def encode_deposit(incentive_keys: Sequence[IncentiveKey]) -> bytes:
    """Encode the ``data`` argument for a staking ``safeTransferFrom``.

    The staker tells one program from several by payload shape: a single key
    is a bare tuple, more than one is a dynamic array of tuples.
    """
    keys = _require_keys(incentive_keys, "encode_deposit")
    if len(keys) == 1:
        return abi_encode([INCENTIVE_KEY_TYPE], [encode_incentive_key(keys[0])])
    return abi_encode(
        [f"{INCENTIVE_KEY_TYPE}[]"], [[encode_incentive_key(k) for k in keys]]
    )
