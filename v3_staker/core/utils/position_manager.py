from __future__ import annotations

from dataclasses import dataclass

from eth_utils import to_checksum_address

from v3_staker.core.constants.uniswap_v3_staker_abi import (
    NONFUNGIBLE_POSITION_MANAGER_ABI,
)
from v3_staker.core.utils.calldata import (
    MethodParameters,
    encode_function_call,
    normalize_bytes,
    require_uint,
)


@dataclass(frozen=True)
class SafeTransferOptions:
    sender: str
    recipient: str
    token_id: int
    # Forwarded to the recipient's onERC721Received, e.g. an encoded deposit.
    data: bytes | str | None = None


def safe_transfer_from_parameters(options: SafeTransferOptions) -> MethodParameters:
    calldata = encode_function_call(
        NONFUNGIBLE_POSITION_MANAGER_ABI,
        "safeTransferFrom",
        [
            to_checksum_address(options.sender),
            to_checksum_address(options.recipient),
            require_uint(options.token_id, "token_id"),
            normalize_bytes(options.data),
        ],
    )
    return MethodParameters(calldata=calldata, value=0)
