__version__ = "0.1.0"

from v3_staker.core import (
    BaseAdapter,
    ClaimOptions,
    EmptyIncentiveKeyListError,
    FullWithdrawOptions,
    IncentiveKey,
    MethodParameters,
    WithdrawOptions,
)
from v3_staker.core.utils.pool import Pool, PoolAddress, PoolAddressProvider
from v3_staker.core.utils.position_manager import (
    SafeTransferOptions,
    safe_transfer_from_parameters,
)
from v3_staker.core.utils.staker import (
    collect_rewards,
    encode_deposit,
    withdraw_token,
)

__all__ = [
    "__version__",
    "BaseAdapter",
    "ClaimOptions",
    "EmptyIncentiveKeyListError",
    "FullWithdrawOptions",
    "IncentiveKey",
    "MethodParameters",
    "Pool",
    "PoolAddress",
    "PoolAddressProvider",
    "SafeTransferOptions",
    "WithdrawOptions",
    "collect_rewards",
    "encode_deposit",
    "safe_transfer_from_parameters",
    "withdraw_token",
]
