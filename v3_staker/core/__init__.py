from v3_staker.core.adapters.BaseAdapter import BaseAdapter
from v3_staker.core.utils.calldata import MethodParameters
from v3_staker.core.utils.staker import (
    ClaimOptions,
    EmptyIncentiveKeyListError,
    FullWithdrawOptions,
    IncentiveKey,
    WithdrawOptions,
)

__all__ = [
    "BaseAdapter",
    "ClaimOptions",
    "EmptyIncentiveKeyListError",
    "FullWithdrawOptions",
    "IncentiveKey",
    "MethodParameters",
    "WithdrawOptions",
]
