from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from eth_utils import to_checksum_address

from v3_staker.core.adapters.BaseAdapter import BaseAdapter
from v3_staker.core.adapters.decorators import status_tuple
from v3_staker.core.adapters.models import EvmTxn
from v3_staker.core.config import get_staker_overrides
from v3_staker.core.constants.chains import CHAIN_ID_ETHEREUM
from v3_staker.core.constants.contracts import UNISWAP_V3_STAKER_CONTRACTS
from v3_staker.core.utils.calldata import MethodParameters
from v3_staker.core.utils.position_manager import (
    SafeTransferOptions,
    safe_transfer_from_parameters,
)
from v3_staker.core.utils.staker import (
    ClaimOptions,
    FullWithdrawOptions,
    IncentiveKey,
    collect_rewards,
    encode_deposit,
    withdraw_token,
)

SUPPORTED_CHAIN_IDS = set(UNISWAP_V3_STAKER_CONTRACTS.keys())


class StakerAdapter(BaseAdapter):
    """Builds unsigned UniswapV3Staker transactions. Nothing is signed or sent."""

    adapter_type = "V3_STAKER"

    def __init__(self, config: dict[str, Any] | None = None) -> None:
        super().__init__("staker_adapter", config)

        self.chain_id: int = int(self.config.get("chain_id", CHAIN_ID_ETHEREUM))
        overrides = {**get_staker_overrides(self.chain_id), **self._local_overrides()}

        defaults = UNISWAP_V3_STAKER_CONTRACTS.get(self.chain_id)
        if defaults is None and not {
            "staker_address",
            "position_manager_address",
        } <= overrides.keys():
            raise ValueError(
                f"Unsupported chain_id {self.chain_id} for UniswapV3Staker. "
                f"Supported: {sorted(SUPPORTED_CHAIN_IDS)}"
            )
        defaults = defaults or {}

        self.staker_address: str = to_checksum_address(
            overrides.get("staker_address") or defaults["staker"]
        )
        self.position_manager_address: str = to_checksum_address(
            overrides.get("position_manager_address") or defaults["position_manager"]
        )

        wallet = self.config.get("strategy_wallet") or {}
        addr = wallet.get("address")
        self.owner: str | None = to_checksum_address(str(addr)) if addr else None

    def _local_overrides(self) -> dict[str, str]:
        return {
            k: str(self.config[k])
            for k in ("staker_address", "position_manager_address")
            if self.config.get(k)
        }

    def _txn(
        self, params: MethodParameters, *, to: str, operation: str
    ) -> dict[str, Any]:
        txn = EvmTxn.from_method_parameters(
            params,
            chain_id=self.chain_id,
            to=to,
            from_address=self.owner,
            operation=operation,
        )
        self.logger.info(
            f"Built {operation} tx to {to} ({len(params.calldata)} bytes calldata)"
        )
        return txn.as_txn()

    @status_tuple
    async def build_collect_rewards_tx(
        self, incentive_keys: Sequence[IncentiveKey], options: ClaimOptions
    ) -> dict[str, Any]:
        params = collect_rewards(incentive_keys, options)
        return self._txn(params, to=self.staker_address, operation="collect_rewards")

    @status_tuple
    async def build_withdraw_tx(
        self,
        incentive_keys: Sequence[IncentiveKey],
        options: FullWithdrawOptions,
    ) -> dict[str, Any]:
        params = withdraw_token(incentive_keys, options)
        return self._txn(params, to=self.staker_address, operation="withdraw_token")

    @status_tuple
    async def build_deposit_tx(
        self,
        incentive_keys: Sequence[IncentiveKey],
        token_id: int,
        *,
        sender: str | None = None,
    ) -> dict[str, Any]:
        owner = sender or self.owner
        if not owner:
            raise ValueError("sender or strategy_wallet.address is required to deposit")
        data = encode_deposit(incentive_keys)
        params = safe_transfer_from_parameters(
            SafeTransferOptions(
                sender=owner,
                recipient=self.staker_address,
                token_id=token_id,
                data=data,
            )
        )
        return self._txn(
            params, to=self.position_manager_address, operation="deposit"
        )
