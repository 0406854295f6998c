from typing import Any, Literal

from pydantic import BaseModel, field_validator

from v3_staker.core.utils.calldata import MethodParameters


class EvmTxn(BaseModel):
    """Unsigned transaction; ``as_txn()`` yields the dict a signer consumes."""

    txn_type: Literal["evm"] = "evm"
    chain_id: int
    to: str
    data: str
    value: int = 0
    from_address: str | None = None
    operation: str | None = None

    @field_validator("data")
    @classmethod
    def _hex_prefixed(cls, v: str) -> str:
        if not v.startswith("0x"):
            raise ValueError("data must be 0x-prefixed hex")
        return v

    @classmethod
    def from_method_parameters(
        cls,
        params: MethodParameters,
        *,
        chain_id: int,
        to: str,
        from_address: str | None = None,
        operation: str | None = None,
    ) -> "EvmTxn":
        return cls(
            chain_id=int(chain_id),
            to=to,
            data="0x" + params.calldata.hex(),
            value=int(params.value),
            from_address=from_address,
            operation=operation,
        )

    def as_txn(self) -> dict[str, Any]:
        txn: dict[str, Any] = {
            "chainId": self.chain_id,
            "to": self.to,
            "data": self.data,
            "value": self.value,
        }
        if self.from_address:
            txn["from"] = self.from_address
        return txn
