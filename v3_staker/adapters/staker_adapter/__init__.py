from v3_staker.adapters.staker_adapter.adapter import StakerAdapter

__all__ = ["StakerAdapter"]
