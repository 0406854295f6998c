import sys
from pathlib import Path

import pytest

from v3_staker.core.utils.pool import Pool
from v3_staker.core.utils.staker import (
    ClaimOptions,
    FullWithdrawOptions,
    IncentiveKey,
    WithdrawOptions,
)
from v3_staker.tests.golden_vectors import (
    RECIPIENT,
    REWARD,
    SENDER,
    TOKEN0,
    TOKEN1,
    TOKEN_ID,
)

_repo_root = Path(__file__).parent.parent
_repo_root_str = str(_repo_root)


def pytest_configure(config):
    config.addinivalue_line("markers", "golden: asserts byte-exact calldata")
    if _repo_root_str not in sys.path:
        sys.path.insert(0, _repo_root_str)


def pytest_collection_modifyitems(config, items):
    for item in items:
        if "golden" in item.nodeid:
            item.add_marker(pytest.mark.golden)


@pytest.fixture
def pool_0_1() -> Pool:
    return Pool(TOKEN0, TOKEN1, 3000)


@pytest.fixture
def incentive_key(pool_0_1: Pool) -> IncentiveKey:
    return IncentiveKey(
        reward_token=REWARD,
        pool=pool_0_1,
        start_time=100,
        end_time=200,
        refundee="0x0000000000000000000000000000000000000001",
    )


@pytest.fixture
def incentive_keys(incentive_key: IncentiveKey, pool_0_1: Pool) -> list[IncentiveKey]:
    return [
        incentive_key,
        IncentiveKey(
            reward_token=REWARD,
            pool=pool_0_1,
            start_time=50,
            end_time=100,
            refundee="0x0000000000000000000000000000000000000089",
        ),
    ]


@pytest.fixture
def full_withdraw_options() -> FullWithdrawOptions:
    return FullWithdrawOptions(
        claim_options=ClaimOptions(token_id=TOKEN_ID, recipient=RECIPIENT, amount=0),
        withdraw_options=WithdrawOptions(
            owner=SENDER,
            data=bytes.fromhex("0000000000000000000000000000000000000008"),
        ),
    )
