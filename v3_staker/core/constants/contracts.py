from eth_utils import to_checksum_address

from v3_staker.core.constants.chains import (
    CHAIN_ID_ARBITRUM,
    CHAIN_ID_ETHEREUM,
    CHAIN_ID_OPTIMISM,
    CHAIN_ID_POLYGON,
)

UNISWAP_V3_FACTORY = to_checksum_address("0x1F98431c8aD98523631AE4a59f267346ea31F984")
UNISWAP_V3_NPM = to_checksum_address("0xC36442b4a4522E871399CD717aBDD847Ab11FE88")
UNISWAP_V3_STAKER = to_checksum_address("0xe34139463bA50bD61336E0c446Bd8C0867c6fE65")

# keccak256 of the UniswapV3Pool creation code, used for CREATE2 derivation
POOL_INIT_CODE_HASH = bytes.fromhex(
    "e34f199b19b2b4f47f68442619d555527d244f78a3297ea89325f843f87b8b54"
)

UNISWAP_V3_STAKER_CONTRACTS: dict[int, dict[str, str]] = {
    chain_id: {
        "factory": UNISWAP_V3_FACTORY,
        "position_manager": UNISWAP_V3_NPM,
        "staker": UNISWAP_V3_STAKER,
    }
    for chain_id in (
        CHAIN_ID_ETHEREUM,
        CHAIN_ID_OPTIMISM,
        CHAIN_ID_POLYGON,
        CHAIN_ID_ARBITRUM,
    )
}
