# Minimal ABIs for UniswapV3Staker + NonfungiblePositionManager (calldata only).

INCENTIVE_KEY_COMPONENTS = [
    {"name": "rewardToken", "type": "address"},
    {"name": "pool", "type": "address"},
    {"name": "startTime", "type": "uint256"},
    {"name": "endTime", "type": "uint256"},
    {"name": "refundee", "type": "address"},
]

UNISWAP_V3_STAKER_ABI = [
    {
        "name": "unstakeToken",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {
                "name": "key",
                "type": "tuple",
                "components": INCENTIVE_KEY_COMPONENTS,
            },
            {"name": "tokenId", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "name": "stakeToken",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {
                "name": "key",
                "type": "tuple",
                "components": INCENTIVE_KEY_COMPONENTS,
            },
            {"name": "tokenId", "type": "uint256"},
        ],
        "outputs": [],
    },
    {
        "name": "claimReward",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "rewardToken", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "amountRequested", "type": "uint256"},
        ],
        "outputs": [{"name": "reward", "type": "uint256"}],
    },
    {
        "name": "withdrawToken",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "tokenId", "type": "uint256"},
            {"name": "to", "type": "address"},
            {"name": "data", "type": "bytes"},
        ],
        "outputs": [],
    },
    {
        "name": "multicall",
        "type": "function",
        "stateMutability": "payable",
        "inputs": [{"name": "data", "type": "bytes[]"}],
        "outputs": [{"name": "results", "type": "bytes[]"}],
    },
]

NONFUNGIBLE_POSITION_MANAGER_ABI = [
    {
        "name": "safeTransferFrom",
        "type": "function",
        "stateMutability": "nonpayable",
        "inputs": [
            {"name": "from", "type": "address"},
            {"name": "to", "type": "address"},
            {"name": "tokenId", "type": "uint256"},
            {"name": "_data", "type": "bytes"},
        ],
        "outputs": [],
    },
]
