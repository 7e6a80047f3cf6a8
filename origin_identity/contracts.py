"""
ORIGIN protocol contract addresses and read-only ABI fragments (Base mainnet).

Only view functions are listed; the SDK never sends transactions.
"""

CHAIN_ID = 8453
BASE_RPC = "https://mainnet.base.org"

CONTRACTS = {
    "registry": "0xac62E9d0bE9b88674f7adf38821F6e8BAA0e59b0",
    "clamsToken": "0xd78A1F079D6b2da39457F039aD99BaF5A82c4574",
    "faucet": "0x6C563A293C674321a2C52410ab37d879e099a25d",
    "governance": "0xb745F43E6f896C149e3d29A9D45e86E0654f85f7",
    "stakingRewards": "0x4b39223a1fa5532A7f06A71897964A18851644f8",
    "feeSplitter": "0x5AF277670438B7371Bc3137184895f85ADA4a1A6",
}

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Functions shared by every registry version (ERC-721 surface + lookups)
REGISTRY_ABI_COMMON = [
    {
        "inputs": [],
        "name": "totalAgents",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "tokenId", "type": "uint256"}],
        "name": "ownerOf",
        "outputs": [{"internalType": "address", "name": "", "type": "address"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "address", "name": "owner", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "tokenId", "type": "uint256"}],
        "name": "tokenURI",
        "outputs": [{"internalType": "string", "name": "", "type": "string"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "agentId", "type": "uint256"}],
        "name": "isValid",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "address", "name": "creator", "type": "address"}],
        "name": "getAgentsByCreator",
        "outputs": [{"internalType": "uint256[]", "name": "", "type": "uint256[]"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "parentAgentId", "type": "uint256"}],
        "name": "getChildAgents",
        "outputs": [{"internalType": "uint256[]", "name": "", "type": "uint256[]"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "agentId", "type": "uint256"},
            {"internalType": "string", "name": "licenseType", "type": "string"},
        ],
        "name": "hasLicense",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# OriginRegistry V1 (deployed): lineage and human principal live in the record,
# licenses come back as one batched list.
REGISTRY_ABI_V1 = REGISTRY_ABI_COMMON + [
    {
        "inputs": [{"internalType": "uint256", "name": "agentId", "type": "uint256"}],
        "name": "getAgent",
        "outputs": [
            {
                "components": [
                    {"internalType": "string", "name": "name", "type": "string"},
                    {"internalType": "string", "name": "agentType", "type": "string"},
                    {"internalType": "string", "name": "platform", "type": "string"},
                    {"internalType": "address", "name": "creator", "type": "address"},
                    {"internalType": "uint256", "name": "parentAgentId", "type": "uint256"},
                    {"internalType": "address", "name": "humanPrincipal", "type": "address"},
                    {"internalType": "uint256", "name": "lineageDepth", "type": "uint256"},
                    {"internalType": "uint256", "name": "birthTimestamp", "type": "uint256"},
                    {"internalType": "bytes32", "name": "publicKeyHash", "type": "bytes32"},
                    {"internalType": "bool", "name": "active", "type": "bool"},
                ],
                "internalType": "struct OriginRegistry.AgentRecord",
                "name": "",
                "type": "tuple",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "agentId", "type": "uint256"}],
        "name": "getLicenses",
        "outputs": [
            {
                "components": [
                    {"internalType": "string", "name": "licenseType", "type": "string"},
                    {"internalType": "string", "name": "licenseNumber", "type": "string"},
                    {"internalType": "string", "name": "holder", "type": "string"},
                    {"internalType": "string", "name": "jurisdiction", "type": "string"},
                    {"internalType": "bool", "name": "active", "type": "bool"},
                ],
                "internalType": "struct OriginRegistry.License[]",
                "name": "",
                "type": "tuple[]",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
]

# OriginRegistry V2: explicit verified flag, separate lineage accessor and
# per-index license reads.
REGISTRY_ABI_V2 = REGISTRY_ABI_COMMON + [
    {
        "inputs": [{"internalType": "uint256", "name": "agentId", "type": "uint256"}],
        "name": "getAgent",
        "outputs": [
            {
                "components": [
                    {"internalType": "string", "name": "name", "type": "string"},
                    {"internalType": "string", "name": "agentType", "type": "string"},
                    {"internalType": "uint256", "name": "birthBlock", "type": "uint256"},
                    {"internalType": "bool", "name": "active", "type": "bool"},
                ],
                "internalType": "struct OriginRegistryV2.AgentRecord",
                "name": "",
                "type": "tuple",
            }
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "agentId", "type": "uint256"}],
        "name": "isVerified",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "agentId", "type": "uint256"}],
        "name": "getLineage",
        "outputs": [
            {"internalType": "uint256", "name": "parentId", "type": "uint256"},
            {"internalType": "uint256", "name": "depth", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [{"internalType": "uint256", "name": "agentId", "type": "uint256"}],
        "name": "getLicenseCount",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [
            {"internalType": "uint256", "name": "agentId", "type": "uint256"},
            {"internalType": "uint256", "name": "index", "type": "uint256"},
        ],
        "name": "getLicense",
        "outputs": [
            {"internalType": "string", "name": "licenseType", "type": "string"},
            {"internalType": "string", "name": "licenseId", "type": "string"},
            {"internalType": "uint256", "name": "issuedAt", "type": "uint256"},
        ],
        "stateMutability": "view",
        "type": "function",
    },
]

# Faucet (read functions)
FAUCET_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "hasClaimed",
        "outputs": [{"internalType": "bool", "name": "", "type": "bool"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "totalClaims",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
]

# CLAMS ERC-20 (read functions)
CLAMS_ABI = [
    {
        "inputs": [{"internalType": "address", "name": "account", "type": "address"}],
        "name": "balanceOf",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "totalSupply",
        "outputs": [{"internalType": "uint256", "name": "", "type": "uint256"}],
        "stateMutability": "view",
        "type": "function",
    },
    {
        "inputs": [],
        "name": "decimals",
        "outputs": [{"internalType": "uint8", "name": "", "type": "uint8"}],
        "stateMutability": "view",
        "type": "function",
    },
]


def get_abi(contract_name: str):
    mapping = {
        "OriginRegistry": REGISTRY_ABI_V1,
        "OriginRegistryV2": REGISTRY_ABI_V2,
        "OriginFaucet": FAUCET_ABI,
        "ClamsToken": CLAMS_ABI,
    }
    return mapping.get(contract_name)
