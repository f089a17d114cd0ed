"""Static chain, token and bridge metadata for route aggregation."""

from typing import Dict, List

SUPPORTED_CHAINS: List[str] = ['ethereum', 'polygon', 'arbitrum', 'optimism', 'base']
SUPPORTED_TOKENS: List[str] = ['USDC', 'USDT', 'ETH', 'WETH']

CHAIN_IDS: Dict[str, int] = {
    'ethereum': 1,
    'polygon': 137,
    'arbitrum': 42161,
    'optimism': 10,
    'base': 8453,
    'avalanche': 43114,
    'bsc': 56,
    'fantom': 250,
}

# LI.FI keys chains by short codes rather than numeric IDs
LIFI_CHAIN_CODES: Dict[str, str] = {
    'ethereum': 'ETH',
    'polygon': 'POL',
    'arbitrum': 'ARB',
    'optimism': 'OPT',
    'base': 'BAS',
    'avalanche': 'AVA',
    'bsc': 'BSC',
    'fantom': 'FTM',
}

GAS_TOKENS: Dict[str, str] = {
    'ethereum': 'ETH',
    'polygon': 'MATIC',
    'arbitrum': 'ETH',
    'optimism': 'ETH',
    'base': 'ETH',
}

NATIVE_PLACEHOLDER = '0xEeeeeEeeeEeEeeEeEeEeeEEEeeeeEeeeeeeeEEeE'

TOKEN_ADDRESSES: Dict[str, Dict[str, str]] = {
    'USDC': {
        'ethereum': '0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48',
        'polygon': '0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174',
        'arbitrum': '0xaf88d065e77c8cC2239327C5EDb3A432268e5831',
        'optimism': '0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85',
        'base': '0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913',
    },
    'USDT': {
        'ethereum': '0xdAC17F958D2ee523a2206206994597C13D831ec7',
        'polygon': '0xc2132D05D31c914a87C6611C10748AEb04B58e8F',
        'arbitrum': '0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9',
        'optimism': '0x94b008aA00579c1307B0EF2c499aD98a8ce58e58',
        'base': '0x50c5725949A6F0c72E6C4a641F24049A917DB0Cb',
    },
    'ETH': {
        'ethereum': NATIVE_PLACEHOLDER,
        'polygon': '0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619',  # WETH, ETH is not native on Polygon
        'arbitrum': NATIVE_PLACEHOLDER,
        'optimism': NATIVE_PLACEHOLDER,
        'base': NATIVE_PLACEHOLDER,
    },
    'WETH': {
        'ethereum': '0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2',
        'polygon': '0x7ceB23fD6bC0adD59E62ac25578270cFf1b9f619',
        'arbitrum': '0x82aF49447D8a07e3bd95BD0d56f35241523fBab1',
        'optimism': '0x4200000000000000000000000000000000000006',
        'base': '0x4200000000000000000000000000000000000006',
    },
}

TOKEN_DECIMALS: Dict[str, int] = {
    'USDC': 6,
    'USDT': 6,
    'ETH': 18,
    'WETH': 18,
}

DEFAULT_TOKEN_DECIMALS = 18

# Smallest accepted transfer per token; anything else uses DEFAULT_MIN_AMOUNT
MIN_AMOUNTS: Dict[str, float] = {
    'ETH': 0.001,
    'WETH': 0.001,
}
DEFAULT_MIN_AMOUNT = 1.0
MAX_AMOUNT = 1_000_000.0

UNKNOWN_BRIDGE_URL = 'https://unknown-bridge.com'
UNKNOWN_CONTRACT = 'N/A'

# Keyed by the normalized provider name (lowercase, whitespace -> '-')
BRIDGE_METADATA: Dict[str, Dict[str, str]] = {
    'across': {'name': 'Across Protocol', 'url': 'https://across.to', 'confidence': 'HIGH'},
    'across-protocol': {'name': 'Across Protocol', 'url': 'https://across.to', 'confidence': 'HIGH'},
    'stargate': {'name': 'Stargate', 'url': 'https://stargate.finance', 'confidence': 'HIGH'},
    'connext': {'name': 'Connext', 'url': 'https://bridge.connext.network', 'confidence': 'HIGH'},
    'hop': {'name': 'Hop Protocol', 'url': 'https://hop.exchange', 'confidence': 'HIGH'},
    'celer': {'name': 'Celer cBridge', 'url': 'https://cbridge.celer.network', 'confidence': 'HIGH'},
    'hyphen': {'name': 'Hyphen', 'url': 'https://hyphen.biconomy.io', 'confidence': 'MEDIUM'},
    'polygon-bridge': {'name': 'Polygon Bridge', 'url': 'https://wallet.polygon.technology/bridge', 'confidence': 'HIGH'},
    'arbitrum-bridge': {'name': 'Arbitrum Bridge', 'url': 'https://bridge.arbitrum.io', 'confidence': 'HIGH'},
    'optimism-bridge': {'name': 'Optimism Bridge', 'url': 'https://app.optimism.io/bridge', 'confidence': 'HIGH'},
    'base-bridge': {'name': 'Base Bridge', 'url': 'https://bridge.base.org', 'confidence': 'HIGH'},
    'synapse': {'name': 'Synapse', 'url': 'https://synapseprotocol.com', 'confidence': 'MEDIUM'},
    'multichain': {'name': 'Multichain', 'url': 'https://multichain.org', 'confidence': 'LOW'},
    'allbridge': {'name': 'Allbridge', 'url': 'https://allbridge.io', 'confidence': 'MEDIUM'},
    'wormhole': {'name': 'Wormhole', 'url': 'https://wormhole.com', 'confidence': 'HIGH'},
}
