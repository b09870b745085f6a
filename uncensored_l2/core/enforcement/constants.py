"""Constants and chain metadata for enforcement swaps."""

from typing import Any, Dict, Tuple

MAX_UINT256 = 2**256 - 1
MAX_DECIMALS = 255

ZERO_ADDRESS = '0x0000000000000000000000000000000000000000'

# Predeployed WETH on every OP-stack chain.
WRAPPED_NATIVE_ADDRESS = '0x4200000000000000000000000000000000000006'

SWAP_SIGNATURE = (
    'swapExactETHForTokensSupportingFeeOnTransferTokens'
    '(uint amountOutMin, address[] calldata path, address to, uint deadline)'
)

# Router constant-product fee convention: 0.3% taken from the input side.
AMM_FEE_NUMERATOR = 997
AMM_FEE_DENOMINATOR = 1000

# Surcharge rates are expressed in parts per thousand.
FEE_RATE_DENOMINATOR = 1000

DEFAULT_GAS_LIMIT = 500_000
DEFAULT_DEADLINE_SECONDS = 2 * 24 * 60 * 60

# Addresses intentionally lowercased; output checksumming happens at the edge.
# router: Uniswap-V2-style router on the L2.
# proxy: L1 portal proxy that accepts the enforcement deposit.
# optimism and base are the canonical deployments. The soneium, modeNetwork
# and ink entries are unverified (ink reuses the soneium router) and must be
# confirmed or overridden through ROUTER_ADDRESSES / PROXY_ADDRESSES.
CHAIN_METADATA: Dict[str, Dict[str, Any]] = {
    'optimism': {
        'name': 'OP Mainnet',
        'chain_id': 10,
        'rpc_url': 'https://mainnet.optimism.io',
        'router': '0x4a7b5da61326a6379179b40d00f57e5bbdc962c2',
        'proxy': '0xbeb5fc579115071764c7423a4f12edde41f106ed',
    },
    'base': {
        'name': 'Base',
        'chain_id': 8453,
        'rpc_url': 'https://mainnet.base.org',
        'router': '0x4752ba5dbc23f44d87826276bf6fd6b1c372ad24',
        'proxy': '0x49048044d57e1c92a77f79988d21fa8faf74e97e',
    },
    'soneium': {
        'name': 'Soneium',
        'chain_id': 1868,
        'rpc_url': 'https://rpc.soneium.org',
        'router': '0x273f68c234fa55b550b40e563c4a488e0d334320',
        'proxy': '0x88e529a6ccd302c948689cd5156c83d4614fae92',
    },
    'modeNetwork': {
        'name': 'Mode',
        'chain_id': 34443,
        'rpc_url': 'https://mainnet.mode.network',
        'router': '0x5d61c537393cf21893be619e36fc94cd73c77dd3',
        'proxy': '0x8b34b14c7c7123459cf3076b8cb929be097d0c07',
    },
    'ink': {
        'name': 'Ink',
        'chain_id': 57073,
        'rpc_url': 'https://rpc-gel.inkonchain.com',
        'router': '0x273f68c234fa55b550b40e563c4a488e0d334320',
        'proxy': '0x5d66c1782664115999c47c9fa5cd031f495d3e4f',
    },
}

SUPPORTED_CHAINS: Tuple[str, ...] = tuple(CHAIN_METADATA.keys())

UNVERIFIED_CONTRACT_CHAINS: Tuple[str, ...] = ("soneium", "modeNetwork", "ink")

__all__ = [
    'MAX_UINT256',
    'MAX_DECIMALS',
    'ZERO_ADDRESS',
    'WRAPPED_NATIVE_ADDRESS',
    'SWAP_SIGNATURE',
    'AMM_FEE_NUMERATOR',
    'AMM_FEE_DENOMINATOR',
    'FEE_RATE_DENOMINATOR',
    'DEFAULT_GAS_LIMIT',
    'DEFAULT_DEADLINE_SECONDS',
    'CHAIN_METADATA',
    'SUPPORTED_CHAINS',
    'UNVERIFIED_CONTRACT_CHAINS',
]
