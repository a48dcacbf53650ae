"""Fixed values shared across the node."""

API_VERSION = "v1"

# Placeholder token addresses used by the test networks
DEFAULT_TOKENS = {
    "ETH": "0x" + "0" * 64,
    "DAI": "0x" + "0" * 63 + "1",
    "WBTC": "0x" + "0" * 63 + "2",
    "USDC": "0x" + "0" * 63 + "3",
    "USDT": "0x" + "0" * 63 + "4",
}

# Trigger polling intervals in milliseconds
POLLING_INTERVALS = {
    "FAST": 10000,
    "NORMAL": 30000,
    "SLOW": 60000,
}

DEFAULT_MAX_RESULTS = 50
MAX_TRACKED_EVENT_IDS = 100

LICENSING_NOTICE = (
    "[Aztec Node Licensing Notice]\n\n"
    "This node is licensed under the Business Source License 1.1 (BSL 1.1).\n\n"
    "Use of this node by for-profit organizations in production environments "
    "requires a commercial license."
)
