from __future__ import annotations

from enum import Enum


class Endpoint(str, Enum):
    # Every operation is listed, including those that take no include.
    MULTIPLE_PRICES = "multiple_prices"
    NETWORKS = "networks"
    DEXES = "dexes"
    TRENDING_POOLS = "trending_pools"
    NETWORK_TRENDING_POOLS = "network_trending_pools"
    NETWORK_POOL = "network_pool"
    MULTIPLE_NETWORK_POOLS = "multiple_network_pools"
    TOP_TRANSACTIONS_NETWORK_POOLS = "top_transactions_network_pools"
    TOP_VOLUME_NETWORK_POOLS = "top_volume_network_pools"
    NETWORK_LATEST_POOLS = "network_latest_pools"
    LATEST_POOLS = "latest_pools"
    TOKEN_INFO = "token_info"
    POOL_INFO = "pool_info"
    RECENT_TOKENS = "recent_tokens"
    TRADES = "trades"


POOL_INCLUDES = frozenset({"base_token", "quote_token", "dex"})

# Endpoints missing from the mapping accept no include parameter.
ALLOWED_INCLUDES: dict[Endpoint, frozenset[str]] = {
    Endpoint.TRENDING_POOLS: POOL_INCLUDES | {"network"},
    Endpoint.NETWORK_TRENDING_POOLS: POOL_INCLUDES,
    Endpoint.NETWORK_POOL: POOL_INCLUDES,
    Endpoint.MULTIPLE_NETWORK_POOLS: POOL_INCLUDES,
    Endpoint.TOP_TRANSACTIONS_NETWORK_POOLS: POOL_INCLUDES,
    Endpoint.TOP_VOLUME_NETWORK_POOLS: POOL_INCLUDES,
    Endpoint.NETWORK_LATEST_POOLS: POOL_INCLUDES,
    Endpoint.LATEST_POOLS: POOL_INCLUDES,
    Endpoint.TOKEN_INFO: frozenset({"top_pools"}),
    Endpoint.RECENT_TOKENS: POOL_INCLUDES,
}
