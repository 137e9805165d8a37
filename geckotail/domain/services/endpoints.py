"""Request paths for the GeckoTerminal v2 endpoints.

Each builder validates its arguments and returns the path relative to the API
base URL. Nothing here touches the network.
"""
from __future__ import annotations

from collections.abc import Sequence

from geckotail.domain.entities.includes import Endpoint
from geckotail.domain.services.validation import (
    join_addresses,
    require_addresses,
    require_include,
    require_page,
    require_string,
    require_trade_volume,
)


def multiple_prices_path(network: str, addresses: Sequence[str]) -> str:
    require_string(network, "Network")
    require_addresses(addresses)
    return f"/simple/networks/{network}/{join_addresses(addresses)}"


def networks_path(page: int = 1) -> str:
    require_page(page)
    return f"/networks?page={page}"


def dexes_path(network: str, page: int = 1) -> str:
    require_string(network, "Network")
    require_page(page)
    return f"/networks/{network}/dexes?page={page}"


def trending_pools_path(include: str = "", page: int = 1) -> str:
    require_page(page)
    include = require_include(include, Endpoint.TRENDING_POOLS)
    return f"/networks/trending_pools?page={page}&include={include}"


def network_trending_pools_path(network: str, include: str = "", page: int = 1) -> str:
    require_string(network, "Network")
    require_page(page)
    include = require_include(include, Endpoint.NETWORK_TRENDING_POOLS)
    return f"/networks/{network}/trending_pools?page={page}&include={include}"


def network_pool_path(network: str, address: str, include: str = "") -> str:
    require_string(network, "Network")
    require_string(address, "Address")
    include = require_include(include, Endpoint.NETWORK_POOL)
    return f"/networks/{network}/pools/{address}?include={include}"


def multiple_network_pools_path(network: str, addresses: Sequence[str], include: str = "") -> str:
    require_string(network, "Network")
    require_addresses(addresses)
    include = require_include(include, Endpoint.MULTIPLE_NETWORK_POOLS)
    return f"/networks/{network}/pools/multi/{join_addresses(addresses)}?include={include}"


def top_transactions_network_pools_path(network: str, include: str = "", page: int = 1) -> str:
    require_string(network, "Network")
    require_page(page)
    include = require_include(include, Endpoint.TOP_TRANSACTIONS_NETWORK_POOLS)
    return f"/networks/{network}/pools?sort=h24_tx_count_desc&include={include}&page={page}"


def top_volume_network_pools_path(network: str, include: str = "", page: int = 1) -> str:
    require_string(network, "Network")
    require_page(page)
    include = require_include(include, Endpoint.TOP_VOLUME_NETWORK_POOLS)
    return f"/networks/{network}/pools?sort=h24_volume_usd_desc&include={include}&page={page}"


def network_latest_pools_path(network: str, include: str = "", page: int = 1) -> str:
    require_string(network, "Network")
    require_page(page)
    include = require_include(include, Endpoint.NETWORK_LATEST_POOLS)
    return f"/networks/{network}/new_pools?include={include}&page={page}"


def latest_pools_path(include: str = "", page: int = 1) -> str:
    require_page(page)
    include = require_include(include, Endpoint.LATEST_POOLS)
    return f"/networks/new_pools?include={include}&page={page}"


def token_info_path(network: str, addresses: Sequence[str], include: str = "") -> str:
    require_string(network, "Network")
    require_addresses(addresses)
    include = require_include(include, Endpoint.TOKEN_INFO)
    joined = join_addresses(addresses)
    if len(addresses) == 1:
        return f"/networks/{network}/tokens/{joined}?include={include}"
    return f"/networks/{network}/tokens/multi/{joined}?include={include}"


def pool_info_path(network: str, pool_address: str) -> str:
    require_string(network, "Network")
    require_string(pool_address, "Pool address")
    return f"/networks/{network}/pools/{pool_address}/info"


def recent_tokens_path(network: str = "", include: str = "") -> str:
    # An empty network asks for tokens across all networks.
    if network:
        require_string(network, "Network")
    else:
        network = ""
    include = require_include(include, Endpoint.RECENT_TOKENS)
    return f"/tokens/info_recently_updated?network={network}&include={include}"


def trades_path(network: str, pool_address: str, trade_volume: int | float = 0) -> str:
    require_string(network, "Network")
    require_string(pool_address, "Pool address")
    require_trade_volume(trade_volume)
    return (
        f"/networks/{network}/pools/{pool_address}/trades"
        f"?trade_volume_in_usd_greater_than={trade_volume}"
    )
