from __future__ import annotations

import pytest

from geckotail.domain.exceptions import GeckoTerminalInputError
from geckotail.domain.services import endpoints


def test_multiple_prices_path_joins_addresses():
    assert endpoints.multiple_prices_path("eth", ["0xA", "0xB"]) == "/simple/networks/eth/0xA,0xB"


def test_networks_and_dexes_paths_carry_page():
    assert endpoints.networks_path() == "/networks?page=1"
    assert endpoints.networks_path(1000) == "/networks?page=1000"
    assert endpoints.dexes_path("ton", 2) == "/networks/ton/dexes?page=2"


def test_trending_pools_paths():
    assert (
        endpoints.trending_pools_path("network", 3)
        == "/networks/trending_pools?page=3&include=network"
    )
    assert (
        endpoints.network_trending_pools_path("eth", "dex")
        == "/networks/eth/trending_pools?page=1&include=dex"
    )


def test_empty_include_stays_on_the_wire():
    assert endpoints.trending_pools_path() == "/networks/trending_pools?page=1&include="
    assert endpoints.network_pool_path("eth", "0xPool") == "/networks/eth/pools/0xPool?include="


def test_pool_paths():
    assert (
        endpoints.network_pool_path("eth", "0xPool", "base_token")
        == "/networks/eth/pools/0xPool?include=base_token"
    )
    assert (
        endpoints.multiple_network_pools_path("eth", ["0xA", "0xB"], "quote_token")
        == "/networks/eth/pools/multi/0xA,0xB?include=quote_token"
    )
    assert endpoints.pool_info_path("eth", "0xPool") == "/networks/eth/pools/0xPool/info"


def test_sorted_pool_paths():
    assert (
        endpoints.top_transactions_network_pools_path("eth", "dex", 2)
        == "/networks/eth/pools?sort=h24_tx_count_desc&include=dex&page=2"
    )
    assert (
        endpoints.top_volume_network_pools_path("eth")
        == "/networks/eth/pools?sort=h24_volume_usd_desc&include=&page=1"
    )


def test_latest_pools_paths():
    assert (
        endpoints.network_latest_pools_path("solana", "base_token", 4)
        == "/networks/solana/new_pools?include=base_token&page=4"
    )
    assert endpoints.latest_pools_path() == "/networks/new_pools?include=&page=1"


def test_token_info_path_switches_to_multi_route_for_several_addresses():
    assert endpoints.token_info_path("eth", ["0xA"]) == "/networks/eth/tokens/0xA?include="
    assert (
        endpoints.token_info_path("eth", ["0xA", "0xB"], "top_pools")
        == "/networks/eth/tokens/multi/0xA,0xB?include=top_pools"
    )


def test_token_info_rejects_pool_includes():
    with pytest.raises(GeckoTerminalInputError):
        endpoints.token_info_path("eth", ["0xA"], "dex")


def test_recent_tokens_path_with_and_without_network():
    assert endpoints.recent_tokens_path() == "/tokens/info_recently_updated?network=&include="
    assert (
        endpoints.recent_tokens_path("eth", "dex")
        == "/tokens/info_recently_updated?network=eth&include=dex"
    )


def test_recent_tokens_rejects_blank_network():
    with pytest.raises(GeckoTerminalInputError, match="Network must be a valid string."):
        endpoints.recent_tokens_path("   ")


def test_trades_path_defaults_volume_to_zero():
    assert (
        endpoints.trades_path("eth", "0xPool")
        == "/networks/eth/pools/0xPool/trades?trade_volume_in_usd_greater_than=0"
    )
    assert (
        endpoints.trades_path("eth", "0xPool", 10000)
        == "/networks/eth/pools/0xPool/trades?trade_volume_in_usd_greater_than=10000"
    )


def test_trades_path_rejects_negative_volume():
    with pytest.raises(GeckoTerminalInputError, match="volume must be a non-negative number."):
        endpoints.trades_path("eth", "0xPool", -5)


def test_trades_path_names_the_pool_address_field():
    with pytest.raises(GeckoTerminalInputError, match="Pool address must be a valid string."):
        endpoints.trades_path("eth", "")


@pytest.mark.parametrize(
    "build",
    [
        lambda: endpoints.multiple_prices_path("", ["0xA"]),
        lambda: endpoints.dexes_path(" "),
        lambda: endpoints.network_trending_pools_path(None),
        lambda: endpoints.network_pool_path("eth", ""),
        lambda: endpoints.multiple_network_pools_path("eth", []),
        lambda: endpoints.top_transactions_network_pools_path("eth", page=0),
        lambda: endpoints.top_volume_network_pools_path("eth", include="network"),
        lambda: endpoints.network_latest_pools_path("eth", page="2"),
        lambda: endpoints.latest_pools_path(page=-1),
        lambda: endpoints.token_info_path("eth", []),
        lambda: endpoints.pool_info_path(42, "0xPool"),
        lambda: endpoints.recent_tokens_path("eth", "top_pools"),
    ],
)
def test_invalid_arguments_raise_input_error(build):
    with pytest.raises(GeckoTerminalInputError):
        build()
