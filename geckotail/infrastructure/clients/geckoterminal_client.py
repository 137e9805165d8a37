from __future__ import annotations

from collections.abc import Sequence
import logging
from typing import Any

import httpx

from geckotail.domain.services import endpoints
from geckotail.shared.config import DEFAULT_GECKOTERMINAL_API_BASE


logger = logging.getLogger(__name__)


class GeckoTerminalClient:
    """Async wrapper around the GeckoTerminal v2 REST API.

    Every endpoint method validates its arguments before any request is made
    and then issues exactly one GET. Upstream, network and body decoding failures
    are logged and re-raised unchanged.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_GECKOTERMINAL_API_BASE,
        *,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
        log: logging.Logger | None = None,
    ):
        self._base_url = base_url
        self._logger = log or logger
        self._http = httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def __aenter__(self) -> "GeckoTerminalClient":
        return self

    async def __aexit__(self, *_) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    async def execute_query(self, path: str) -> Any:
        try:
            response = await self._http.get(path)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            self._logger.error(
                "geckoterminal_client: query_failed path=%s status=%s error=%s",
                path,
                exc.response.status_code,
                exc.response.text,
            )
            raise
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as exc:
            self._logger.error(
                "geckoterminal_client: query_failed path=%s error=%s",
                path,
                exc,
            )
            raise

        self._logger.info(
            "geckoterminal_client: query_ok path=%s status=%s",
            path,
            response.status_code,
        )
        return payload

    async def get_multiple_prices(self, network: str, addresses: Sequence[str]) -> Any:
        """Current USD prices of several tokens on a network."""
        return await self.execute_query(endpoints.multiple_prices_path(network, addresses))

    async def get_networks(self, page: int = 1) -> Any:
        return await self.execute_query(endpoints.networks_path(page))

    async def get_dexes(self, network: str, page: int = 1) -> Any:
        return await self.execute_query(endpoints.dexes_path(network, page))

    async def get_trending_pools(self, include: str = "", page: int = 1) -> Any:
        """Trending pools across all networks.

        ``include`` accepts base_token, quote_token, dex or network.
        """
        return await self.execute_query(endpoints.trending_pools_path(include, page))

    async def get_network_trending_pools(self, network: str, include: str = "", page: int = 1) -> Any:
        return await self.execute_query(
            endpoints.network_trending_pools_path(network, include, page)
        )

    async def get_network_pool(self, network: str, address: str, include: str = "") -> Any:
        return await self.execute_query(endpoints.network_pool_path(network, address, include))

    async def get_multiple_network_pools(
        self,
        network: str,
        addresses: Sequence[str],
        include: str = "",
    ) -> Any:
        return await self.execute_query(
            endpoints.multiple_network_pools_path(network, addresses, include)
        )

    async def get_top_transactions_network_pools(
        self,
        network: str,
        include: str = "",
        page: int = 1,
    ) -> Any:
        """Pools on a network with the most transactions over the past 24h."""
        return await self.execute_query(
            endpoints.top_transactions_network_pools_path(network, include, page)
        )

    async def get_top_volume_network_pools(
        self,
        network: str,
        include: str = "",
        page: int = 1,
    ) -> Any:
        """Pools on a network with the most USD volume over the past 24h."""
        return await self.execute_query(
            endpoints.top_volume_network_pools_path(network, include, page)
        )

    async def get_network_latest_pools(self, network: str, include: str = "", page: int = 1) -> Any:
        return await self.execute_query(
            endpoints.network_latest_pools_path(network, include, page)
        )

    async def get_latest_pools(self, include: str = "", page: int = 1) -> Any:
        return await self.execute_query(endpoints.latest_pools_path(include, page))

    async def get_token_info(
        self,
        network: str,
        addresses: Sequence[str],
        include: str = "",
    ) -> Any:
        """Token info; a single address uses the plain route, several use ``tokens/multi``."""
        return await self.execute_query(endpoints.token_info_path(network, addresses, include))

    async def get_pool_info(self, network: str, pool_address: str) -> Any:
        return await self.execute_query(endpoints.pool_info_path(network, pool_address))

    async def get_recent_tokens(self, network: str = "", include: str = "") -> Any:
        """The 100 most recently updated tokens, optionally limited to one network."""
        return await self.execute_query(endpoints.recent_tokens_path(network, include))

    async def get_trades(
        self,
        network: str,
        pool_address: str,
        trade_volume: int | float = 0,
    ) -> Any:
        """Last 300 trades of a pool over the past 24h above ``trade_volume`` USD."""
        return await self.execute_query(
            endpoints.trades_path(network, pool_address, trade_volume)
        )
