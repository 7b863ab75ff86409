"""
Infrastructure adapter: Simply Wall St snowflake API → ISnowflakeSource.
All httpx-specific details (client lifecycle, status checks, JSON decoding)
are confined here; the rest of the codebase depends only on ISnowflakeSource.
"""

import logging
from typing import Any, Optional

import httpx

from simplywallst.domain.entities.snowflake import StockQuery
from simplywallst.domain.exceptions import SnowflakeFetchError
from simplywallst.domain.ports.snowflake_port import ISnowflakeSource
from simplywallst.infrastructure.config import SnowflakeSettings

logger = logging.getLogger(__name__)


class SimplyWallStSnowflakeSource(ISnowflakeSource):
    """Fetches snowflake documents with a plain GET (no headers, no auth)."""

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        endpoint: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        if endpoint is None or (client is None and timeout is None):
            settings = SnowflakeSettings.from_env()
            endpoint = settings.endpoint if endpoint is None else endpoint
            if client is None and timeout is None:
                timeout = settings.timeout
        self._endpoint = endpoint
        self._owns_client = client is None
        if client is None:
            self._client = httpx.Client(timeout=timeout)
            self._timeout = httpx.USE_CLIENT_DEFAULT
        else:
            # An injected client keeps its own timeout unless one is given here.
            self._client = client
            self._timeout = httpx.USE_CLIENT_DEFAULT if timeout is None else timeout

    def url_for(self, query: StockQuery) -> str:
        # Substituted verbatim: the API expects the raw EXCHANGE:TICKER segment.
        return self._endpoint.format(exchange=query.exchange, ticker=query.ticker)

    def fetch(self, query: StockQuery) -> dict[str, Any]:
        url = self.url_for(query)
        logger.debug("GET %s", url)
        try:
            response = self._client.get(url, timeout=self._timeout)
            logger.debug("GET %s -> %s", url, response.status_code)
            response.raise_for_status()
            document = response.json()
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise SnowflakeFetchError(query.symbol, str(exc)) from exc
        except ValueError as exc:
            raise SnowflakeFetchError(query.symbol, f"invalid JSON body: {exc}") from exc

        if not isinstance(document, dict):
            raise SnowflakeFetchError(
                query.symbol,
                f"expected a JSON object, got {type(document).__name__}",
            )
        return document

    def close(self) -> None:
        """Close the underlying httpx client if this adapter created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "SimplyWallStSnowflakeSource":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
