"""
Port (interface) for snowflake data sources.
Infrastructure adapters (e.g. SimplyWallStSnowflakeSource) must implement this interface.
"""

from abc import ABC, abstractmethod
from typing import Any

from simplywallst.domain.entities.snowflake import StockQuery


class ISnowflakeSource(ABC):
    @abstractmethod
    def fetch(self, query: StockQuery) -> dict[str, Any]:
        """Fetch the raw snowflake document for *query*.

        Raises:
            SnowflakeFetchError: on network, HTTP status or decoding failure.
        """
        ...
