"""
Use-case: retrieve the snowflake snapshot for a stock on a given exchange.
Depends only on Domain ports and entities — no infrastructure imports.
"""

from simplywallst.application.stock_client import StockClient
from simplywallst.domain.entities.snowflake import StockSnowflake
from simplywallst.domain.ports.snowflake_port import ISnowflakeSource


class GetStockSnowflakeUseCase:
    def __init__(self, source: ISnowflakeSource) -> None:
        self._source = source

    def execute(self, exchange: str, ticker: str) -> StockSnowflake:
        """Fetch the snowflake for *exchange*:*ticker* (both uppercased).

        Raises:
            ValueError: if *exchange* or *ticker* is blank.
            SnowflakeFetchError: if the document could not be fetched.
            FieldAccessError: if a recognized field is missing or mistyped.
        """
        if not exchange or not exchange.strip():
            raise ValueError("exchange must be a non-empty string")
        if not ticker or not ticker.strip():
            raise ValueError("ticker must be a non-empty string")
        client = StockClient.fetch(
            exchange.upper().strip(),
            ticker.upper().strip(),
            source=self._source,
        )
        return client.to_snowflake()
