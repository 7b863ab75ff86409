"""
Domain entities for Simply Wall St snowflake data.
Zero external dependencies — pure Python dataclasses only.
"""

from dataclasses import dataclass

# Order of the five scores inside the API's snowflakeScores array.
SCORE_NAMES = ("value", "future", "past", "health", "income")


@dataclass(frozen=True)
class StockQuery:
    exchange: str
    ticker: str

    @property
    def symbol(self) -> str:
        """Exchange and ticker joined the way the snowflake endpoint expects."""
        return f"{self.exchange}:{self.ticker}"


@dataclass(frozen=True)
class SnowflakeScores:
    value: int
    future: int
    past: int
    health: int
    income: int


@dataclass(frozen=True)
class StockSnowflake:
    company_name: str
    unique_symbol: str
    exchange_symbol: str
    ticker_symbol: str
    snowflake_color: float
    scores: SnowflakeScores
