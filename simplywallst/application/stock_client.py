"""
StockClient: typed, read-only accessors over one stock's snowflake document.

Each instance fetches its document at most once, at construction. The plain
constructor logs a failed fetch and leaves the instance without a document,
so every accessor raises MissingFieldError afterwards; StockClient.fetch()
raises SnowflakeFetchError instead and never yields a degraded instance.
Depends only on Domain ports and entities; the default HTTP adapter is
imported lazily when no source is injected.
"""

import logging
from typing import TYPE_CHECKING, Any, Optional

from simplywallst.domain.entities.snowflake import (
    SCORE_NAMES,
    SnowflakeScores,
    StockQuery,
    StockSnowflake,
)
from simplywallst.domain.exceptions import (
    FieldTypeError,
    MissingFieldError,
    ScoreIndexError,
    SnowflakeFetchError,
)
from simplywallst.domain.ports.snowflake_port import ISnowflakeSource

if TYPE_CHECKING:
    from simplywallst.infrastructure.snowflake.simplywallst_adapter import (
        SimplyWallStSnowflakeSource,
    )

logger = logging.getLogger(__name__)

_MISSING = object()


def _default_source() -> "SimplyWallStSnowflakeSource":
    from simplywallst.infrastructure.snowflake.simplywallst_adapter import (
        SimplyWallStSnowflakeSource,
    )
    return SimplyWallStSnowflakeSource()


def _fetch_document(query: StockQuery, source: Optional[ISnowflakeSource]) -> dict[str, Any]:
    if source is not None:
        return source.fetch(query)
    with _default_source() as owned:
        return owned.fetch(query)


class StockClient:
    """Snowflake metrics for a single stock, e.g. ``StockClient("NYSE", "ACM")``."""

    def __init__(
        self,
        exchange: str,
        ticker: str,
        source: Optional[ISnowflakeSource] = None,
    ) -> None:
        query = StockQuery(exchange, ticker)
        document = None
        try:
            document = _fetch_document(query, source)
        except SnowflakeFetchError:
            logger.exception("Snowflake fetch failed for %s", query.symbol)
        self._init_state(query, document)

    def _init_state(self, query: StockQuery, document: Optional[dict[str, Any]]) -> None:
        self._query = query
        self._document = document
        self._scores: Optional[tuple[int, ...]] = None

    @classmethod
    def fetch(
        cls,
        exchange: str,
        ticker: str,
        source: Optional[ISnowflakeSource] = None,
    ) -> "StockClient":
        """Fetch and return a populated client.

        Raises:
            SnowflakeFetchError: if the document could not be fetched.
        """
        query = StockQuery(exchange, ticker)
        document = _fetch_document(query, source)
        return cls.from_document(query, document)

    @classmethod
    def from_document(cls, query: StockQuery, document: dict[str, Any]) -> "StockClient":
        """Wrap an already-parsed snowflake document without any network access."""
        client = cls.__new__(cls)
        client._init_state(query, document)
        return client

    @property
    def query(self) -> StockQuery:
        return self._query

    @property
    def is_loaded(self) -> bool:
        return self._document is not None

    def __repr__(self) -> str:
        state = "loaded" if self.is_loaded else "empty"
        return f"StockClient({self._query.symbol!r}, {state})"

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    def _get(self, field: str) -> Any:
        if self._document is None:
            raise MissingFieldError(field, "no snowflake document was fetched")
        value = self._document.get(field, _MISSING)
        if value is _MISSING:
            raise MissingFieldError(field)
        return value

    def _get_string(self, field: str) -> str:
        value = self._get(field)
        if not isinstance(value, str):
            raise FieldTypeError(field, "a string", value)
        return value

    def company_name(self) -> str:
        return self._get_string("companyName")

    def unique_symbol(self) -> str:
        """Combined exchange and ticker identifier, as reported by the API."""
        return self._get_string("uniqueSymbol")

    def exchange_symbol(self) -> str:
        return self._get_string("primaryExchangeSymbol")

    def ticker_symbol(self) -> str:
        return self._get_string("primaryTickerSymbol")

    def snowflake_color(self) -> float:
        value = self._get("snowflakeColour")
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise FieldTypeError("snowflakeColour", "a number", value)
        return float(value)

    # ------------------------------------------------------------------
    # Scores: Value, Future, Past, Health, Income
    # ------------------------------------------------------------------

    def snowflake_scores(self) -> list[int]:
        """Return the snowflake scores in API order.

        The array is parsed once and memoized; every call returns a new list
        built from that cache.

        Raises:
            MissingFieldError: if the document or the field is absent.
            FieldTypeError: if the field is not an array of integers.
        """
        if self._scores is None:
            self._scores = self._parse_scores()
        return list(self._scores)

    def _parse_scores(self) -> tuple[int, ...]:
        raw = self._get("snowflakeScores")
        if not isinstance(raw, list):
            raise FieldTypeError("snowflakeScores", "an array", raw)
        scores = []
        for i, item in enumerate(raw):
            if isinstance(item, bool) or not isinstance(item, int):
                raise FieldTypeError(f"snowflakeScores[{i}]", "an integer", item)
            scores.append(item)
        return tuple(scores)

    def _score(self, index: int) -> int:
        self.snowflake_scores()
        if index >= len(self._scores):
            raise ScoreIndexError(SCORE_NAMES[index], index, len(self._scores))
        return self._scores[index]

    def value(self) -> int:
        """The "value" score. This is not the stock's price."""
        return self._score(0)

    def future(self) -> int:
        return self._score(1)

    def past(self) -> int:
        return self._score(2)

    def health(self) -> int:
        return self._score(3)

    def income(self) -> int:
        return self._score(4)

    def scores(self) -> SnowflakeScores:
        return SnowflakeScores(
            value=self.value(),
            future=self.future(),
            past=self.past(),
            health=self.health(),
            income=self.income(),
        )

    def to_snowflake(self) -> StockSnowflake:
        """Snapshot every recognized field; raises on the first unreadable one."""
        return StockSnowflake(
            company_name=self.company_name(),
            unique_symbol=self.unique_symbol(),
            exchange_symbol=self.exchange_symbol(),
            ticker_symbol=self.ticker_symbol(),
            snowflake_color=self.snowflake_color(),
            scores=self.scores(),
        )
