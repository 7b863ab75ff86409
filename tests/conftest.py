"""Shared test fixtures for simplywallst tests."""

from typing import Any, Optional

import pytest

from simplywallst.domain.entities.snowflake import StockQuery
from simplywallst.domain.exceptions import SnowflakeFetchError
from simplywallst.domain.ports.snowflake_port import ISnowflakeSource


class StubSource(ISnowflakeSource):
    """In-memory source that records every query it is asked for."""

    def __init__(
        self,
        document: Optional[dict[str, Any]] = None,
        error: Optional[Exception] = None,
    ) -> None:
        self.document = document
        self.error = error
        self.queries: list[StockQuery] = []

    def fetch(self, query: StockQuery) -> dict[str, Any]:
        self.queries.append(query)
        if self.error is not None:
            raise self.error
        return self.document


def _acme_document() -> dict[str, Any]:
    return {
        "companyName": "Acme",
        "uniqueSymbol": "ACM",
        "primaryExchangeSymbol": "NYSE",
        "primaryTickerSymbol": "ACM",
        "snowflakeColour": 2.5,
        "snowflakeScores": [3, 4, 1, 5, 2],
    }


@pytest.fixture
def acme_document() -> dict[str, Any]:
    return _acme_document()


@pytest.fixture
def acme_source() -> StubSource:
    return StubSource(document=_acme_document())


@pytest.fixture
def failing_source() -> StubSource:
    return StubSource(error=SnowflakeFetchError("NYSE:ACM", "connection refused"))
