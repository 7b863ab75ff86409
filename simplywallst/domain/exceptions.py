"""Typed exceptions for snowflake fetching and field access."""

from typing import Optional


class SnowflakeError(Exception):
    """Base class for every error raised by this package."""


class SnowflakeFetchError(SnowflakeError):
    """Network, HTTP status or body decoding failure."""

    def __init__(self, symbol: str, message: str) -> None:
        self.symbol = symbol
        super().__init__(f"Failed to fetch snowflake for {symbol}: {message}")


class FieldAccessError(SnowflakeError, LookupError):
    """A field could not be read from the snowflake document."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(message)


class MissingFieldError(FieldAccessError):
    def __init__(self, field: str, reason: Optional[str] = None) -> None:
        super().__init__(field, f"Field {field!r} not found" + (f": {reason}" if reason else ""))


class FieldTypeError(FieldAccessError, TypeError):
    def __init__(self, field: str, expected: str, actual: object) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            field,
            f"Field {field!r} is not {expected}: got {type(actual).__name__} {actual!r}",
        )


class ScoreIndexError(FieldAccessError, IndexError):
    def __init__(self, field: str, index: int, length: int) -> None:
        self.index = index
        super().__init__(
            field,
            f"Score {field!r} (index {index}) out of range for {length} snowflake scores",
        )
