"""
Environment-driven settings for the Simply Wall St adapter.

Values are read from os.environ after load_dotenv(), so a local .env file can
override the defaults during development:

    SIMPLYWALLST_ENDPOINT=https://simplywall.st/api/snowflake/{exchange}:{ticker}
    SIMPLYWALLST_TIMEOUT=10
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_ENDPOINT = "https://simplywall.st/api/snowflake/{exchange}:{ticker}"
DEFAULT_TIMEOUT = 10.0


@dataclass(frozen=True)
class SnowflakeSettings:
    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_env(cls) -> "SnowflakeSettings":
        load_dotenv()
        raw_timeout = os.environ.get("SIMPLYWALLST_TIMEOUT")
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError as exc:
            raise ValueError(
                f"SIMPLYWALLST_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
            ) from exc
        return cls(
            endpoint=os.environ.get("SIMPLYWALLST_ENDPOINT") or DEFAULT_ENDPOINT,
            timeout=timeout,
        )
