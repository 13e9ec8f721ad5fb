"""Configuration for the connpass API clients."""

from __future__ import annotations

import dataclasses
import os

from connpass import __version__
from connpass.errors import ConnpassConfigError

DEFAULT_ENDPOINT = "https://connpass.com/api/v1/event/"
DEFAULT_TIMEOUT_S = 30.0
PROJECT_URL = "https://pypi.org/project/connpass-py/"
DEFAULT_USER_AGENT = f"connpass-py/{__version__} (+{PROJECT_URL})"


@dataclasses.dataclass(frozen=True, slots=True)
class ConnpassClientConfig:
    """Settings shared by the async and blocking clients.

    Attributes
    ----------
    endpoint
        Event search endpoint URL.
    timeout_s
        Request timeout in seconds, applied to clients the library creates.
    user_agent
        Value of the ``User-Agent`` header sent with every request.

    """

    endpoint: str = DEFAULT_ENDPOINT
    timeout_s: float = DEFAULT_TIMEOUT_S
    user_agent: str = DEFAULT_USER_AGENT

    @staticmethod
    def _parse_timeout_from_env() -> float:
        raw_timeout = os.environ.get("CONNPASS_TIMEOUT_S")
        if raw_timeout is None:
            return DEFAULT_TIMEOUT_S

        try:
            timeout_s = float(raw_timeout)
        except ValueError as exc:
            raise ConnpassConfigError.invalid_timeout(raw_timeout) from exc

        # NaN fails this comparison too.
        if not timeout_s > 0:
            raise ConnpassConfigError.invalid_timeout(raw_timeout)
        return timeout_s

    @staticmethod
    def _read_non_empty(name: str, default: str) -> str:
        raw_value = os.environ.get(name)
        if raw_value is None:
            return default
        value = raw_value.strip()
        if not value:
            raise ConnpassConfigError.empty_value(name)
        return value

    @classmethod
    def from_env(cls) -> ConnpassClientConfig:
        """Build configuration from environment variables.

        Reads the following optional environment variables:

        - ``CONNPASS_ENDPOINT``: endpoint override
        - ``CONNPASS_TIMEOUT_S``: timeout in seconds (positive number)
        - ``CONNPASS_USER_AGENT``: ``User-Agent`` override

        Returns
        -------
        ConnpassClientConfig
            Configuration with environment overrides applied.

        Raises
        ------
        ConnpassConfigError
            If a variable is set but blank, or the timeout is invalid.

        """
        return cls(
            endpoint=cls._read_non_empty("CONNPASS_ENDPOINT", DEFAULT_ENDPOINT),
            timeout_s=cls._parse_timeout_from_env(),
            user_agent=cls._read_non_empty("CONNPASS_USER_AGENT", DEFAULT_USER_AGENT),
        )
