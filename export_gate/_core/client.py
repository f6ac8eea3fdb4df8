"""
Blocking HTTP client for the monitoring cluster.

Usage:
    config = RestClientConfig(base_url="https://monitoring.example.com:9200")

    with RestClient(config) as client:
        response = client.perform_request("GET", "/", {"filter_path": "version.number"})

    # Or configure from the environment (EXPORT_GATE_URL, ...)
    client = RestClient(RestClientConfig.from_env())
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Union

import requests

from export_gate.errors import ClientConfigError, TransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


@dataclass
class RestClientConfig:
    """
    Connection settings for RestClient.

    Attributes:
        base_url: Scheme, host and port of the cluster (e.g. "http://localhost:9200")
        timeout: Per-request timeout in seconds
        username: HTTP basic auth user (requires password)
        password: HTTP basic auth password (requires username)
        headers: Extra headers sent with every request
        verify: TLS verification flag or path to a CA bundle
    """
    base_url: str
    timeout: float = DEFAULT_TIMEOUT
    username: Optional[str] = None
    password: Optional[str] = None
    headers: Dict[str, str] = field(default_factory=dict)
    verify: Union[bool, str] = True

    def __post_init__(self) -> None:
        """Validate configuration on creation."""
        self.validate()

    def validate(self) -> None:
        """Validate configuration values."""
        if not self.base_url or not self.base_url.startswith(("http://", "https://")):
            raise ClientConfigError(
                f"base_url must start with http:// or https://, got {self.base_url!r}"
            )

        if self.timeout <= 0:
            raise ClientConfigError(f"timeout must be positive, got {self.timeout}")

        if (self.username is None) != (self.password is None):
            raise ClientConfigError("username and password must be set together")

    @classmethod
    def from_env(cls) -> "RestClientConfig":
        """
        Build a config from EXPORT_GATE_* environment variables.

        Variables:
            EXPORT_GATE_URL: Base URL (required)
            EXPORT_GATE_TIMEOUT: Timeout in seconds
            EXPORT_GATE_USERNAME / EXPORT_GATE_PASSWORD: Basic auth
            EXPORT_GATE_VERIFY: "false" or "0" disables TLS verification,
                any other non-boolean value is a CA bundle path

        Raises:
            ClientConfigError: If a variable is missing or invalid
        """
        base_url = os.environ.get("EXPORT_GATE_URL")
        if not base_url:
            raise ClientConfigError("EXPORT_GATE_URL is not set")

        timeout = DEFAULT_TIMEOUT
        raw_timeout = os.environ.get("EXPORT_GATE_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as e:
                raise ClientConfigError(
                    f"EXPORT_GATE_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from e

        verify: Union[bool, str] = True
        raw_verify = os.environ.get("EXPORT_GATE_VERIFY")
        if raw_verify:
            lowered = raw_verify.strip().lower()
            if lowered in ("false", "0", "no"):
                verify = False
            elif lowered not in ("true", "1", "yes"):
                verify = raw_verify

        return cls(
            base_url=base_url,
            timeout=timeout,
            username=os.environ.get("EXPORT_GATE_USERNAME"),
            password=os.environ.get("EXPORT_GATE_PASSWORD"),
            verify=verify,
        )


class RestClient:
    """
    Thin wrapper around requests.Session for talking to one cluster.

    Every request uses the configured timeout; callers (including the
    version gate) do not impose their own.
    """

    def __init__(
        self,
        config: RestClientConfig,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config
        self._session = session or requests.Session()
        self._session.headers.update(config.headers)
        self._session.verify = config.verify
        if config.username is not None:
            self._session.auth = (config.username, config.password)

    def perform_request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        """
        Send a request and return the response.

        Args:
            method: HTTP method (e.g. "GET")
            path: Path relative to base_url, starting with "/"
            params: Query string parameters

        Returns:
            The requests.Response for a 2xx status

        Raises:
            TransportError: On connection failure, timeout or non-2xx status
        """
        url = f"{self.config.base_url.rstrip('/')}{path}"
        logger.debug(f"{method} {url} params={params}")

        try:
            response = self._session.request(
                method,
                url,
                params=params,
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"{method} {url} returned status {response.status_code}",
                status_code=response.status_code,
            )

        return response

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()
        logger.debug("RestClient closed")

    def __enter__(self) -> "RestClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
