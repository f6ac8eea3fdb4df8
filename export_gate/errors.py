"""
Exception types for export-gate.

Provides typed exceptions for:
- Transport failures talking to the monitoring cluster
- Malformed responses and unparsable version strings
- Invalid client configuration
"""

from __future__ import annotations

from typing import Optional


class ExportGateError(Exception):
    """Base exception for all export-gate errors."""
    pass


# =============================================================================
# Transport Errors
# =============================================================================


class TransportError(ExportGateError):
    """
    Raised when a request to the monitoring cluster fails.

    This includes:
    - Connection failures (refused, DNS, TLS)
    - Timeouts enforced by the client
    - Responses with a non-2xx status code

    Attributes:
        status_code: HTTP status of the response, if one was received
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"TransportError({str(self)!r}, status_code={self.status_code!r})"


class ClientConfigError(ExportGateError):
    """
    Raised when client configuration is invalid.

    This includes:
    - Missing or non-HTTP base URL
    - Non-positive timeout
    - Username without password (or the reverse)
    """
    pass


# =============================================================================
# Response Errors
# =============================================================================


class MalformedResponseError(ExportGateError):
    """
    Raised when a successful response does not carry a version number.

    The body must decode to {"version": {"number": "<string>"}}; extra
    fields are allowed.
    """
    pass


class InvalidVersionError(ExportGateError, ValueError):
    """Raised when a version string cannot be parsed."""

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(f"Invalid version string: {version!r}")
