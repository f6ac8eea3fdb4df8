"""
Minimum version gate for monitoring exporters.

Before an exporter publishes to a remote monitoring cluster it must confirm
the cluster runs at least a minimum version. VersionGate asks the cluster
for its version with a single filtered GET and reports a bool verdict.
Every failure (unreachable cluster, malformed body, unparsable version) is
logged and reported as unsupported; nothing is raised to the caller.

Usage:
    from export_gate import RestClient, RestClientConfig, VersionGate

    gate = VersionGate("xpack.monitoring.exporters.remote", "6.3.0")

    with RestClient(RestClientConfig(base_url="http://localhost:9200")) as client:
        if gate.check(client):
            ...  # safe to publish
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Union

from export_gate._core.version import Version
from export_gate.errors import InvalidVersionError, MalformedResponseError, TransportError
from export_gate.types import ProbeOutcome, VersionProbe


class HttpResource(ABC):
    """
    A remote resource an exporter must verify before publishing.

    Attributes:
        resource_owner_name: User-recognizable name used in diagnostics
    """

    def __init__(self, resource_owner_name: str) -> None:
        if resource_owner_name is None:
            raise ValueError("resource_owner_name is required")
        self.resource_owner_name = resource_owner_name

    @abstractmethod
    def check(self, client: Any) -> bool:
        """Return True if the resource is ready on the remote cluster."""


def extract_version_number(body: Any) -> str:
    """
    Pull version.number out of a decoded response body.

    The response should be filtered down to {"version": {"number": "..."}}
    but other fields are tolerated.

    Raises:
        MalformedResponseError: If the field is absent or not a string
    """
    if not isinstance(body, dict):
        raise MalformedResponseError(
            f"expected a JSON object, got {type(body).__name__}"
        )

    version = body.get("version")
    if not isinstance(version, dict):
        raise MalformedResponseError("response has no 'version' object")

    number = version.get("number")
    if not isinstance(number, str):
        raise MalformedResponseError("response has no string 'version.number'")

    return number


class VersionGate(HttpResource):
    """
    Verifies that a remote cluster reports a version on or after a minimum.

    The gate holds only immutable configuration, so a single instance can
    be checked repeatedly; every check performs a fresh request.
    """

    # Limits the response to just the version number
    PARAMETERS: Dict[str, str] = {"filter_path": "version.number"}

    def __init__(
        self,
        resource_owner_name: str,
        minimum_version: Union[Version, str],
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Create a new VersionGate.

        Args:
            resource_owner_name: The user-recognizable name
            minimum_version: The minimum supported version, as a Version or string
            logger: Logger for diagnostics (defaults to this module's logger)

        Raises:
            ValueError: If either argument is None or the version string is invalid
        """
        super().__init__(resource_owner_name)

        if minimum_version is None:
            raise ValueError("minimum_version is required")
        if not isinstance(minimum_version, Version):
            minimum_version = Version.from_string(minimum_version)

        self._minimum_version = minimum_version
        self._logger = logger or logging.getLogger(__name__)

    @property
    def minimum_version(self) -> Version:
        return self._minimum_version

    def check(self, client: Any) -> bool:
        """
        Verify that the minimum version is supported on the remote cluster.

        If it is not, nothing can be done except wait until it is. There is
        no publishing aspect to this operation.

        Args:
            client: Object exposing perform_request(method, path, params)

        Returns:
            True if the remote cluster runs a supported version
        """
        probe = self._probe(client)

        if probe.outcome == ProbeOutcome.TRANSPORT_ERROR:
            self._logger.error(
                f"failed to verify minimum version [{self._minimum_version}] "
                f"on the [{self.resource_owner_name}] monitoring cluster: {probe.error}",
                exc_info=probe.error,
            )
            return False

        if probe.outcome == ProbeOutcome.MALFORMED_RESPONSE:
            self._logger.error(
                f"failed to verify minimum version [{self._minimum_version}] "
                f"on the [{self.resource_owner_name}] monitoring cluster: "
                f"malformed version response ({probe.error})",
                exc_info=probe.error,
            )
            return False

        if probe.outcome == ProbeOutcome.INVALID_VERSION:
            self._logger.error(
                f"failed to verify minimum version [{self._minimum_version}] "
                f"on the [{self.resource_owner_name}] monitoring cluster: "
                f"unable to parse version [{probe.raw_version}]",
                exc_info=probe.error,
            )
            return False

        version = probe.version
        if version.on_or_after(self._minimum_version):
            self._logger.debug(
                f"version [{version}] >= [{self._minimum_version}] "
                f"and supported for [{self.resource_owner_name}]"
            )
            return True

        self._logger.error(
            f"version [{version}] < [{self._minimum_version}] "
            f"and NOT supported for [{self.resource_owner_name}]"
        )
        return False

    def _probe(self, client: Any) -> VersionProbe:
        """Fetch and parse the remote version without logging or raising."""
        try:
            response = client.perform_request("GET", "/", dict(self.PARAMETERS))
        except Exception as e:
            return VersionProbe(ProbeOutcome.TRANSPORT_ERROR, error=e)

        if not callable(getattr(response, "json", None)):
            error = TransportError(
                f"client returned {type(response).__name__} instead of a response"
            )
            return VersionProbe(ProbeOutcome.TRANSPORT_ERROR, error=error)

        status_code = getattr(response, "status_code", None)
        if isinstance(status_code, int) and not 200 <= status_code < 300:
            error = TransportError(
                f"GET / returned status {status_code}", status_code=status_code
            )
            return VersionProbe(ProbeOutcome.TRANSPORT_ERROR, error=error)

        try:
            number = extract_version_number(response.json())
        except MalformedResponseError as e:
            return VersionProbe(ProbeOutcome.MALFORMED_RESPONSE, error=e)
        except Exception as e:
            # Undecodable body
            error = MalformedResponseError(f"response body is not JSON: {e}")
            error.__cause__ = e
            return VersionProbe(ProbeOutcome.MALFORMED_RESPONSE, error=error)

        try:
            version = Version.from_string(number)
        except InvalidVersionError as e:
            return VersionProbe(ProbeOutcome.INVALID_VERSION, raw_version=number, error=e)

        return VersionProbe(ProbeOutcome.OK, version=version, raw_version=number)

    def __repr__(self) -> str:
        return (
            f"VersionGate(resource_owner_name={self.resource_owner_name!r}, "
            f"minimum_version='{self._minimum_version}')"
        )
