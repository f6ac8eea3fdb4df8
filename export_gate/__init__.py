"""
export-gate: Minimum version gate for monitoring exporters.

Before a monitoring exporter publishes to a remote cluster, it must confirm
the cluster runs at least a required version. This package provides:
- VersionGate, a read-only check that folds every failure into False
- Version, a totally ordered version type with pre-release support
- RestClient, a blocking requests-based transport for the cluster

Quickstart:
    from export_gate import RestClient, RestClientConfig, VersionGate

    gate = VersionGate("remote-exporter", "6.3.0")
    client = RestClient(RestClientConfig(base_url="http://localhost:9200"))

    if gate.check(client):
        print("cluster is supported")
"""

from export_gate.types import (
    ProbeOutcome,
    VersionProbe,
)
from export_gate.errors import (
    ExportGateError,
    TransportError,
    MalformedResponseError,
    InvalidVersionError,
    ClientConfigError,
)
from export_gate._core.version import (
    GATE_VERSION,
    Version,
)
from export_gate._core.client import (
    RestClient,
    RestClientConfig,
)
from export_gate.gate import (
    HttpResource,
    VersionGate,
)

__version__ = GATE_VERSION

__all__ = [
    # Version
    "__version__",
    "GATE_VERSION",
    "Version",
    # Types
    "ProbeOutcome",
    "VersionProbe",
    # Errors
    "ExportGateError",
    "TransportError",
    "MalformedResponseError",
    "InvalidVersionError",
    "ClientConfigError",
    # Client
    "RestClient",
    "RestClientConfig",
    # Gate
    "HttpResource",
    "VersionGate",
]
