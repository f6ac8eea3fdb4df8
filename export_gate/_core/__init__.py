"""
Core building blocks for export-gate.

This module handles:
- Version parsing and ordering
- The blocking HTTP client used to reach the monitoring cluster
"""

from export_gate._core.version import (
    GATE_VERSION,
    Version,
)
from export_gate._core.client import (
    RestClient,
    RestClientConfig,
)

__all__ = [
    # Version
    "GATE_VERSION",
    "Version",
    # Client
    "RestClient",
    "RestClientConfig",
]
