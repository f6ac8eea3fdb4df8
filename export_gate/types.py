"""
Type definitions for export-gate.

The version probe is modelled as a tagged result so each failure path can be
logged and tested on its own before it is collapsed into a single verdict.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from export_gate._core.version import Version


class ProbeOutcome(str, Enum):
    """
    Result of asking a remote cluster for its version.

    - OK: A version was read and parsed
    - TRANSPORT_ERROR: The request itself failed
    - MALFORMED_RESPONSE: The body did not contain version.number
    - INVALID_VERSION: version.number was present but unparsable
    """
    OK = "ok"
    TRANSPORT_ERROR = "transport_error"
    MALFORMED_RESPONSE = "malformed_response"
    INVALID_VERSION = "invalid_version"


@dataclass(frozen=True)
class VersionProbe:
    """
    Outcome of a single version request.

    Attributes:
        outcome: Which branch the probe ended in
        version: Parsed remote version (only when outcome is OK)
        raw_version: The version.number value as reported, if any
        error: The exception behind a failed probe
    """
    outcome: ProbeOutcome
    version: Optional["Version"] = None
    raw_version: Optional[object] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.outcome == ProbeOutcome.OK
