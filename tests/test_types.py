"""
Tests for export_gate.types module.
"""

from export_gate._core.version import Version
from export_gate.errors import TransportError
from export_gate.types import ProbeOutcome, VersionProbe


class TestProbeOutcome:
    """Tests for ProbeOutcome enum."""

    def test_values(self):
        assert ProbeOutcome.OK.value == "ok"
        assert ProbeOutcome.TRANSPORT_ERROR.value == "transport_error"
        assert ProbeOutcome.MALFORMED_RESPONSE.value == "malformed_response"
        assert ProbeOutcome.INVALID_VERSION.value == "invalid_version"

    def test_string_enum(self):
        assert ProbeOutcome.OK == "ok"


class TestVersionProbe:
    """Tests for VersionProbe dataclass."""

    def test_ok_probe(self):
        probe = VersionProbe(ProbeOutcome.OK, version=Version(7, 3, 1), raw_version="7.3.1")
        assert probe.ok is True
        assert probe.error is None

    def test_failed_probe(self):
        error = TransportError("Connection refused")
        probe = VersionProbe(ProbeOutcome.TRANSPORT_ERROR, error=error)
        assert probe.ok is False
        assert probe.version is None
        assert probe.error is error
