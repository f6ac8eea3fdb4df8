"""
Pytest configuration for export-gate tests.
"""

import pytest
from unittest.mock import MagicMock

from export_gate._core.version import Version


def _response(body=None, json_error=None):
    """Build a mock HTTP response whose .json() returns ``body``."""
    response = MagicMock()
    response.status_code = 200
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = body
    return response


@pytest.fixture
def make_client():
    """Factory for a mock client whose perform_request returns a version body."""

    def _make(version_number=None, body=None, error=None):
        client = MagicMock()
        if error is not None:
            client.perform_request.side_effect = error
        else:
            if body is None:
                body = {"version": {"number": version_number}}
            client.perform_request.return_value = _response(body)
        return client

    return _make


@pytest.fixture
def minimum_version():
    """Minimum version used across gate tests."""
    return Version.from_string("6.3.0")


@pytest.fixture
def owner_name():
    """Sample resource owner name."""
    return "xpack.monitoring.exporters.remote"


@pytest.fixture
def make_response():
    """Factory for a mock HTTP response carrying a JSON body."""
    return _response
