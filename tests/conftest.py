"""
Shared fixtures for whatsapp_gateway_methods tests.
"""

import os
import sys
from unittest.mock import Mock

import pytest

# Add the parent directory to the path so we can import the module
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

REQUEST_TARGET = 'whatsapp_gateway_methods.transport.requests.request'


def make_response(status_code=200, json_data=None, reason="OK", json_error=False):
    """Build a mocked requests.Response."""
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.headers = {}
    if json_error:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
    else:
        response.json.return_value = json_data if json_data is not None else {}
    return response


@pytest.fixture
def response_factory():
    """Factory for mocked HTTP responses."""
    return make_response


@pytest.fixture
def clean_env(monkeypatch):
    """Remove gateway credentials from the environment."""
    for name in ("WHATSAPP_API_URL", "WHATSAPP_API_KEY",
                 "VITE_WHATSAPP_API_URL", "VITE_WHATSAPP_API_KEY"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
