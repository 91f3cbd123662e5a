"""
Unit tests for whatsapp_gateway_methods.exceptions module.

Tests the custom exception hierarchy and the message precedence used by
`error_message_from_response`.
"""

import pytest

from whatsapp_gateway_methods.exceptions import (
    WhatsAppError,
    ConfigError,
    HandshakeError,
    GatewayError,
    ValidationError,
    NetworkError,
    error_message_from_response
)


class TestExceptionHierarchy:
    """Test the custom exception classes."""

    def test_whatsapp_error_base_class(self):
        err = WhatsAppError(
            message="Base error",
            status_code=500,
            error_code="E100",
            details={"key": "value"}
        )

        assert "Base error" in str(err)
        assert "500" in str(err)
        assert "E100" in str(err)
        assert "value" in str(err)

        err_dict = err.to_dict()
        assert err_dict["type"] == "WhatsAppError"
        assert err_dict["message"] == "Base error"

    @pytest.mark.parametrize("exc_class", [
        ConfigError, HandshakeError, GatewayError, ValidationError, NetworkError
    ])
    def test_all_errors_share_base(self, exc_class):
        assert issubclass(exc_class, WhatsAppError)

    def test_config_error(self):
        err = ConfigError("Missing api_key", missing=["api_key"])

        assert err.missing == ["api_key"]
        assert "ConfigError: Missing api_key" in str(err)

    def test_handshake_error(self):
        err = HandshakeError("bad", step="start", status_code=400)

        assert err.message == "bad"
        assert err.args[0] == "bad"
        assert "Step: start" in str(err)
        assert "Status Code: 400" in str(err)
        assert err.to_dict()["type"] == "HandshakeError"

    def test_gateway_error(self):
        err = GatewayError("Session not connected", endpoint="/message/send", status_code=400)

        assert "Endpoint: /message/send" in str(err)
        assert err.api_response is None

    def test_validation_error(self):
        err = ValidationError("Invalid recipient", field="to", value="123")

        assert "Invalid recipient" in str(err)
        assert "Field: to" in str(err)
        assert "Value: 123" in str(err)

    def test_network_error_default_message(self):
        assert NetworkError().message == "Network error occurred"


class TestErrorMessageFromResponse:
    """Test the message precedence for failed responses."""

    def test_body_message_wins(self):
        message = error_message_from_response(
            400, {"message": "bad"}, reason="Bad Request", default_message="Failed to start session"
        )
        assert message == "bad"

    def test_default_message_before_reason(self):
        message = error_message_from_response(
            400, {}, reason="Bad Request", default_message="Failed to check status"
        )
        assert message == "Failed to check status"

    def test_reason_when_no_default(self):
        assert error_message_from_response(503, None, reason="Service Unavailable") == "Service Unavailable"

    def test_generic_message_last(self):
        assert error_message_from_response(500) == "API request failed with status 500"

    def test_empty_body_message_ignored(self):
        message = error_message_from_response(400, {"message": ""}, reason="Bad Request")
        assert message == "API request failed with status 400"

    def test_non_dict_body_ignored(self):
        message = error_message_from_response(400, ["message"], reason="Bad Request")
        assert message == "API request failed with status 400"

    def test_reason_only_for_unparsed_body(self):
        parsed = error_message_from_response(500, {"success": False}, reason="Internal Server Error")
        unparsed = error_message_from_response(500, None, reason="Internal Server Error")

        assert parsed == "API request failed with status 500"
        assert unparsed == "Internal Server Error"
