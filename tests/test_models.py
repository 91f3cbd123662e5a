"""
Unit tests for whatsapp_gateway_methods.models module.
"""

from whatsapp_gateway_methods.models import (
    ApiResult,
    ApiErrorDetail,
    ConnectionState,
    SendLocationParams,
    SendMediaParams,
    SendMessageParams,
    SessionStatus
)


class TestApiResult:
    """Test the gateway envelope."""

    def test_from_dict_success(self):
        result = ApiResult.from_dict({
            "success": True,
            "message": "Message sent",
            "data": {"messageId": "abc"}
        })

        assert result.success is True
        assert result.message == "Message sent"
        assert result.data == {"messageId": "abc"}
        assert result.error is None

    def test_from_dict_with_error(self):
        result = ApiResult.from_dict({
            "success": False,
            "message": "Failed",
            "error": {"code": "SESSION_NOT_FOUND", "details": "No session 'x'"}
        })

        assert result.success is False
        assert result.error == ApiErrorDetail(code="SESSION_NOT_FOUND", details="No session 'x'")

    def test_from_dict_with_string_error(self):
        result = ApiResult.from_dict({"success": False, "error": "boom"})

        assert result.error.details == "boom"
        assert result.message == ""

    def test_raw_body_is_kept(self):
        body = {"success": True, "message": "ok", "extra": 1}

        assert ApiResult.from_dict(body).raw == body

    def test_to_dict_omits_absent_fields(self):
        assert ApiResult(success=True, message="ok").to_dict() == {"success": True, "message": "ok"}

        result = ApiResult(success=False, message="no", error=ApiErrorDetail("E1", "bad"))
        assert result.to_dict() == {
            "success": False,
            "message": "no",
            "error": {"code": "E1", "details": "bad"}
        }


class TestSessionStatus:
    """Test the status mapping."""

    def test_keeps_every_field(self):
        body = {"status": "pending", "qrAttempts": 2, "meta": {"a": 1}}
        status = SessionStatus(body)

        assert status == body
        assert status["qrAttempts"] == 2

    def test_state_mapping(self):
        assert SessionStatus({"status": "pending"}).state is ConnectionState.PENDING
        assert SessionStatus({"status": "CONNECTED"}).state is ConnectionState.CONNECTED
        assert SessionStatus({"status": "expired"}).is_terminal
        assert not SessionStatus({"status": "pending"}).is_terminal

    def test_missing_status(self):
        status = SessionStatus({})

        assert status.status == ""
        assert status.state is None
        assert not status.is_connected

    def test_null_status(self):
        status = SessionStatus({"status": None, "reason": "logged out"})

        assert status.status == ""
        assert status.state is None
        assert status["reason"] == "logged out"


class TestSendParams:
    """Test request payload building."""

    def test_message_payload(self):
        params = SendMessageParams("s1", "6281234567890", "Hello")

        assert params.to_payload() == {"sessionId": "s1", "to": "6281234567890", "message": "Hello"}

    def test_media_payload_optional_caption(self):
        without = SendMediaParams("s1", "6281234567890", "https://e.com/a.jpg").to_payload()
        with_caption = SendMediaParams("s1", "6281234567890", "https://e.com/a.jpg", "Hi").to_payload()

        assert "caption" not in without
        assert with_caption["caption"] == "Hi"
        assert with_caption["mediaUrl"] == "https://e.com/a.jpg"

    def test_location_payload_optional_description(self):
        params = SendLocationParams("s1", "6281234567890", -6.2, 106.8)

        assert params.to_payload() == {
            "sessionId": "s1",
            "to": "6281234567890",
            "latitude": -6.2,
            "longitude": 106.8
        }

        params.description = "Jakarta"
        assert params.to_payload()["description"] == "Jakarta"
