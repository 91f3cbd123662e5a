"""
Response and request models for WhatsApp Gateway Methods SDK.

The gateway and the QR handshake speak two different contracts: message
sends answer with the ``{success, message, data, error}`` envelope
(``ApiResult``) while the auth endpoints return free-form bodies
(``QrSessionResult``, ``SessionStatus``).
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Dict, Any, Generic, TypeVar
from enum import Enum

from .constants import SessionStatusValues

T = TypeVar("T")


class ConnectionState(Enum):
    """Session states the gateway is known to report."""
    PENDING = SessionStatusValues.PENDING
    CONNECTED = SessionStatusValues.CONNECTED
    EXPIRED = SessionStatusValues.EXPIRED
    FAILED = SessionStatusValues.FAILED


@dataclass
class ApiErrorDetail:
    """Error block of the gateway envelope."""
    code: str = ""
    details: str = ""

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ApiErrorDetail":
        return cls(
            code=str(data.get("code", "")),
            details=str(data.get("details", ""))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "details": self.details}


@dataclass
class ApiResult(Generic[T]):
    """
    Standardized envelope returned by message-sending operations.

    Attributes:
        success: Whether the gateway accepted the request
        message: Human-readable status message from the gateway
        data: Operation-specific payload, if any
        error: Error code and details, if any
        timestamp: When the result was received
        raw: The decoded response body as received
    """
    success: bool
    message: str = ""
    data: Optional[T] = None
    error: Optional[ApiErrorDetail] = None
    timestamp: datetime = field(default_factory=datetime.now)
    raw: Dict[str, Any] = field(default_factory=dict, repr=False)

    @classmethod
    def from_dict(cls, body: Dict[str, Any]) -> "ApiResult":
        """Build a result from a decoded gateway response."""
        error = body.get("error")
        if isinstance(error, dict):
            error_detail = ApiErrorDetail.from_dict(error)
        elif error:
            # Some gateway versions send a bare string
            error_detail = ApiErrorDetail(code="", details=str(error))
        else:
            error_detail = None

        return cls(
            success=bool(body.get("success", False)),
            message=str(body.get("message") or ""),
            data=body.get("data"),
            error=error_detail,
            raw=dict(body)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the wire envelope; absent ``data``/``error`` are omitted."""
        result: Dict[str, Any] = {
            "success": self.success,
            "message": self.message
        }
        if self.data is not None:
            result["data"] = self.data
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


@dataclass(frozen=True)
class QrSessionResult:
    """
    Result of starting a QR session.

    ``qr`` is always empty here: the QR payload is fetched by a separate
    call to ``QrSession.fetch_qr(qr_endpoint)``.
    """
    qr: str
    qr_endpoint: str


class SessionStatus(dict):
    """
    Decoded body of the session status endpoint.

    A plain mapping holding every field the gateway returned, plus
    accessors for the ``status`` field.
    """

    @property
    def status(self) -> str:
        return str(self.get("status") or "")

    @property
    def state(self) -> Optional[ConnectionState]:
        """Known state for ``status``, or None if the value is unrecognised."""
        try:
            return ConnectionState(self.status.lower())
        except ValueError:
            return None

    @property
    def is_connected(self) -> bool:
        return self.state is ConnectionState.CONNECTED

    @property
    def is_terminal(self) -> bool:
        """True once the session cannot progress without a new start."""
        return self.state in (ConnectionState.CONNECTED, ConnectionState.EXPIRED, ConnectionState.FAILED)


@dataclass
class SendMessageParams:
    """Parameters for a text message."""
    session_id: str
    to: str
    message: str

    def to_payload(self) -> Dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "to": self.to,
            "message": self.message
        }


@dataclass
class SendMediaParams:
    """Parameters for a media (image, video, document) message."""
    session_id: str
    to: str
    media_url: str
    caption: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "sessionId": self.session_id,
            "to": self.to,
            "mediaUrl": self.media_url
        }

        # Add caption if provided
        if self.caption:
            payload["caption"] = self.caption

        return payload


@dataclass
class SendLocationParams:
    """Parameters for a location message."""
    session_id: str
    to: str
    latitude: float
    longitude: float
    description: Optional[str] = None

    def to_payload(self) -> Dict[str, Any]:
        payload = {
            "sessionId": self.session_id,
            "to": self.to,
            "latitude": self.latitude,
            "longitude": self.longitude
        }

        if self.description:
            payload["description"] = self.description

        return payload
