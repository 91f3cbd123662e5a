"""
QR session handshake for WhatsApp Gateway Methods SDK.

A WhatsApp session on the gateway is authenticated by scanning a QR code
with the phone. ``QrSession`` drives the three gateway calls involved:

    1. start()            -> POST /auth/start, returns the QR endpoint
    2. fetch_qr(endpoint) -> GET <host root><endpoint>, returns the QR string
    3. check_status()     -> GET /auth/status/<session id>

The object only relays calls; it does not track which step the session is
in. Polling ``check_status`` until the session connects is left to the
caller, who owns the interval and the overall deadline.

Usage:
    session = QrSession("my-session", api_url="https://gw.example.com/api", api_key="...")
    result = await session.start()
    qr = await session.fetch_qr(result.qr_endpoint)
    status = await session.check_status()
"""

import logging
from typing import Optional, Dict, Any

from .config import ConfigResolver, ClientCredentials, resolve_credentials
from .constants import (
    API_ROOT_SEGMENT,
    DEFAULT_TIMEOUT,
    Endpoints,
    ErrorMessages
)
from .exceptions import HandshakeError, error_message_from_response
from .models import QrSessionResult, SessionStatus
from .transport import send_request, parse_json, is_success
from .validators import validate_session_id, validate_qr_endpoint

# Set up logging
logger = logging.getLogger(__name__)


def strip_api_root(base_url: str) -> str:
    """
    Remove one trailing API routing segment from ``base_url``.

    "https://h.com/api" -> "https://h.com"; URLs without the trailing
    segment are returned unchanged.
    """
    if base_url.endswith(API_ROOT_SEGMENT):
        return base_url[:-len(API_ROOT_SEGMENT)]
    return base_url


class QrSession:
    """
    Handshake helper bound to one gateway session id.

    Session id, base URL and API key are fixed for the lifetime of the
    instance. Calls share no mutable state, so concurrent awaits on the same
    instance are independent round-trips.

    Example:
        session = QrSession("sales-desk")   # credentials from the environment
        started = await session.start()
        qr = await session.fetch_qr(started.qr_endpoint)
    """

    def __init__(
        self,
        session_id: str,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        config_resolver: Optional[ConfigResolver] = None,
        timeout: float = DEFAULT_TIMEOUT,
        enable_logging: bool = True
    ):
        """
        Initialize a QR session.

        Args:
            session_id: Caller-chosen session identifier
            api_url: Gateway base URL (or WHATSAPP_API_URL via the resolver)
            api_key: Gateway API key (or WHATSAPP_API_KEY via the resolver)
            config_resolver: Callable mapping a setting name to its value;
                defaults to the process environment
            timeout: Request timeout in seconds
            enable_logging: Enable request/response logging

        Raises:
            ConfigError: If the base URL or API key is missing
            ValidationError: If session_id is empty
        """
        validate_session_id(session_id, strict=True)
        credentials = resolve_credentials(api_url, api_key, config_resolver)

        self._session_id = session_id
        self._credentials = credentials
        self.timeout = timeout
        self.enable_logging = enable_logging

        if self.enable_logging:
            logger.info(f"QR session initialized - Session: {self._session_id}")

    @classmethod
    def from_credentials(
        cls,
        session_id: str,
        credentials: ClientCredentials,
        **kwargs
    ) -> "QrSession":
        """Create a session from already resolved credentials."""
        return cls(
            session_id,
            api_url=credentials.base_url,
            api_key=credentials.api_key,
            **kwargs
        )

    @property
    def session_id(self) -> str:
        return self._session_id

    @property
    def base_url(self) -> str:
        return self._credentials.base_url

    @property
    def api_key(self) -> str:
        return self._credentials.api_key

    @property
    def root_url(self) -> str:
        """Host root that QR endpoints are resolved against."""
        return strip_api_root(self.base_url)

    def __repr__(self):
        return f"QrSession(session_id={self._session_id!r}, base_url={self.base_url!r})"

    def _fail(
        self,
        step: str,
        status_code: int,
        body: Optional[Any],
        default_message: str
    ) -> HandshakeError:
        message = error_message_from_response(status_code, body, default_message=default_message)
        logger.error(f"QR session {self._session_id} {step} failed ({status_code}): {message}")
        return HandshakeError(
            message,
            step=step,
            status_code=status_code,
            response_data=body if isinstance(body, dict) else None
        )

    async def start(self) -> QrSessionResult:
        """
        Start the session on the gateway.

        Returns:
            QrSessionResult whose ``qr`` is empty and whose ``qr_endpoint``
            is the path to pass to ``fetch_qr``

        Raises:
            HandshakeError: On a non-2xx response or a body that is not JSON
            NetworkError: If the gateway could not be reached
        """
        response = await send_request(
            "POST",
            f"{self.base_url}{Endpoints.AUTH_START}",
            self.api_key,
            payload={"sessionId": self._session_id},
            timeout=self.timeout,
            enable_logging=self.enable_logging
        )
        body = parse_json(response)

        if not is_success(response) or not isinstance(body, dict):
            raise self._fail("start", response.status_code, body, ErrorMessages.START_SESSION_FAILED)

        return QrSessionResult(qr="", qr_endpoint=body.get("qrEndpoint") or "")

    async def fetch_qr(self, qr_endpoint: str) -> str:
        """
        Fetch the QR code string for this session.

        Args:
            qr_endpoint: Endpoint path returned by ``start``; it is joined onto
                the host root, not onto the API base URL

        Returns:
            Raw QR code string

        Raises:
            ValidationError: If qr_endpoint is empty or a full URL
            HandshakeError: On a non-2xx response, ``success`` false or an
                empty ``qr``
            NetworkError: If the gateway could not be reached
        """
        validate_qr_endpoint(qr_endpoint, strict=True)

        response = await send_request(
            "GET",
            f"{self.root_url}{qr_endpoint}",
            self.api_key,
            timeout=self.timeout,
            enable_logging=self.enable_logging
        )
        body = parse_json(response)
        data: Dict[str, Any] = body if isinstance(body, dict) else {}

        if not is_success(response) or not data.get("success") or not data.get("qr"):
            raise self._fail("fetch_qr", response.status_code, body, ErrorMessages.LOAD_QR_FAILED)

        return data["qr"]

    async def check_status(self) -> SessionStatus:
        """
        Check whether the session has been authenticated.

        Safe to call repeatedly; each call is one request and nothing on the
        instance changes.

        Returns:
            SessionStatus with every field of the response body

        Raises:
            HandshakeError: On a non-2xx response or a body that is not JSON
            NetworkError: If the gateway could not be reached
        """
        response = await send_request(
            "GET",
            f"{self.base_url}{Endpoints.auth_status(self._session_id)}",
            self.api_key,
            timeout=self.timeout,
            enable_logging=self.enable_logging
        )
        body = parse_json(response)

        if not is_success(response) or not isinstance(body, dict):
            raise self._fail("check_status", response.status_code, body, ErrorMessages.CHECK_STATUS_FAILED)

        status = SessionStatus(body)
        if self.enable_logging:
            logger.debug(f"QR session {self._session_id} status: {status.status}")
        return status
