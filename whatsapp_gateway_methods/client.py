"""
Main WhatsApp gateway client for WhatsApp Gateway Methods SDK.

This module contains the WhatsAppGateway class that sends text, media and
location messages through a WhatsApp gateway service and hands out
QrSession objects for authenticating gateway sessions.
"""

import logging
from typing import Optional, Dict, Any

from .config import ConfigResolver, ClientCredentials, resolve_credentials, normalize_base_url
from .constants import DEFAULT_TIMEOUT, Endpoints
from .exceptions import ConfigError, GatewayError, error_message_from_response
from .models import (
    ApiResult,
    SendMessageParams,
    SendMediaParams,
    SendLocationParams
)
from .qr_session import QrSession
from .transport import send_request, parse_json, is_success
from .utils import mask_secret
from .validators import (
    validate_session_id,
    validate_recipient,
    validate_message_text,
    validate_url,
    validate_caption,
    validate_coordinates,
    validate_description
)

# Set up logging
logger = logging.getLogger(__name__)


class WhatsAppGateway:
    """
    Client for the message endpoints of a WhatsApp gateway.

    Every send is a single POST authenticated with the ``x-api-key`` header
    and answered with an ``ApiResult`` envelope. The base URL and key can
    be rotated with ``set_api_url`` / ``set_api_key``.

    Example:
        gateway = WhatsAppGateway(
            api_url="https://gateway.example.com/api",
            api_key="your_api_key"
        )

        # Send a text message
        result = await gateway.send_message("sales-desk", "6281234567890", "Hello!")

        # Send an image with caption
        result = await gateway.send_media(
            "sales-desk",
            "6281234567890",
            "https://example.com/image.jpg",
            caption="Check this out!"
        )
    """

    def __init__(
        self,
        api_url: Optional[str] = None,
        api_key: Optional[str] = None,
        *,
        config_resolver: Optional[ConfigResolver] = None,
        timeout: float = DEFAULT_TIMEOUT,
        enable_validation: bool = True,
        enable_logging: bool = True
    ):
        """
        Initialize the gateway client.

        Args:
            api_url: Gateway base URL (or WHATSAPP_API_URL via the resolver)
            api_key: Gateway API key (or WHATSAPP_API_KEY via the resolver)
            config_resolver: Callable mapping a setting name to its value;
                defaults to the process environment
            timeout: Request timeout in seconds
            enable_validation: Enable input validation
            enable_logging: Enable request/response logging

        Raises:
            ConfigError: If the base URL or API key is missing
        """
        credentials = resolve_credentials(api_url, api_key, config_resolver)
        self.api_url = credentials.base_url
        self.api_key = credentials.api_key

        # Configuration
        self.timeout = timeout
        self.enable_validation = enable_validation
        self.enable_logging = enable_logging

        # Log initialization
        if self.enable_logging:
            logger.info(f"WhatsApp gateway client initialized - URL: {self.api_url}")

    def __repr__(self):
        return f"WhatsAppGateway(api_url={self.api_url!r})"

    @property
    def credentials(self) -> ClientCredentials:
        """Snapshot of the current base URL and key."""
        return ClientCredentials(base_url=self.api_url, api_key=self.api_key)

    def _should_validate(self, validate_input: Optional[bool]) -> bool:
        return bool(validate_input or (validate_input is None and self.enable_validation))

    async def _make_request(self, endpoint: str, payload: Dict[str, Any]) -> ApiResult:
        """
        POST a JSON payload to a gateway endpoint.

        Args:
            endpoint: Endpoint path relative to the base URL
            payload: Request body

        Returns:
            ApiResult built from the response body

        Raises:
            GatewayError: On a non-2xx response or a body that is not JSON
            NetworkError: If the gateway could not be reached
        """
        response = await send_request(
            "POST",
            f"{self.api_url}{endpoint}",
            self.api_key,
            payload=payload,
            timeout=self.timeout,
            enable_logging=self.enable_logging
        )
        body = parse_json(response)

        if not is_success(response):
            message = error_message_from_response(
                response.status_code,
                body,
                reason=response.reason
            )
            logger.error(f"Gateway request to {endpoint} failed ({response.status_code}): {message}")
            raise GatewayError(
                message,
                endpoint=endpoint,
                status_code=response.status_code,
                api_response=body if isinstance(body, dict) else None
            )

        if not isinstance(body, dict):
            logger.error(f"Gateway response from {endpoint} is not a JSON object")
            raise GatewayError(
                "Invalid JSON response from gateway",
                endpoint=endpoint,
                status_code=response.status_code
            )

        return ApiResult.from_dict(body)

    async def send_message(
        self,
        session_id: str,
        to: str,
        message: str,
        validate_input: Optional[bool] = None
    ) -> ApiResult:
        """
        Send a text message.

        Args:
            session_id: Gateway session to send from
            to: Recipient phone number or JID
            message: Message text content
            validate_input: Override default validation setting

        Returns:
            ApiResult with send result

        Raises:
            ValidationError: If input validation fails
            GatewayError: On API error
        """
        return await self.send_message_params(
            SendMessageParams(session_id=session_id, to=to, message=message),
            validate_input=validate_input
        )

    async def send_message_params(
        self,
        params: SendMessageParams,
        validate_input: Optional[bool] = None
    ) -> ApiResult:
        """Send a text message described by ``params``."""
        if self._should_validate(validate_input):
            validate_session_id(params.session_id, strict=True)
            validate_recipient(params.to, strict=True)
            validate_message_text(params.message, strict=True)

        return await self._make_request(Endpoints.SEND_MESSAGE, params.to_payload())

    async def send_media(
        self,
        session_id: str,
        to: str,
        media_url: str,
        caption: Optional[str] = None,
        validate_input: Optional[bool] = None
    ) -> ApiResult:
        """
        Send media (image, video, document).

        Args:
            session_id: Gateway session to send from
            to: Recipient phone number or JID
            media_url: Public URL of the media file
            caption: Optional caption; omitted from the request when empty
            validate_input: Override default validation setting

        Returns:
            ApiResult with send result

        Raises:
            ValidationError: If input validation fails
            GatewayError: On API error
        """
        return await self.send_media_params(
            SendMediaParams(session_id=session_id, to=to, media_url=media_url, caption=caption),
            validate_input=validate_input
        )

    async def send_media_params(
        self,
        params: SendMediaParams,
        validate_input: Optional[bool] = None
    ) -> ApiResult:
        """Send media described by ``params``."""
        if self._should_validate(validate_input):
            validate_session_id(params.session_id, strict=True)
            validate_recipient(params.to, strict=True)
            validate_url(params.media_url, strict=True)
            validate_caption(params.caption, strict=True)

        return await self._make_request(Endpoints.SEND_MEDIA, params.to_payload())

    async def send_location(
        self,
        session_id: str,
        to: str,
        latitude: float,
        longitude: float,
        description: Optional[str] = None,
        validate_input: Optional[bool] = None
    ) -> ApiResult:
        """
        Send a location.

        Args:
            session_id: Gateway session to send from
            to: Recipient phone number or JID
            latitude: Latitude coordinate
            longitude: Longitude coordinate
            description: Optional description; omitted from the request when empty
            validate_input: Override default validation setting

        Returns:
            ApiResult with send result

        Raises:
            ValidationError: If input validation fails
            GatewayError: On API error

        Example:
            result = await gateway.send_location(
                "sales-desk",
                "6281234567890",
                -6.175392,
                106.827153,
                "Monas, Jakarta"
            )
        """
        return await self.send_location_params(
            SendLocationParams(
                session_id=session_id,
                to=to,
                latitude=latitude,
                longitude=longitude,
                description=description
            ),
            validate_input=validate_input
        )

    async def send_location_params(
        self,
        params: SendLocationParams,
        validate_input: Optional[bool] = None
    ) -> ApiResult:
        """Send a location described by ``params``."""
        if self._should_validate(validate_input):
            validate_session_id(params.session_id, strict=True)
            validate_recipient(params.to, strict=True)
            validate_coordinates(params.latitude, params.longitude, strict=True)
            validate_description(params.description, strict=True)

        return await self._make_request(Endpoints.SEND_LOCATION, params.to_payload())

    def set_api_key(self, api_key: str) -> None:
        """
        Set custom API key.

        Raises:
            ConfigError: If api_key is empty
        """
        if not api_key or not api_key.strip():
            raise ConfigError("api_key must not be empty", missing=["api_key"])
        self.api_key = api_key.strip()
        if self.enable_logging:
            logger.info("Gateway API key updated")

    def set_api_url(self, url: str) -> None:
        """
        Set custom API URL.

        Raises:
            ConfigError: If url is empty
        """
        if not url or not url.strip():
            raise ConfigError("api_url must not be empty", missing=["api_url"])
        self.api_url = normalize_base_url(url)
        if self.enable_logging:
            logger.info(f"Gateway API URL updated to {self.api_url}")

    def qr_session(self, session_id: str) -> QrSession:
        """
        Create a QrSession using this client's current credentials.

        The session keeps the credentials it was created with; rotating the
        gateway's key or URL afterwards does not affect it.
        """
        return QrSession.from_credentials(
            session_id,
            self.credentials,
            timeout=self.timeout,
            enable_logging=self.enable_logging
        )

    def get_client_info(self) -> Dict[str, Any]:
        """Get non-secret client configuration."""
        return {
            "api_url": self.api_url,
            "api_key": mask_secret(self.api_key),
            "timeout": self.timeout,
            "validation_enabled": self.enable_validation,
            "logging_enabled": self.enable_logging
        }
