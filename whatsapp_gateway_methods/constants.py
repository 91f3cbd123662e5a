"""
Constants and configuration for WhatsApp Gateway Methods SDK.

This module contains all API endpoints, default values, environment variable
names and other constants used throughout the SDK.
"""

# API Configuration
DEFAULT_TIMEOUT = 30  # seconds

# Trailing routing segment of the base URL. The QR image endpoint is served
# from the host root, outside of it.
API_ROOT_SEGMENT = "/api"


# API Endpoints
class Endpoints:
    """Gateway API endpoints, relative to the base URL."""

    # Auth / QR session endpoints
    AUTH_START = "/auth/start"
    AUTH_STATUS = "/auth/status/{session_id}"

    # Message endpoints
    SEND_MESSAGE = "/message/send"
    SEND_MEDIA = "/message/send-media"
    SEND_LOCATION = "/message/send-location"

    @classmethod
    def auth_status(cls, session_id: str) -> str:
        """Status path for a session."""
        return cls.AUTH_STATUS.format(session_id=session_id)


# Message Limits
class MessageLimits:
    """Limits for message content."""

    MAX_TEXT_LENGTH = 4096        # Maximum text message length
    MAX_CAPTION_LENGTH = 1024     # Maximum caption length
    MAX_DESCRIPTION_LENGTH = 1000 # Maximum location description length


# Validation Patterns
class ValidationPatterns:
    """Regular expression patterns for validation."""

    # Recipient: phone number, optionally with a WhatsApp JID suffix
    # (e.g. 6281234567890 or 6281234567890@s.whatsapp.net or a group id)
    RECIPIENT_PATTERN = r'^\+?[0-9][0-9\-]{4,40}(@[a-zA-Z0-9.\-]+)?$'

    # URL patterns
    HTTP_URL_PATTERN = r'^https?://[^\s/$.?#].[^\s]*$'

    # Absolute URL prefix (used to reject already-rooted QR endpoints)
    ABSOLUTE_URL_PATTERN = r'^[a-zA-Z][a-zA-Z0-9+.\-]*://'


# Environment Variable Names
class EnvVars:
    """Environment variable names."""

    # Required variables
    API_URL = "WHATSAPP_API_URL"
    API_KEY = "WHATSAPP_API_KEY"

    # Prefix used by browser bundlers (Vite) for the same values
    VITE_PREFIX = "VITE_"

    # Logging configuration
    LOG_LEVEL = "WHATSAPP_LOG_LEVEL"
    LOG_FORMAT = "WHATSAPP_LOG_FORMAT"


# Logging Configuration
class LogConfig:
    """Logging configuration constants."""

    DEFAULT_LOG_LEVEL = "INFO"
    DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

    # Logger names
    MAIN_LOGGER = "whatsapp_gateway_methods"


# HTTP Headers
class Headers:
    """Standard HTTP headers used by the SDK."""

    API_KEY = "x-api-key"
    CONTENT_TYPE = "Content-Type"

    # Content types
    JSON_CONTENT_TYPE = "application/json"


# Status Codes
class StatusCodes:
    """HTTP status code helpers."""

    @staticmethod
    def is_success(status_code: int) -> bool:
        """True for any 2xx status."""
        return 200 <= status_code < 300


# Remote session status values
class SessionStatusValues:
    """Status strings reported by the gateway for a QR session."""

    PENDING = "pending"
    CONNECTED = "connected"
    EXPIRED = "expired"
    FAILED = "failed"


# Common Error Messages
class ErrorMessages:
    """Common error messages."""

    START_SESSION_FAILED = "Failed to start session"
    LOAD_QR_FAILED = "Failed to load QR code"
    CHECK_STATUS_FAILED = "Failed to check status"
    REQUEST_FAILED = "API request failed with status {status_code}"

    MISSING_CREDENTIALS = (
        "Missing required configuration: {missing}. "
        "Pass it as a parameter or provide it through the config resolver."
    )
    EMPTY_SESSION_ID = "Session id must be a non-empty string."
    INVALID_RECIPIENT = "Invalid recipient. Use a phone number in international format or a WhatsApp JID."
    INVALID_URL = "Invalid URL. Must be a valid HTTP(S) URL."
    INVALID_QR_ENDPOINT = "QR endpoint must be a path relative to the host root, not a full URL."
    MESSAGE_TOO_LONG = "Message exceeds maximum length of {max_length} characters."
    CAPTION_TOO_LONG = "Caption exceeds maximum length of {max_length} characters."
    DESCRIPTION_TOO_LONG = "Description exceeds maximum length of {max_length} characters."
