"""
Custom exceptions for WhatsApp Gateway Methods SDK.

This module defines the exception hierarchy for handling the different types
of errors that can occur when using the WhatsApp gateway API and its QR
session handshake.
"""

from typing import Optional, Dict, Any

from .constants import ErrorMessages


class WhatsAppError(Exception):
    """
    Base exception class for all WhatsApp gateway related errors.

    Attributes:
        message (str): Error message
        status_code (Optional[int]): HTTP status code if applicable
        error_code (Optional[str]): API specific error code
        details (Dict[str, Any]): Additional error details
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}

    def __str__(self):
        error_parts = [f"{self.__class__.__name__}: {self.message}"]

        if self.status_code:
            error_parts.append(f"Status Code: {self.status_code}")

        if self.error_code:
            error_parts.append(f"Error Code: {self.error_code}")

        if self.details:
            error_parts.append(f"Details: {self.details}")

        return " | ".join(error_parts)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for logging/serialization."""
        return {
            "type": self.__class__.__name__,
            "message": self.message,
            "status_code": self.status_code,
            "error_code": self.error_code,
            "details": self.details
        }


class ConfigError(WhatsAppError):
    """
    Raised when required client configuration is missing.

    This occurs at construction time (or on a credential setter) when the
    base URL or API key resolves to an empty value. It is never the result
    of a network call and retrying will not help.

    Attributes:
        missing (list): Names of the missing settings
    """

    def __init__(self, message: str = "Missing required configuration", missing=None, **kwargs):
        super().__init__(message, **kwargs)
        self.missing = list(missing or [])


class HandshakeError(WhatsAppError):
    """
    Raised when a step of the QR session handshake fails.

    Attributes:
        step (Optional[str]): Handshake step that failed
            ("start", "fetch_qr" or "check_status")
        response_data (Optional[Dict]): Decoded response body, if any
    """

    def __init__(
        self,
        message: str,
        step: Optional[str] = None,
        response_data: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.step = step
        self.response_data = response_data

    def __str__(self):
        base_str = super().__str__()
        if self.step:
            base_str += f" | Step: {self.step}"
        return base_str


class GatewayError(WhatsAppError):
    """
    Raised when a message-send call is rejected by the gateway.

    Attributes:
        endpoint (Optional[str]): Endpoint that was called
        api_response (Optional[Dict]): Raw API response, when it was JSON
    """

    def __init__(
        self,
        message: str,
        endpoint: Optional[str] = None,
        api_response: Optional[Dict[str, Any]] = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.endpoint = endpoint
        self.api_response = api_response

    def __str__(self):
        base_str = super().__str__()
        if self.endpoint:
            base_str += f" | Endpoint: {self.endpoint}"
        return base_str


class ValidationError(WhatsAppError):
    """
    Raised when input validation fails before a request is sent.

    Attributes:
        field (Optional[str]): The field that failed validation
        value (Any): The invalid value
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Any = None,
        **kwargs
    ):
        super().__init__(message, **kwargs)
        self.field = field
        self.value = value

    def __str__(self):
        base_str = super().__str__()
        if self.field:
            base_str += f" | Field: {self.field}"
        if self.value is not None:
            base_str += f" | Value: {self.value}"
        return base_str


class NetworkError(WhatsAppError):
    """
    Raised when the request never produced an HTTP response.

    This includes:
    - Connection timeouts
    - DNS resolution failures
    - Connection refused / reset
    - Malformed URLs
    """

    def __init__(self, message: str = "Network error occurred", **kwargs):
        super().__init__(message, **kwargs)


def error_message_from_response(
    status_code: int,
    response_data: Optional[Any] = None,
    reason: Optional[str] = None,
    default_message: Optional[str] = None
) -> str:
    """
    Pick the most specific human-readable message for a failed response.

    Precedence: the body's ``message`` field, then ``default_message``, then
    the HTTP reason phrase when the body was not JSON, then a generic message
    naming the status code.

    Args:
        status_code: HTTP status code
        response_data: Decoded response body, or None if it was not JSON
        reason: HTTP reason phrase
        default_message: Per-operation fallback message

    Returns:
        Error message string
    """
    if isinstance(response_data, dict):
        message = response_data.get("message")
        if message:
            return str(message)

    if default_message:
        return default_message

    if response_data is None and reason:
        return reason

    return ErrorMessages.REQUEST_FAILED.format(status_code=status_code)
