"""
Input validation functions for WhatsApp Gateway Methods SDK.

Each validator returns True/False, or raises ValidationError when called
with ``strict=True``. Clients run them before any request is sent.
"""

import re
import logging
from typing import Any, Optional

from .constants import (
    ValidationPatterns,
    MessageLimits,
    ErrorMessages
)
from .exceptions import ValidationError

# Set up logging
logger = logging.getLogger(__name__)


def _fail(strict: bool, message: str, field: str, value: Any) -> bool:
    if strict:
        raise ValidationError(message, field=field, value=value)
    logger.debug(f"Validation failed for {field}: {message}")
    return False


def validate_session_id(session_id: str, strict: bool = False) -> bool:
    """
    Validate a session identifier.

    Session ids are opaque; only emptiness is checked.
    """
    if not isinstance(session_id, str) or not session_id.strip():
        return _fail(strict, ErrorMessages.EMPTY_SESSION_ID, "session_id", session_id)
    return True


def validate_recipient(to: str, strict: bool = False) -> bool:
    """
    Validate a recipient phone number or WhatsApp JID.

    Args:
        to: Recipient (e.g. "6281234567890" or "6281234567890@s.whatsapp.net")
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise

    Raises:
        ValidationError: If recipient is invalid and strict validation
    """
    if not to or not isinstance(to, str):
        return _fail(strict, ErrorMessages.INVALID_RECIPIENT, "to", to)

    cleaned = to.strip()

    # Additional check for double plus signs
    if "++" in cleaned or not re.match(ValidationPatterns.RECIPIENT_PATTERN, cleaned):
        return _fail(strict, ErrorMessages.INVALID_RECIPIENT, "to", to)

    return True


def validate_coordinates(latitude: float, longitude: float, strict: bool = False) -> bool:
    """
    Validate GPS coordinates.

    Args:
        latitude: Latitude coordinate
        longitude: Longitude coordinate
        strict: Raise exception if invalid

    Returns:
        True if valid, False otherwise

    Raises:
        ValidationError: If coordinates are invalid and strict validation
    """
    try:
        lat = float(latitude)
        lon = float(longitude)
    except (TypeError, ValueError):
        return _fail(
            strict,
            "Coordinates must be numeric values",
            "coordinates",
            f"lat={latitude}, lon={longitude}"
        )

    # Check ranges
    lat_valid = -90 <= lat <= 90
    lon_valid = -180 <= lon <= 180

    if lat_valid and lon_valid:
        return True

    error_details = []
    if not lat_valid:
        error_details.append(f"latitude {lat} not in range -90 to +90")
    if not lon_valid:
        error_details.append(f"longitude {lon} not in range -180 to +180")

    return _fail(
        strict,
        f"Invalid coordinates: {', '.join(error_details)}",
        "coordinates",
        f"lat={latitude}, lon={longitude}"
    )


def validate_url(url: str, strict: bool = False) -> bool:
    """
    Validate an HTTP(S) URL, such as a media URL.

    Raises:
        ValidationError: If URL is invalid and strict validation
    """
    if not url or not isinstance(url, str):
        return _fail(strict, ErrorMessages.INVALID_URL, "url", url)

    if not re.match(ValidationPatterns.HTTP_URL_PATTERN, url.strip()):
        return _fail(strict, ErrorMessages.INVALID_URL, "url", url)

    return True


def validate_qr_endpoint(qr_endpoint: str, strict: bool = False) -> bool:
    """
    Validate a QR endpoint reference returned by the start step.

    The reference is a path joined onto the host root, so a full URL is
    rejected.
    """
    if not qr_endpoint or not isinstance(qr_endpoint, str):
        return _fail(strict, ErrorMessages.INVALID_QR_ENDPOINT, "qr_endpoint", qr_endpoint)

    if re.match(ValidationPatterns.ABSOLUTE_URL_PATTERN, qr_endpoint):
        return _fail(strict, ErrorMessages.INVALID_QR_ENDPOINT, "qr_endpoint", qr_endpoint)

    return True


def _validate_length(
    text: Optional[str],
    max_length: int,
    message: str,
    field: str,
    allow_empty: bool,
    strict: bool
) -> bool:
    if text is None or text == "":
        if allow_empty:
            return True
        return _fail(strict, f"{field.capitalize()} cannot be empty", field, text)

    if not isinstance(text, str):
        return _fail(strict, f"{field.capitalize()} must be a string", field, text)

    if len(text) > max_length:
        return _fail(
            strict,
            message.format(max_length=max_length),
            field,
            f"{len(text)} characters"
        )

    return True


def validate_message_text(message: str, strict: bool = False) -> bool:
    """Validate text message content: non-empty and within the length limit."""
    if isinstance(message, str) and not message.strip():
        return _fail(strict, "Message cannot be empty", "message", message)
    return _validate_length(
        message, MessageLimits.MAX_TEXT_LENGTH, ErrorMessages.MESSAGE_TOO_LONG,
        "message", allow_empty=False, strict=strict
    )


def validate_caption(caption: Optional[str], strict: bool = False) -> bool:
    """Validate an optional media caption."""
    return _validate_length(
        caption, MessageLimits.MAX_CAPTION_LENGTH, ErrorMessages.CAPTION_TOO_LONG,
        "caption", allow_empty=True, strict=strict
    )


def validate_description(description: Optional[str], strict: bool = False) -> bool:
    """Validate an optional location description."""
    return _validate_length(
        description, MessageLimits.MAX_DESCRIPTION_LENGTH, ErrorMessages.DESCRIPTION_TOO_LONG,
        "description", allow_empty=True, strict=strict
    )
