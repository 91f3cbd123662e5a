"""
HTTP transport shared by the gateway client and the QR session.

Requests are made with ``requests`` on a worker thread through
``asyncio.to_thread`` so callers can await them without blocking the event
loop. Every call is a single attempt; nothing is retried here.
"""

import asyncio
import logging
from typing import Optional, Dict, Any

import requests

from .constants import Headers, StatusCodes, DEFAULT_TIMEOUT
from .exceptions import NetworkError

# Set up logging
logger = logging.getLogger(__name__)


def build_headers(api_key: str, json_body: bool = False) -> Dict[str, str]:
    """Headers for a gateway request; JSON bodies also get a content type."""
    headers = {Headers.API_KEY: api_key}
    if json_body:
        headers[Headers.CONTENT_TYPE] = Headers.JSON_CONTENT_TYPE
    return headers


def parse_json(response: requests.Response) -> Optional[Any]:
    """
    Decode a response body as JSON.

    Returns:
        Decoded body, or None when the body is empty or not JSON
    """
    try:
        return response.json()
    except ValueError:
        # requests' JSONDecodeError is a ValueError subclass
        logger.debug(f"Response body is not JSON (status {response.status_code})")
        return None


def is_success(response: requests.Response) -> bool:
    """True for 2xx responses (``Response.ok`` also accepts 3xx)."""
    return StatusCodes.is_success(response.status_code)


async def send_request(
    method: str,
    url: str,
    api_key: str,
    payload: Optional[Dict[str, Any]] = None,
    timeout: float = DEFAULT_TIMEOUT,
    enable_logging: bool = True
) -> requests.Response:
    """
    Perform one HTTP request against the gateway.

    Args:
        method: HTTP method (GET, POST)
        url: Absolute request URL
        api_key: Value for the ``x-api-key`` header
        payload: JSON body, sent only for POST/PUT/PATCH
        timeout: Request timeout in seconds
        enable_logging: Log request/response lines at INFO level

    Returns:
        Response object, whatever its status

    Raises:
        NetworkError: If no HTTP response was received
    """
    method = method.upper()
    has_body = method in ('POST', 'PUT', 'PATCH')
    headers = build_headers(api_key, json_body=has_body)

    # Log request
    if enable_logging:
        logger.info(f"Making {method} request to {url}")
        if payload:
            logger.debug(f"Request payload: {payload}")

    try:
        response = await asyncio.to_thread(
            requests.request,
            method=method,
            url=url,
            json=payload if has_body else None,
            headers=headers,
            timeout=timeout
        )
    except requests.exceptions.Timeout as e:
        raise NetworkError(f"Request timeout after {timeout}s", details={"url": url}) from e
    except requests.exceptions.ConnectionError as e:
        raise NetworkError(f"Connection error: {str(e)}", details={"url": url}) from e
    except requests.exceptions.RequestException as e:
        raise NetworkError(f"Request error: {str(e)}", details={"url": url}) from e

    # Log response
    if enable_logging:
        logger.info(f"Response status: {response.status_code}")

    return response
