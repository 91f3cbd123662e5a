"""
WhatsApp Gateway Methods SDK

A Python SDK for a WhatsApp gateway service: send text, media and location
messages, and authenticate gateway sessions by QR code.

Usage:
    from whatsapp_gateway_methods import WhatsAppGateway, QrSession

    gateway = WhatsAppGateway(
        api_url="https://gateway.example.com/api",
        api_key="your_api_key"
    )

    # Send messages
    await gateway.send_message("sales-desk", "6281234567890", "Hello!")
    await gateway.send_media("sales-desk", "6281234567890", "https://example.com/image.jpg", "Caption")
    await gateway.send_location("sales-desk", "6281234567890", -6.175392, 106.827153, "Monas")

    # Authenticate a session
    session = gateway.qr_session("sales-desk")
    started = await session.start()
    qr = await session.fetch_qr(started.qr_endpoint)
    status = await session.check_status()
"""

__version__ = "1.0.0"
__description__ = "SDK for a WhatsApp gateway API and its QR session handshake"

from .config import (
    ClientCredentials,
    resolve_credentials,
    environ_resolver,
    dotenv_resolver,
    prefixed_resolver,
    chain_resolvers
)
from .models import (
    ApiResult,
    ApiErrorDetail,
    QrSessionResult,
    SessionStatus,
    ConnectionState,
    SendMessageParams,
    SendMediaParams,
    SendLocationParams
)
from .exceptions import (
    WhatsAppError,
    ConfigError,
    HandshakeError,
    GatewayError,
    ValidationError,
    NetworkError
)
from .qr_session import QrSession
from .client import WhatsAppGateway
from .utils import setup_logging

# Main exports
__all__ = [
    "WhatsAppGateway",
    "QrSession",
    "ClientCredentials",
    "resolve_credentials",
    "environ_resolver",
    "dotenv_resolver",
    "prefixed_resolver",
    "chain_resolvers",
    "ApiResult",
    "ApiErrorDetail",
    "QrSessionResult",
    "SessionStatus",
    "ConnectionState",
    "SendMessageParams",
    "SendMediaParams",
    "SendLocationParams",
    "WhatsAppError",
    "ConfigError",
    "HandshakeError",
    "GatewayError",
    "ValidationError",
    "NetworkError",
    "setup_logging"
]
