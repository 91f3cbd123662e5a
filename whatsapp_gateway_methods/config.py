"""
Credential resolution for WhatsApp Gateway Methods SDK.

Clients take their base URL and API key either as explicit arguments or
from a config resolver: any callable mapping a setting name (such as
``WHATSAPP_API_URL``) to its value, or None when it is not set. The process
environment is the default source; ``.env`` files and prefixed names (for
example the ``VITE_`` variables of a browser bundle) are available through
the resolvers below.

Usage:
    from whatsapp_gateway_methods.config import (
        chain_resolvers, dotenv_resolver, environ_resolver, resolve_credentials
    )

    resolver = chain_resolvers(environ_resolver, dotenv_resolver(".env"))
    credentials = resolve_credentials(config_resolver=resolver)
"""

import os
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Dict

from dotenv import dotenv_values

from .constants import EnvVars, ErrorMessages
from .exceptions import ConfigError

logger = logging.getLogger(__name__)

ConfigResolver = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class ClientCredentials:
    """
    Base URL and API key shared by the gateway and the QR session.

    Attributes:
        base_url: Gateway API base URL, without a trailing slash
        api_key: Static key sent in the ``x-api-key`` header
    """
    base_url: str
    api_key: str

    def __repr__(self):
        return f"ClientCredentials(base_url={self.base_url!r}, api_key='***')"


def environ_resolver(name: str) -> Optional[str]:
    """Read a setting from the process environment."""
    return os.environ.get(name)


def dotenv_resolver(path: str = ".env") -> ConfigResolver:
    """
    Build a resolver backed by a ``.env`` file.

    The file is read once; ``os.environ`` is left untouched.

    Args:
        path: Path to the dotenv file

    Returns:
        Config resolver
    """
    values: Dict[str, Optional[str]] = dict(dotenv_values(path))
    logger.debug(f"Loaded {len(values)} values from {path}")

    def resolve(name: str) -> Optional[str]:
        return values.get(name)

    return resolve


def prefixed_resolver(prefix: str, resolver: ConfigResolver = environ_resolver) -> ConfigResolver:
    """
    Build a resolver that looks names up with a prefix.

    ``prefixed_resolver("VITE_")("WHATSAPP_API_URL")`` reads
    ``VITE_WHATSAPP_API_URL``.
    """
    def resolve(name: str) -> Optional[str]:
        return resolver(f"{prefix}{name}")

    return resolve


def chain_resolvers(*resolvers: ConfigResolver) -> ConfigResolver:
    """Build a resolver returning the first non-empty value of ``resolvers``."""
    def resolve(name: str) -> Optional[str]:
        for resolver in resolvers:
            value = resolver(name)
            if value:
                return value
        return None

    return resolve


def normalize_base_url(url: str) -> str:
    """Strip surrounding whitespace and trailing slashes from a base URL."""
    return url.strip().rstrip('/')


def resolve_credentials(
    api_url: Optional[str] = None,
    api_key: Optional[str] = None,
    config_resolver: Optional[ConfigResolver] = None
) -> ClientCredentials:
    """
    Resolve client credentials from explicit arguments or a config resolver.

    Explicit arguments win. Empty or blank values fall through to the resolver,
    which defaults to the process environment.

    Args:
        api_url: Gateway base URL (or set WHATSAPP_API_URL)
        api_key: Gateway API key (or set WHATSAPP_API_KEY)
        config_resolver: Callable mapping a setting name to its value

    Returns:
        ClientCredentials

    Raises:
        ConfigError: If the base URL or API key is still empty
    """
    resolver = config_resolver or environ_resolver

    base_url = normalize_base_url(api_url or "") or normalize_base_url(resolver(EnvVars.API_URL) or "")
    key = (api_key or "").strip() or (resolver(EnvVars.API_KEY) or "").strip()

    missing = []
    if not base_url:
        missing.append(f"api_url (or {EnvVars.API_URL})")
    if not key:
        missing.append(f"api_key (or {EnvVars.API_KEY})")

    if missing:
        raise ConfigError(
            ErrorMessages.MISSING_CREDENTIALS.format(missing=", ".join(missing)),
            missing=missing
        )

    return ClientCredentials(base_url=base_url, api_key=key)
