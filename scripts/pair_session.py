#!/usr/bin/env python3
"""
Pair a WhatsApp gateway session by QR code from the terminal.

Starts the session, prints the QR payload, then polls the session status
until it connects, fails, or the deadline passes.

Environment (or .env):
- WHATSAPP_API_URL
- WHATSAPP_API_KEY
- VITE_WHATSAPP_API_URL / VITE_WHATSAPP_API_KEY (fallback)

Usage:
  python scripts/pair_session.py my-session --interval 3 --deadline 120
"""

import argparse
import asyncio
import json
import sys

from dotenv import load_dotenv

from whatsapp_gateway_methods import (
    QrSession,
    WhatsAppError,
    chain_resolvers,
    environ_resolver,
    prefixed_resolver,
    setup_logging
)
from whatsapp_gateway_methods.constants import EnvVars


async def pair(session: QrSession, interval: float, deadline: float) -> int:
    started = await session.start()
    qr = await session.fetch_qr(started.qr_endpoint)
    print("Scan this QR payload with WhatsApp (Linked devices):")
    print(qr)

    loop = asyncio.get_running_loop()
    give_up_at = loop.time() + deadline

    while loop.time() < give_up_at:
        status = await session.check_status()
        print(f"status: {status.status}")
        if status.is_connected:
            print(json.dumps(dict(status), indent=2, default=str))
            return 0
        if status.is_terminal:
            return 3
        await asyncio.sleep(interval)

    print(f"Session not connected after {deadline:.0f}s")
    return 4


def main() -> int:
    parser = argparse.ArgumentParser(description="Pair a WhatsApp gateway session by QR code")
    parser.add_argument("session_id", help="Session identifier to start")
    parser.add_argument("--interval", type=float, default=3.0, help="Seconds between status checks")
    parser.add_argument("--deadline", type=float, default=120.0, help="Give up after this many seconds")
    parser.add_argument("--log-level", default=None, help="SDK log level (default WHATSAPP_LOG_LEVEL or INFO)")
    args = parser.parse_args()

    load_dotenv()
    setup_logging(args.log_level)

    resolver = chain_resolvers(environ_resolver, prefixed_resolver(EnvVars.VITE_PREFIX))

    try:
        session = QrSession(args.session_id, config_resolver=resolver)
        return asyncio.run(pair(session, args.interval, args.deadline))
    except WhatsAppError as e:
        print(json.dumps({"success": False, "error": e.to_dict()}))
        return 2


if __name__ == "__main__":
    sys.exit(main())
