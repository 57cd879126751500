"""Operator entry point — logging setup, service lifecycle and a small CLI."""

from __future__ import annotations

import argparse
import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from pydantic import ValidationError

from docman_client import __version__
from docman_client.config import Settings, get_settings
from docman_client.credentials import PasswordEncryption
from docman_client.exceptions import DocManError
from docman_client.registration import DocManServices, register_services

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)


@asynccontextmanager
async def docman_session(settings: Settings | None = None) -> AsyncIterator[DocManServices]:
    """Startup / shutdown lifecycle around a registered set of services."""
    settings = settings or get_settings()
    _setup_logging(settings.log_level)

    services = register_services(settings)
    logger.info("docman-client v%s ready", __version__)
    try:
        yield services
    finally:
        await services.aclose()
        logger.info("docman-client shut down")


async def _heartbeat(settings: Settings) -> int:
    async with docman_session(settings) as services:
        server_time = await services.heartbeat.get_server_time()
        connection = await services.heartbeat.get_connection_string_name()

    for response in (server_time, connection):
        if not response.is_success or response.content is None:
            print(f"Heartbeat failed: HTTP {response.status_code}")
            return 1
    print(f"Server time:       {server_time.content.isoformat()}")
    print(f"Connection string: {connection.content}")
    return 0


def run(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="docman-client", description="DocMan API client tools")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("heartbeat", help="Check connectivity and the active connection string")
    encrypt = commands.add_parser(
        "encrypt-password",
        help="Encrypt a certificate password with DOCMAN_ENCRYPTION_KEY",
    )
    encrypt.add_argument("password")
    args = parser.parse_args(argv)

    try:
        if args.command == "encrypt-password":
            print(PasswordEncryption().encrypt_password(args.password))
            return 0
        return asyncio.run(_heartbeat(get_settings()))
    except (DocManError, httpx.HTTPError, ValidationError) as e:
        print(f"{type(e).__name__}: {e}")
        return 1
