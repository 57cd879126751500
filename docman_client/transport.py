"""HTTPS transport with a client certificate for mutual TLS."""

from __future__ import annotations

import logging
import os
import secrets
import ssl
import tempfile

import httpx

from docman_client import __version__
from docman_client.credentials import ClientCertificate
from docman_client.exceptions import CredentialError

logger = logging.getLogger(__name__)


def build_ssl_context(certificate: ClientCertificate) -> ssl.SSLContext:
    """Server-verifying SSL context that presents ``certificate`` to the server."""
    context = ssl.create_default_context(ssl.Purpose.SERVER_AUTH)

    # load_cert_chain only reads from disk; keep the key encrypted while it is there
    ephemeral_password = secrets.token_urlsafe(32).encode()
    fd, pem_path = tempfile.mkstemp(suffix=".pem")
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(certificate.to_pem(ephemeral_password))
        context.load_cert_chain(pem_path, password=ephemeral_password)
    except ssl.SSLError as e:
        raise CredentialError(f"Client certificate {certificate.subject} rejected by SSL: {e}") from e
    finally:
        os.unlink(pem_path)

    return context


def create_http_client(
    base_url: str,
    ssl_context: ssl.SSLContext,
    timeout: float = 30.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """One pooled client shared by every contract of a registration."""
    client = httpx.AsyncClient(
        base_url=base_url.rstrip("/") + "/",
        verify=ssl_context,
        timeout=timeout,
        headers={
            "Accept": "application/json",
            "User-Agent": f"docman-client/{__version__}",
        },
        transport=transport,
    )
    logger.debug("HTTP client created for %s (timeout=%.1fs)", base_url, timeout)
    return client
