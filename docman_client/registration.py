"""Composition root — builds the five DocMan services from configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field

import httpx

from docman_client.config import Settings, get_settings, resolve_endpoint_config
from docman_client.contracts import (
    FileContract,
    FileViewAuditContract,
    FolderContract,
    HeartbeatContract,
    OriginalFileDeleteAuditContract,
)
from docman_client.credentials import PasswordDecryptor, PasswordEncryption, load_client_certificate
from docman_client.services.audit_service import FileViewAuditService, OriginalFileDeleteAuditService
from docman_client.services.file_service import FileService
from docman_client.services.folder_service import FolderService
from docman_client.services.heartbeat_service import HeartbeatService
from docman_client.transport import build_ssl_context, create_http_client

logger = logging.getLogger(__name__)


@dataclass
class DocManServices:
    """The five bound services and the HTTP client they share."""
    files: FileService
    folders: FolderService
    file_view_audits: FileViewAuditService
    original_file_delete_audits: OriginalFileDeleteAuditService
    heartbeat: HeartbeatService
    client: httpx.AsyncClient = field(repr=False)

    def all(self) -> tuple:
        return (
            self.files,
            self.folders,
            self.file_view_audits,
            self.original_file_delete_audits,
            self.heartbeat,
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self) -> DocManServices:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def register_services(
    settings: Settings | None = None,
    *,
    overrides: Mapping[str, str] | None = None,
    decryptor: PasswordDecryptor | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> DocManServices:
    """Resolve configuration, load credentials and bind all services.

    Every check runs before the HTTP client exists, so a ConfigurationError
    or CredentialError leaves nothing half-registered.
    """
    settings = settings or get_settings()

    endpoint = resolve_endpoint_config(settings, overrides)
    decryptor = decryptor or PasswordEncryption()
    password = decryptor.decrypt_password(endpoint.encrypted_password)
    certificate = load_client_certificate(endpoint.certificate_path, password)
    ssl_context = build_ssl_context(certificate)

    client = create_http_client(
        endpoint.url,
        ssl_context,
        timeout=settings.request_timeout_seconds,
        transport=transport,
    )
    base_path = settings.api_base_path
    services = DocManServices(
        files=FileService(FileContract(client, base_path)),
        folders=FolderService(FolderContract(client, base_path)),
        file_view_audits=FileViewAuditService(FileViewAuditContract(client, base_path)),
        original_file_delete_audits=OriginalFileDeleteAuditService(
            OriginalFileDeleteAuditContract(client, base_path)
        ),
        heartbeat=HeartbeatService(HeartbeatContract(client, base_path)),
        client=client,
    )
    logger.info(
        "DocMan services registered for %s.%s (%d services)",
        settings.targeted_voyager_instance, settings.targeted_voyager_environment,
        len(services.all()),
    )
    return services
