"""DocMan services — singleton registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from docman_client.config import Settings

if TYPE_CHECKING:
    from docman_client.credentials import PasswordDecryptor
    from docman_client.registration import DocManServices
    from docman_client.services.audit_service import (
        FileViewAuditService,
        OriginalFileDeleteAuditService,
    )
    from docman_client.services.file_service import FileService
    from docman_client.services.folder_service import FolderService
    from docman_client.services.heartbeat_service import HeartbeatService

logger = logging.getLogger(__name__)

_services: DocManServices | None = None


def init_services(
    settings: Settings | None = None,
    *,
    overrides: Mapping[str, str] | None = None,
    decryptor: PasswordDecryptor | None = None,
) -> DocManServices:
    """Register all services once at startup. Raises on bad config or credentials."""
    global _services

    from docman_client.registration import register_services

    if _services is not None:
        return _services
    _services = register_services(settings, overrides=overrides, decryptor=decryptor)
    return _services


async def shutdown_services() -> None:
    """Close the shared HTTP client and forget the registered services."""
    global _services
    if _services:
        await _services.aclose()
        _services = None
        logger.info("DocMan services shut down")


def _registered() -> DocManServices:
    if _services is None:
        raise RuntimeError("Services not initialized — call init_services() first")
    return _services


def get_file_service() -> FileService:
    return _registered().files


def get_folder_service() -> FolderService:
    return _registered().folders


def get_file_view_audit_service() -> FileViewAuditService:
    return _registered().file_view_audits


def get_original_file_delete_audit_service() -> OriginalFileDeleteAuditService:
    return _registered().original_file_delete_audits


def get_heartbeat_service() -> HeartbeatService:
    return _registered().heartbeat
