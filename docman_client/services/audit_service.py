"""Audit trail services."""

from __future__ import annotations

from docman_client.contracts.audit import FileViewAuditContract, OriginalFileDeleteAuditContract
from docman_client.schemas.audit import FileViewAudit, OriginalFileDeleteAudit
from docman_client.schemas.envelope import ApiResponse
from docman_client.services.base import DocManService


class FileViewAuditService(DocManService):
    """Insert-only: views are never edited or removed."""

    resource = "FileViewAudit"

    def __init__(self, contract: FileViewAuditContract):
        self._contract = contract

    async def insert(self, audit: FileViewAudit) -> ApiResponse[None]:
        return await self._call("insert", self._contract.insert(audit))


class OriginalFileDeleteAuditService(DocManService):
    resource = "OriginalFileDeleteAudit"

    def __init__(self, contract: OriginalFileDeleteAuditContract):
        self._contract = contract

    async def insert(self, audit: OriginalFileDeleteAudit) -> ApiResponse[None]:
        return await self._call("insert", self._contract.insert(audit))

    async def delete_physical(self, fh_claim_number: str, file_name: str) -> ApiResponse[None]:
        """Administrative removal of an audit entry."""
        return await self._call(
            "delete_physical", self._contract.delete_physical(fh_claim_number, file_name),
        )
