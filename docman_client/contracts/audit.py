"""Audit trail routes — insert-only, plus administrative physical delete."""

from __future__ import annotations

from docman_client.contracts.base import RestContract
from docman_client.schemas.audit import FileViewAudit, OriginalFileDeleteAudit
from docman_client.schemas.envelope import ApiResponse


class FileViewAuditContract(RestContract):
    async def insert(self, audit: FileViewAudit) -> ApiResponse[None]:
        return await self._send("POST", "fileviewaudits", json=audit)


class OriginalFileDeleteAuditContract(RestContract):
    async def insert(self, audit: OriginalFileDeleteAudit) -> ApiResponse[None]:
        return await self._send("POST", "originalfiledeleteaudits", json=audit)

    async def delete_physical(self, fh_claim_number: str, file_name: str) -> ApiResponse[None]:
        return await self._send(
            "DELETE", "originalfiledeleteaudits",
            params={"fhClaimNumber": fh_claim_number, "fileName": file_name},
        )
