"""Folder routes."""

from __future__ import annotations

from uuid import UUID

from docman_client.contracts.base import RestContract, segment
from docman_client.schemas.envelope import ApiResponse
from docman_client.schemas.folder import Folder


class FolderContract(RestContract):
    async def get_all(self, deleted: bool | None = None) -> ApiResponse[list[Folder]]:
        return await self._send(
            "GET", "folders", params={"deleted": deleted}, response_type=list[Folder],
        )

    async def get(self, folder_id: UUID) -> ApiResponse[Folder]:
        return await self._send("GET", f"folders/{folder_id}", response_type=Folder)

    async def get_by_claim_number(self, fh_claim_number: str) -> ApiResponse[list[Folder]]:
        return await self._send(
            "GET", f"folders/claim/{segment(fh_claim_number)}", response_type=list[Folder],
        )

    async def get_by_parent(self, parent_folder_id: UUID) -> ApiResponse[list[Folder]]:
        return await self._send(
            "GET", f"folders/{parent_folder_id}/children", response_type=list[Folder],
        )

    async def insert(self, folder: Folder) -> ApiResponse[UUID]:
        return await self._send("POST", "folders", json=folder, response_type=UUID)

    async def update(self, folder: Folder) -> ApiResponse[None]:
        return await self._send("PUT", f"folders/{folder.id}", json=folder)

    async def delete(self, folder_id: UUID) -> ApiResponse[None]:
        """Soft delete."""
        return await self._send("DELETE", f"folders/{folder_id}")

    async def delete_physical(self, folder_id: UUID) -> ApiResponse[None]:
        return await self._send("DELETE", f"folders/{folder_id}/physical")
