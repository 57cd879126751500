"""File routes."""

from __future__ import annotations

from uuid import UUID

from docman_client.contracts.base import RestContract, segment
from docman_client.schemas.envelope import ApiResponse
from docman_client.schemas.file import File


class FileContract(RestContract):
    async def get_all(
        self, deleted: bool | None = None, folder_id: UUID | None = None,
    ) -> ApiResponse[list[File]]:
        params = {"deleted": deleted, "folderId": str(folder_id) if folder_id else None}
        return await self._send("GET", "files", params=params, response_type=list[File])

    async def get(self, file_id: UUID) -> ApiResponse[File]:
        return await self._send("GET", f"files/{file_id}", response_type=File)

    async def get_by_folder_id(self, folder_id: UUID) -> ApiResponse[list[File]]:
        return await self._send("GET", f"files/folder/{folder_id}", response_type=list[File])

    async def get_by_name(self, name: str, fh_claim_number: str) -> ApiResponse[File]:
        return await self._send(
            "GET", f"files/claim/{segment(fh_claim_number)}",
            params={"name": name}, response_type=File,
        )

    async def get_virtual_path(self, file_id: UUID) -> ApiResponse[str]:
        return await self._send("GET", f"files/{file_id}/virtualpath", response_type=str)

    async def insert(self, file: File) -> ApiResponse[UUID]:
        return await self._send("POST", "files", json=file, response_type=UUID)

    async def insert_batch(self, files: list[File]) -> ApiResponse[list[UUID]]:
        return await self._send("POST", "files/batch", json=files, response_type=list[UUID])

    async def update(self, file: File) -> ApiResponse[None]:
        return await self._send("PUT", f"files/{file.id}", json=file)

    async def delete(self, file_id: UUID) -> ApiResponse[None]:
        """Soft delete: the server flags the file as deleted."""
        return await self._send("DELETE", f"files/{file_id}")

    async def delete_physical(self, file_id: UUID) -> ApiResponse[None]:
        return await self._send("DELETE", f"files/{file_id}/physical")
