"""File service."""

from __future__ import annotations

from uuid import UUID

from docman_client.contracts.file import FileContract
from docman_client.schemas.envelope import ApiResponse
from docman_client.schemas.file import File
from docman_client.services.base import DocManService


class FileService(DocManService):
    resource = "File"

    def __init__(self, contract: FileContract):
        self._contract = contract

    async def get_all(
        self, deleted: bool | None = None, folder_id: UUID | None = None,
    ) -> ApiResponse[list[File]]:
        return await self._call("get_all", self._contract.get_all(deleted, folder_id))

    async def get(self, file_id: UUID) -> ApiResponse[File]:
        return await self._call("get", self._contract.get(file_id))

    async def get_by_folder_id(self, folder_id: UUID) -> ApiResponse[list[File]]:
        return await self._call("get_by_folder_id", self._contract.get_by_folder_id(folder_id))

    async def get_by_name(self, name: str, fh_claim_number: str) -> ApiResponse[File]:
        return await self._call("get_by_name", self._contract.get_by_name(name, fh_claim_number))

    async def get_virtual_path(self, file_id: UUID) -> ApiResponse[str]:
        return await self._call("get_virtual_path", self._contract.get_virtual_path(file_id))

    async def insert(self, file: File) -> ApiResponse[UUID]:
        return await self._call("insert", self._contract.insert(file))

    async def insert_batch(self, files: list[File]) -> ApiResponse[list[UUID]]:
        return await self._call("insert_batch", self._contract.insert_batch(files))

    async def update(self, file: File) -> ApiResponse[None]:
        return await self._call("update", self._contract.update(file))

    async def delete(self, file_id: UUID) -> ApiResponse[None]:
        return await self._call("delete", self._contract.delete(file_id))

    async def delete_physical(self, file_id: UUID) -> ApiResponse[None]:
        return await self._call("delete_physical", self._contract.delete_physical(file_id))
