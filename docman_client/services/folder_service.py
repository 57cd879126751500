"""Folder service."""

from __future__ import annotations

from uuid import UUID

from docman_client.contracts.folder import FolderContract
from docman_client.schemas.envelope import ApiResponse
from docman_client.schemas.folder import Folder
from docman_client.services.base import DocManService


class FolderService(DocManService):
    resource = "Folder"

    def __init__(self, contract: FolderContract):
        self._contract = contract

    async def get_all(self, deleted: bool | None = None) -> ApiResponse[list[Folder]]:
        return await self._call("get_all", self._contract.get_all(deleted))

    async def get(self, folder_id: UUID) -> ApiResponse[Folder]:
        return await self._call("get", self._contract.get(folder_id))

    async def get_by_claim_number(self, fh_claim_number: str) -> ApiResponse[list[Folder]]:
        return await self._call(
            "get_by_claim_number", self._contract.get_by_claim_number(fh_claim_number),
        )

    async def get_by_parent(self, parent_folder_id: UUID) -> ApiResponse[list[Folder]]:
        return await self._call("get_by_parent", self._contract.get_by_parent(parent_folder_id))

    async def insert(self, folder: Folder) -> ApiResponse[UUID]:
        return await self._call("insert", self._contract.insert(folder))

    async def update(self, folder: Folder) -> ApiResponse[None]:
        return await self._call("update", self._contract.update(folder))

    async def delete(self, folder_id: UUID) -> ApiResponse[None]:
        return await self._call("delete", self._contract.delete(folder_id))

    async def delete_physical(self, folder_id: UUID) -> ApiResponse[None]:
        return await self._call("delete_physical", self._contract.delete_physical(folder_id))
