"""Folder record — mirrors the DocMan Folder resource (temporal on the server)."""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from docman_client.schemas.base import NIL_UUID, DocManModel


class Folder(DocManModel):
    """Folder in a claim's virtual tree."""
    id: UUID = NIL_UUID
    parent_folder_id: UUID | None = None
    name: str = Field(max_length=100)
    deleted: bool = False
    modified_by: str = Field(max_length=100)
    # Server-assigned validity period; read from responses, never sent
    valid_from: datetime | None = Field(default=None, exclude=True)
    valid_to: datetime | None = Field(default=None, exclude=True)
