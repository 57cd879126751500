"""File record — mirrors the DocMan File resource."""

from uuid import UUID

from pydantic import Field

from docman_client.schemas.base import NIL_UUID, DocManModel


class File(DocManModel):
    """Stored file metadata. A nil id on insert lets the server assign one."""
    id: UUID = NIL_UUID
    fh_claim_number: str = Field(max_length=15)
    name: str = Field(max_length=100)
    file_type: str = Field(max_length=10)
    folder_id: UUID | None = None
    key_version: int = 0
    deleted: bool = False
    modified_by: str = Field(max_length=100)
