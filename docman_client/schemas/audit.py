"""Audit records — append-only trails kept by the DocMan API."""

from uuid import UUID

from pydantic import ConfigDict, Field

from docman_client.schemas.base import DocManModel


class FileViewAudit(DocManModel):
    """Who viewed which file."""
    model_config = ConfigDict(frozen=True)

    file_id: UUID | None = None
    viewed_by: str = Field(max_length=100)


class OriginalFileDeleteAudit(DocManModel):
    """Record of an original file removed from a claim."""
    model_config = ConfigDict(frozen=True)

    fh_claim_number: str = Field(max_length=15)
    file_name: str = Field(max_length=100)
    deleted_by: str = Field(max_length=100)
