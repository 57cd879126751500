"""Request/response records of the DocMan API."""

from docman_client.schemas.audit import FileViewAudit, OriginalFileDeleteAudit
from docman_client.schemas.base import NIL_UUID
from docman_client.schemas.envelope import ApiError, ApiResponse
from docman_client.schemas.file import File
from docman_client.schemas.folder import Folder

__all__ = [
    "NIL_UUID",
    "ApiError",
    "ApiResponse",
    "File",
    "FileViewAudit",
    "Folder",
    "OriginalFileDeleteAudit",
]
