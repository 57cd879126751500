"""REST route contracts, one per DocMan resource."""

from docman_client.contracts.audit import FileViewAuditContract, OriginalFileDeleteAuditContract
from docman_client.contracts.base import RestContract
from docman_client.contracts.file import FileContract
from docman_client.contracts.folder import FolderContract
from docman_client.contracts.heartbeat import HeartbeatContract

__all__ = [
    "FileContract",
    "FileViewAuditContract",
    "FolderContract",
    "HeartbeatContract",
    "OriginalFileDeleteAuditContract",
    "RestContract",
]
