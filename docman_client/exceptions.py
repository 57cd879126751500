"""Client error hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from docman_client.schemas.envelope import ApiError


class DocManError(Exception):
    """Base class for all client errors."""


class ConfigurationError(DocManError):
    """A required setting or resolved key is missing, empty or invalid."""

    def __init__(self, key: str, reason: str = "is missing or empty"):
        self.key = key
        super().__init__(f"Configuration key '{key}' {reason}")


class CredentialError(DocManError):
    """Password decryption or client certificate loading failed."""


class ApiRequestError(DocManError):
    """Raised by ApiResponse.ensure_success() for a non-success response."""

    def __init__(self, error: ApiError):
        self.error = error
        super().__init__(
            f"{error.method} {error.url} failed with {error.status_code} {error.reason_phrase}"
        )
