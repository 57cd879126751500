"""Uniform response envelope returned by every service call."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from docman_client.exceptions import ApiRequestError

T = TypeVar("T")


@dataclass(frozen=True)
class ApiError:
    """Details of a non-success HTTP response."""
    status_code: int
    reason_phrase: str
    method: str
    url: str
    content: str = ""


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    content: T | None
    is_success: bool
    status_code: int
    error: ApiError | None = None
    headers: dict[str, str] = field(default_factory=dict)

    def ensure_success(self) -> T | None:
        """Return the payload, or raise ApiRequestError for a failed call."""
        if not self.is_success and self.error is not None:
            raise ApiRequestError(self.error)
        return self.content
