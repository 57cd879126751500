"""Request shaping and response decoding shared by all route contracts."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import BaseModel, TypeAdapter

from docman_client.schemas.envelope import ApiError, ApiResponse

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _adapter(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def segment(value: object) -> str:
    """Percent-encode one path segment."""
    return quote(str(value), safe="")


def _to_json(body: Any) -> Any:
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", by_alias=True)
    if isinstance(body, (list, tuple)):
        return [_to_json(item) for item in body]
    return body


class RestContract:
    """Maps contract methods onto REST routes below the versioned base path."""

    def __init__(self, client: httpx.AsyncClient, base_path: str = "api/v1"):
        self._client = client
        self._base_path = base_path.strip("/")

    def _url(self, path: str) -> str:
        return f"{self._base_path}/{path}" if self._base_path else path

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: Any = None,
        response_type: Any = None,
    ) -> ApiResponse:
        query = {k: v for k, v in (params or {}).items() if v is not None}
        response = await self._client.request(
            method,
            self._url(path),
            params=query or None,
            json=_to_json(json) if json is not None else None,
        )
        headers = dict(response.headers.items())

        if not response.is_success:
            error = ApiError(
                status_code=response.status_code,
                reason_phrase=response.reason_phrase,
                method=method,
                url=str(response.request.url),
                content=response.text,
            )
            return ApiResponse(
                content=None,
                is_success=False,
                status_code=response.status_code,
                error=error,
                headers=headers,
            )

        return ApiResponse(
            content=self._decode(response, response_type),
            is_success=True,
            status_code=response.status_code,
            headers=headers,
        )

    @staticmethod
    def _decode(response: httpx.Response, response_type: Any) -> Any:
        if response_type is None or not response.content:
            return None
        content_type = response.headers.get("content-type", "")
        if "json" not in content_type:
            # Scalars such as ids, timestamps and paths may arrive as bare text
            return _adapter(response_type).validate_strings(response.text)
        return _adapter(response_type).validate_json(response.content)
