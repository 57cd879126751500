"""Service wrapper boundary — logs failed calls, never swallows them."""

from __future__ import annotations

import logging
from collections.abc import Awaitable
from typing import TypeVar

import httpx
from pydantic import ValidationError

from docman_client.schemas.envelope import ApiResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DocManService:
    """Base for the per-resource services."""

    resource = "DocMan"

    async def _call(self, operation: str, request: Awaitable[ApiResponse[T]]) -> ApiResponse[T]:
        """Await one contract call.

        Non-success responses are logged and returned for the caller to
        inspect. Transport and decode errors are logged and re-raised.
        """
        try:
            response = await request
        except httpx.HTTPError as e:
            status = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else "-"
            logger.error(
                "%s.%s failed (status=%s): %s: %s",
                self.resource, operation, status, type(e).__name__, e,
            )
            raise
        except ValidationError as e:
            logger.error(
                "%s.%s returned an unreadable payload (status=-): %s",
                self.resource, operation, e,
            )
            raise

        if not response.is_success:
            logger.error(
                "%s.%s failed (status=%s): %s",
                self.resource, operation, response.status_code,
                response.error.content if response.error else "",
            )
        else:
            logger.debug("%s.%s -> %s", self.resource, operation, response.status_code)
        return response
