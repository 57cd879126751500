"""Heartbeat routes."""

from __future__ import annotations

from datetime import datetime

from docman_client.contracts.base import RestContract
from docman_client.schemas.envelope import ApiResponse


class HeartbeatContract(RestContract):
    async def get_server_time(self) -> ApiResponse[datetime]:
        return await self._send("GET", "heartbeat", response_type=datetime)

    async def get_connection_string_name(self) -> ApiResponse[str]:
        return await self._send("GET", "heartbeat/connectionstring", response_type=str)
