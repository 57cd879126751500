"""Heartbeat service — server liveness and active database connection."""

from __future__ import annotations

from datetime import datetime

from docman_client.contracts.heartbeat import HeartbeatContract
from docman_client.schemas.envelope import ApiResponse
from docman_client.services.base import DocManService


class HeartbeatService(DocManService):
    resource = "Heartbeat"

    def __init__(self, contract: HeartbeatContract):
        self._contract = contract

    async def get_server_time(self) -> ApiResponse[datetime]:
        return await self._call("get_server_time", self._contract.get_server_time())

    async def get_connection_string_name(self) -> ApiResponse[str]:
        return await self._call(
            "get_connection_string_name", self._contract.get_connection_string_name(),
        )
