"""
Get Server Version Use Case

Health check: reports the configured version and seconds since start.
"""

from datetime import UTC, datetime

from src.libs.result import Result, Return

from .dtos import GetServerVersionQuery, GetServerVersionResponse


class GetServerVersionUseCase:
    def __init__(self, server_version: str, started_at: datetime):
        self.server_version = server_version
        self.started_at = started_at

    async def execute(self, query: GetServerVersionQuery) -> Result[GetServerVersionResponse]:
        uptime = datetime.now(UTC) - self.started_at
        return Return.ok(
            GetServerVersionResponse(
                server_version=self.server_version,
                server_uptime=int(uptime.total_seconds()),
            )
        )
