"""
Server Use Case DTOs
"""

from src.app.use_cases.common import ServiceResponse, TenantCommand


class GetServerVersionQuery(TenantCommand):
    pass


class GetServerVersionResponse(ServiceResponse):
    server_version: str = ""
    server_uptime: int = 0
