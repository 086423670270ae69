from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.context import ServiceContext
from src.api.gateway import AuthorizationGateway
from src.api.utils.jwt import Claims
from src.libs.result import Result

# Missing credentials are reported by the gateway as error_code 401
security = HTTPBearer(auto_error=False)


def get_context(request: Request) -> ServiceContext:
    return request.app.state.context


async def get_unit_of_work(context: ServiceContext = Depends(get_context)):
    async with context.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_gateway(context: ServiceContext = Depends(get_context)) -> AuthorizationGateway:
    return context.gateway


async def get_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    context: ServiceContext = Depends(get_context),
) -> Result[Claims]:
    """
    Dependency to extract and verify the JWT from the Authorization header.

    Never raises: an absent, invalid or expired token is returned as an
    error Result so the gateway can answer in the response body.
    """
    token = credentials.credentials if credentials else None
    return context.claims_extractor.extract(token)
