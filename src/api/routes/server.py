from fastapi import APIRouter, Depends, status

from src.api.gateway import AuthorizationGateway
from src.api.utils.jwt import Claims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.server import GetServerVersionQuery, GetServerVersionResponse
from src.depends import get_claims, get_gateway, get_unit_of_work
from src.libs.result import Result

router = APIRouter(prefix="/server", tags=["Server"])


@router.post("/version", status_code=status.HTTP_200_OK, response_model=GetServerVersionResponse)
async def get_server_version(
    request: GetServerVersionQuery,
    claims: Result[Claims] = Depends(get_claims),
    uow: UnitOfWork = Depends(get_unit_of_work),
    gateway: AuthorizationGateway = Depends(get_gateway),
):
    """Health check - no token needed"""
    return await gateway.dispatch("GetServerVersion", request, claims, uow)
