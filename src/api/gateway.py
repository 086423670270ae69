"""
Authorization Gateway

Single execution path for every remote procedure: claim check, tenant
injection, timing, error conversion and one audit record per call.
"""

import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, Iterable, Optional, Type

from sqlalchemy.exc import SQLAlchemyError

from src.api.error import is_client_error, storage_error, wire_code
from src.api.utils.jwt import Claims
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.common import ServiceResponse, TenantCommand
from src.domain.entities import PermissionTier
from src.libs.result import Error, Result

logger = logging.getLogger(__name__)
audit_logger = logging.getLogger("mproject.audit")

Handler = Callable[[UnitOfWork, TenantCommand], Awaitable[Result]]


@dataclass(frozen=True)
class Operation:
    """
    One row of the operation table.

    required is None only for operations that bypass authorization.
    discriminator names the request field echoed in the audit record.
    """

    name: str
    required: Optional[PermissionTier]
    handler: Handler
    response_model: Type[ServiceResponse]
    discriminator: Optional[str] = None


class AuthorizationGateway:
    def __init__(self, operations: Iterable[Operation]):
        self.operations: Dict[str, Operation] = {op.name: op for op in operations}

    def __contains__(self, name: str) -> bool:
        return name in self.operations

    async def dispatch(
        self,
        name: str,
        request: TenantCommand,
        claims: Result[Claims],
        uow: UnitOfWork,
    ) -> ServiceResponse:
        """
        Run one operation on behalf of the caller.

        Business Rules:
        - an operation with a required tier needs valid claims whose tier
          satisfies it; otherwise 401/498 is returned and storage is not used
        - the caller's tenant_id is replaced by the claim value
        - use case errors and escaping storage errors become error_code and
          error_message on the operation's response model
        """
        operation = self.operations[name]
        started = time.perf_counter()
        tenant_id = claims.value.tenant_id if claims.is_ok() else 0

        denial = self._authorize(operation, claims)
        if denial is not None:
            response = self._error_response(operation, denial)
        else:
            if operation.required is not None:
                request = request.model_copy(update={"tenant_id": tenant_id})
            response = await self._invoke(operation, request, uow)

        self._audit(operation, request, response, started, tenant_id)
        return response

    def _authorize(
        self, operation: Operation, claims: Result[Claims]
    ) -> Optional[Error]:
        if operation.required is None:
            return None
        if claims.is_err():
            return claims.error
        tier = claims.value.tier
        if tier is None or not tier.satisfies(operation.required):
            return Error("UNAUTHORIZED", "not authorized")
        return None

    async def _invoke(
        self, operation: Operation, request: TenantCommand, uow: UnitOfWork
    ) -> ServiceResponse:
        try:
            result = await operation.handler(uow, request)
        except (SQLAlchemyError, OverflowError) as e:
            logger.error(f"{operation.name} storage error: {e}")
            return self._error_response(operation, storage_error(e))

        if result.is_err():
            return self._error_response(operation, result.error)
        return result.value

    def _error_response(self, operation: Operation, error: Error) -> ServiceResponse:
        code = wire_code(error)
        if is_client_error(code):
            logger.warning(f"{operation.name} failed: {code} {error.message}")
        return operation.response_model(error_code=code, error_message=error.message)

    def _audit(
        self,
        operation: Operation,
        request: TenantCommand,
        response: ServiceResponse,
        started: float,
        tenant_id: int,
    ) -> None:
        elapsed_ms = (time.perf_counter() - started) * 1000
        field = operation.discriminator
        value = getattr(request, field, None) if field else None
        audit_logger.info(
            f"operation={operation.name} {field or '-'}={value if value is not None else '-'} "
            f"code={response.error_code} elapsed_ms={elapsed_ms:.2f} tenant={tenant_id}",
            extra={
                "operation": operation.name,
                "discriminator": field,
                "discriminator_value": value,
                "error_code": response.error_code,
                "elapsed_ms": elapsed_ms,
                "tenant_id": tenant_id,
            },
        )
