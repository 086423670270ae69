from typing import Any, ClassVar, Dict, Type

from sqlmodel import SQLModel, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.base import utcnow


class VersionedRepository:
    """
    Conditional write helpers shared by the SQLModel repositories.

    Subclasses set `entity` and `key_field`; every write is a single
    UPDATE scoped by key, tenant, expected version and live rows.
    """

    entity: ClassVar[Type[SQLModel]]
    key_field: ClassVar[str]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _live(self, entity_id: int, tenant_id: int):
        return (
            getattr(self.entity, self.key_field) == entity_id,
            self.entity.tenant_id == tenant_id,
            self.entity.is_deleted == False,
        )

    async def _conditional_write(
        self, entity_id: int, tenant_id: int, version: int, values: Dict[str, Any]
    ) -> int:
        stmt = (
            update(self.entity)
            .where(*self._live(entity_id, tenant_id), self.entity.version == version)
            .values(**values, modified=utcnow(), version=version + 1)
        )
        result = await self.session.execute(stmt)
        return result.rowcount

    async def update(
        self, entity_id: int, tenant_id: int, version: int, values: Dict[str, Any]
    ) -> int:
        """Overwrite fields and bump version if the stored version matches"""
        return await self._conditional_write(entity_id, tenant_id, version, values)

    async def delete(self, entity_id: int, tenant_id: int, version: int) -> int:
        """Soft delete and bump version if the stored version matches"""
        return await self._conditional_write(
            entity_id, tenant_id, version, {"is_deleted": True, "deleted": utcnow()}
        )
