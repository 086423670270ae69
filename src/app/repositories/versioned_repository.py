from abc import ABC, abstractmethod
from typing import Any, Dict


class IVersionedRepository(ABC):
    """
    Optimistic-concurrency write contract shared by every entity repository.

    Each method issues exactly one conditional write and returns the number of
    affected rows; 1 means the caller's version was current.
    """

    @abstractmethod
    async def update(
        self, entity_id: int, tenant_id: int, version: int, values: Dict[str, Any]
    ) -> int:
        """Overwrite fields and bump version if the stored version matches"""
        pass

    @abstractmethod
    async def delete(self, entity_id: int, tenant_id: int, version: int) -> int:
        """Soft delete and bump version if the stored version matches"""
        pass
