from datetime import UTC, datetime
from typing import Optional

from sqlmodel import DateTime, Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC).replace(tzinfo=None)


class VersionedEntity(SQLModel):
    """
    Lifecycle envelope shared by every persisted entity.

    Business Rules:
    - version starts at 1 and grows by exactly 1 per successful mutation
    - rows are never erased; is_deleted hides them from reads and writes
    - tenant_id scopes every lookup and write
    """

    created: datetime = Field(default_factory=utcnow, sa_type=DateTime, nullable=False)
    modified: datetime = Field(default_factory=utcnow, sa_type=DateTime, nullable=False)
    deleted: Optional[datetime] = Field(default=None, sa_type=DateTime)
    is_deleted: bool = Field(default=False, nullable=False)
    version: int = Field(default=1, nullable=False)
    tenant_id: int = Field(nullable=False, index=True)
