"""
StatusType Entity

Tenant-scoped catalog of statuses shared by projects and tasks.
"""

from typing import Optional

from sqlmodel import Field, UniqueConstraint

from src.domain.base import VersionedEntity


class StatusType(VersionedEntity, table=True):
    """
    StatusType entity - lookup row with a caller-assigned id.

    Business Rules:
    - status_id is chosen by the caller, never generated
    - (tenant_id, status_id) is unique; a duplicate insert fails in storage
    """

    __tablename__ = "status_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    status_id: int = Field(nullable=False)
    status_name: str = Field(max_length=32, nullable=False)
    description: str = Field(max_length=255, nullable=False)

    __table_args__ = (
        UniqueConstraint("tenant_id", "status_id", name="uq_status_type_tenant_status"),
    )
