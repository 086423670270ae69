"""
Project Service Domain Enums
"""

from enum import Enum
from typing import Optional


class PermissionTier(str, Enum):
    """Caller permission tier carried in the projsvc claim"""

    admin = "projadmin"
    read_write = "projrw"
    read_only = "projro"

    @property
    def rank(self) -> int:
        return _TIER_RANK[self]

    def satisfies(self, required: "PermissionTier") -> bool:
        return self.rank >= required.rank

    @classmethod
    def parse(cls, value: object) -> Optional["PermissionTier"]:
        if not isinstance(value, str):
            return None
        try:
            return cls(value)
        except ValueError:
            return None


_TIER_RANK = {
    PermissionTier.read_only: 1,
    PermissionTier.read_write: 2,
    PermissionTier.admin: 3,
}
