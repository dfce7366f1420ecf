from enum import StrEnum


class EntityState(StrEnum):
    """Soft-delete lifecycle flag carried by every persisted entity"""

    ACTIVE = 'ACTIVE'
    INACTIVE = 'INACTIVE'
