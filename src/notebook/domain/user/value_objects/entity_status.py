"""Record status values shared by persisted entities."""

from enum import IntEnum


class EntityStatus(IntEnum):
    """Status column value; only active records take part in listings."""

    INACTIVE = 0
    ACTIVE = 1
