"""SQLAlchemy persistence for the notebook backend."""

from notebook.infrastructure.persistence.sqlalchemy.database import (
    create_engine,
    create_session_maker,
    create_tables,
)
from notebook.infrastructure.persistence.sqlalchemy.models import (
    Base,
    UserProfileModel,
)
from notebook.infrastructure.persistence.sqlalchemy.repositories import (
    UserProfileRepositorySQLAlchemy,
)
from notebook.infrastructure.persistence.sqlalchemy.unit_of_work import (
    SQLAlchemyUnitOfWork,
)

__all__ = [
    "Base",
    "SQLAlchemyUnitOfWork",
    "UserProfileModel",
    "UserProfileRepositorySQLAlchemy",
    "create_engine",
    "create_session_maker",
    "create_tables",
]
