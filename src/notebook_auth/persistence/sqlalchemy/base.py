"""SQLAlchemy declarative base for notebook_auth models.

The notebook application's own ``Base`` shares ``AuthBase.metadata`` so
profile tables can hold real foreign keys to ``identities.id`` and a
single ``create_all`` builds the whole schema.
"""

from sqlalchemy.orm import DeclarativeBase


class AuthBase(DeclarativeBase):
    """Declarative base for notebook_auth models."""
