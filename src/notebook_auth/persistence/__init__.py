"""Persistence implementations for notebook_auth.

This package contains database-specific implementations of the
repository interfaces defined in notebook_auth.repositories.

Structure:
    persistence/
    └── sqlalchemy/     # SQLAlchemy/SQL database implementation

Usage:
    from notebook_auth.persistence.sqlalchemy import (
        AuthBase,
        IdentityModel,
        IdentityRepositorySQLAlchemy,
    )
"""
