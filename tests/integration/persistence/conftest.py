"""Fixtures for persistence tests against a file-backed SQLite database."""

import pytest

from notebook.infrastructure.persistence.sqlalchemy import (
    create_engine,
    create_session_maker,
    create_tables,
)


@pytest.fixture
async def sqlite_engine(tmp_path):
    """Fresh database with the full schema for each test."""
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'notebook.db'}")
    await create_tables(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_maker(sqlite_engine):
    return create_session_maker(sqlite_engine)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session
