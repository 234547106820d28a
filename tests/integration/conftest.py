"""Fixtures for tests against a real PostgreSQL database.

The database is taken from DATABASE__URL. Tests are skipped when it cannot be
reached. Tables are created if missing and never dropped, so every test works
on rows it creates itself.
"""

import asyncio

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.persistence.tables import metadata
from tests.di import build_test_container

CONNECT_TIMEOUT_SECONDS = 5


async def _prepare_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as connection:
        await connection.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))
        await connection.run_sync(metadata.create_all)


@pytest_asyncio.fixture
async def postgres():
    """App-scoped container with real persistence.

    Open ``async with postgres() as request`` for each unit of work; the
    request's transaction commits when the block exits.
    """
    container = build_test_container(unmock={"persistence"})
    try:
        engine = await container.get(AsyncEngine)
        await asyncio.wait_for(
            _prepare_schema(engine), timeout=CONNECT_TIMEOUT_SECONDS
        )
    except (OSError, SQLAlchemyError, asyncio.TimeoutError) as e:
        await container.close()
        pytest.skip(f"PostgreSQL not reachable: {e}")

    yield container

    await container.close()
