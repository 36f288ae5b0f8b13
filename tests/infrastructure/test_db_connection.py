"""Tests for the Database handle and engine configuration."""

from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from userdesk.infrastructure.persistence.database import Database, create_db_engine


async def test_memory_database_uses_static_pool():
    engine = create_db_engine("sqlite+aiosqlite:///:memory:")
    try:
        assert isinstance(engine.pool, StaticPool)
    finally:
        await engine.dispose()


async def test_file_database_creates_parent_directory(tmp_path):
    db_path = tmp_path / "nested" / "dir" / "users.db"

    async with Database(f"sqlite+aiosqlite:///{db_path}") as database:
        await database.init_schema()

    assert db_path.parent.is_dir()
    assert db_path.exists()


async def test_init_schema_creates_users_table(database):
    async with database.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert "users" in tables


async def test_init_schema_is_idempotent(database):
    await database.init_schema()


async def test_from_settings_prefers_explicit_url(tmp_path):
    url = f"sqlite+aiosqlite:///{tmp_path / 'explicit.db'}"

    async with Database.from_settings(url) as database:
        assert database.url == url
