"""SQLAlchemy database configuration and connection management.

This module is responsible for:
- Engine creation and configuration
- Session factory creation
- Schema initialization

There is no module-level engine. A ``Database`` handle is built explicitly
(usually from settings) and handed to the repositories that need it.
"""

from pathlib import Path
from typing import Self

from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from userdesk.config import get_logger, settings
from userdesk.infrastructure.persistence.database.db_models import UserDeskDBBase

# Create module logger
logger = get_logger(__name__)


def _is_sqlite(db_url: str) -> bool:
    return make_url(db_url).get_backend_name() == "sqlite"


def _is_memory_sqlite(db_url: str) -> bool:
    database = make_url(db_url).database
    return _is_sqlite(db_url) and database in (None, "", ":memory:")


def _ensure_sqlite_directory(db_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    if not _is_sqlite(db_url) or _is_memory_sqlite(db_url):
        return
    database = make_url(db_url).database
    if database:
        Path(database).parent.mkdir(parents=True, exist_ok=True)


def create_db_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async SQLAlchemy engine tuned for SQLite where applicable."""
    engine_kwargs: dict = {"echo": echo, "pool_pre_ping": True}

    if _is_sqlite(db_url):
        engine_kwargs["connect_args"] = {
            "check_same_thread": False,
            "timeout": 30.0,
        }
        if _is_memory_sqlite(db_url):
            # One shared connection, otherwise each session sees an empty database
            engine_kwargs["poolclass"] = StaticPool
        else:
            _ensure_sqlite_directory(db_url)
            engine_kwargs.update(pool_size=1, max_overflow=2, pool_timeout=60)

    engine = create_async_engine(db_url, **engine_kwargs)

    if _is_sqlite(db_url):

        @event.listens_for(engine.sync_engine, "connect")
        def _set_sqlite_pragma(dbapi_connection, _):  # pragma: no cover
            """Set SQLite PRAGMAs on connection creation."""
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA busy_timeout = 30000")
            cursor.execute("PRAGMA journal_mode = WAL")
            cursor.execute("PRAGMA synchronous = NORMAL")
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    logger.debug(f"Created database engine for {make_url(db_url).render_as_string()}")
    return engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create an async session factory for the given engine.

    Objects are not expired on commit so that mapped values stay readable
    after the session closes.
    """
    return async_sessionmaker(
        bind=engine,
        expire_on_commit=False,
        autoflush=True,
    )


class Database:
    """Explicitly scoped persistence handle: one engine plus its session factory.

    Example:
        ```python
        async with Database.from_settings() as database:
            await database.init_schema()
            repository = UserRepository(database)
        ```
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        self.url = url
        self.engine = create_db_engine(url, echo=echo)
        self.session_factory = create_session_factory(self.engine)

    @classmethod
    def from_settings(cls, url: str | None = None) -> Self:
        """Build a handle from application settings, optionally overriding the URL."""
        return cls(url or settings.database.url, echo=settings.database.echo)

    def session(self) -> AsyncSession:
        """Open a new session; use it as an async context manager."""
        return self.session_factory()

    async def init_schema(self) -> None:
        """Create all tables that don't exist yet."""
        async with self.engine.begin() as conn:
            await conn.run_sync(UserDeskDBBase.metadata.create_all)
        logger.info("Database schema initialized")

    async def dispose(self) -> None:
        """Release pooled connections."""
        await self.engine.dispose()
        logger.debug("Database engine disposed")

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        await self.dispose()
