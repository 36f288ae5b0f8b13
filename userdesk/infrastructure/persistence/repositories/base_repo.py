"""Repository base classes for database operations with SQLAlchemy 2.0."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any, Protocol

from attrs import define
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import ColumnElement

from userdesk.config import get_logger
from userdesk.infrastructure.persistence.database.db_connection import Database
from userdesk.infrastructure.persistence.database.db_models import UserDeskDBBase

logger = get_logger(__name__)


class ModelMapper[TDBModel: UserDeskDBBase, TDomainModel](Protocol):
    """Protocol for bidirectional mapping between models."""

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        """Convert database model to domain model."""
        ...

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        """Convert domain model to database model."""
        ...

    @staticmethod
    def apply(domain_model: TDomainModel, db_model: TDBModel) -> TDBModel:
        """Copy mutable domain fields onto an existing database model."""
        ...


@define(frozen=True, slots=True)
class BaseModelMapper[TDBModel: UserDeskDBBase, TDomainModel]:
    """Base implementation of ModelMapper with common functionality.

    Usage:
        @define(frozen=True, slots=True)
        class UserMapper(BaseModelMapper[DBUser, User]):
            @staticmethod
            def to_domain(db_model: DBUser) -> User:
                return User(...)

            @staticmethod
            def to_db(domain_model: User) -> DBUser:
                return DBUser(...)
    """

    @staticmethod
    def to_domain(db_model: TDBModel) -> TDomainModel:
        raise NotImplementedError("Subclasses must implement to_domain")

    @staticmethod
    def to_db(domain_model: TDomainModel) -> TDBModel:
        raise NotImplementedError("Subclasses must implement to_db")

    @staticmethod
    def apply(domain_model: TDomainModel, db_model: TDBModel) -> TDBModel:
        raise NotImplementedError("Subclasses must implement apply")

    @classmethod
    def map_collection(cls, db_models: list[TDBModel]) -> list[TDomainModel]:
        """Map a collection of DB models to domain models.

        Uses cls.to_domain so the subclass implementation is called.
        """
        return [cls.to_domain(db_model) for db_model in db_models if db_model]


class BaseRepository[TDBModel: UserDeskDBBase, TDomainModel]:
    """Base repository that opens one session per operation.

    Reads run in a plain session without an explicit transaction. Writes run
    inside ``session.begin()``, which commits on success and rolls back when
    the block raises.
    """

    def __init__(
        self,
        database: Database,
        model_class: type[TDBModel],
        mapper: type[ModelMapper[TDBModel, TDomainModel]],
    ) -> None:
        self.database = database
        self.model_class = model_class
        self.mapper = mapper
        logger.debug(
            f"Initialized {self.__class__.__name__} for {model_class.__name__}",
        )

    # -------------------------------------------------------------------------
    # SESSION SCOPES
    # -------------------------------------------------------------------------

    @asynccontextmanager
    async def read_session(self) -> AsyncIterator[AsyncSession]:
        """Session for pure reads."""
        async with self.database.session() as session:
            yield session

    @asynccontextmanager
    async def write_session(self) -> AsyncIterator[AsyncSession]:
        """Session with a transaction that commits on exit or rolls back on error."""
        async with self.database.session() as session, session.begin():
            yield session

    # -------------------------------------------------------------------------
    # SELECT STATEMENT BUILDERS
    # -------------------------------------------------------------------------

    def select(self, *conditions: ColumnElement[bool]) -> Select[tuple[TDBModel]]:
        """Create select statement ordered by id."""
        return (
            select(self.model_class)
            .where(*conditions)
            .order_by(self.model_class.id)
        )

    def count(self, *conditions: ColumnElement[bool]) -> Select[tuple[int]]:
        """Create a count statement for records matching conditions."""
        return select(func.count(self.model_class.id)).where(*conditions)

    # -------------------------------------------------------------------------
    # DIRECT DATABASE OPERATIONS (non-decorated helpers)
    # -------------------------------------------------------------------------

    async def _execute_query(
        self, session: AsyncSession, stmt: Select[tuple[TDBModel]]
    ) -> list[TDBModel]:
        result = await session.execute(stmt)
        return list(result.scalars().all())

    async def _execute_query_one(
        self, session: AsyncSession, stmt: Select[tuple[TDBModel]]
    ) -> TDBModel | None:
        result = await session.execute(stmt.limit(1))
        return result.scalar_one_or_none()

    async def _execute_scalar(self, session: AsyncSession, stmt: Select) -> Any:
        return await session.scalar(stmt)
