"""User repository: CRUD operations over the ``users`` table."""

from userdesk.config import get_logger
from userdesk.domain.entities import User
from userdesk.domain.errors import NotFoundError
from userdesk.infrastructure.persistence.database.db_connection import Database
from userdesk.infrastructure.persistence.database.db_models import DBUser
from userdesk.infrastructure.persistence.repositories.base_repo import BaseRepository
from userdesk.infrastructure.persistence.repositories.repo_decorator import (
    db_operation,
)
from userdesk.infrastructure.persistence.repositories.user.mapper import UserMapper

logger = get_logger(__name__)


class UserRepository(BaseRepository[DBUser, User]):
    """SQLAlchemy implementation of ``UserRepositoryProtocol``."""

    def __init__(self, database: Database) -> None:
        super().__init__(database=database, model_class=DBUser, mapper=UserMapper)

    # -------------------------------------------------------------------------
    # READS
    # -------------------------------------------------------------------------

    @db_operation("find_user_by_id")
    async def find_by_id(self, user_id: int) -> User | None:
        """Find a user by id."""
        async with self.read_session() as session:
            db_user = await session.get(DBUser, user_id)
            if db_user is None:
                logger.warning(f"User not found with id: {user_id}")
                return None
            logger.info(f"User found with id: {user_id}")
            return self.mapper.to_domain(db_user)

    @db_operation("find_all_users")
    async def find_all(self) -> list[User]:
        """Return all users ordered by id."""
        async with self.read_session() as session:
            db_users = await self._execute_query(session, self.select())
            logger.info(f"Found {len(db_users)} users")
            return self.mapper.map_collection(db_users)

    @db_operation("find_user_by_email")
    async def find_by_email(self, email: str) -> User | None:
        """Find a user by exact email."""
        async with self.read_session() as session:
            db_user = await self._execute_query_one(
                session, self.select(DBUser.email == email)
            )
            if db_user is None:
                logger.info(f"User not found with email: {email}")
                return None
            logger.info(f"User found with email: {email}")
            return self.mapper.to_domain(db_user)

    @db_operation("check_email_exists")
    async def is_email_exists_for_other_user(
        self, email: str, exclude_id: int | None
    ) -> bool:
        """Check whether any user other than ``exclude_id`` holds ``email``."""
        conditions = [DBUser.email == email]
        if exclude_id is not None:
            conditions.append(DBUser.id != exclude_id)

        async with self.read_session() as session:
            count = await self._execute_scalar(session, self.count(*conditions))

        exists = bool(count)
        logger.info(f"Email {email} exists for other users: {exists}")
        return exists

    # -------------------------------------------------------------------------
    # WRITES
    # -------------------------------------------------------------------------

    @db_operation("save_user")
    async def save(self, user: User) -> User:
        """Insert a new user and return it with the assigned id."""
        async with self.write_session() as session:
            db_user = self.mapper.to_db(user)
            session.add(db_user)
            await session.flush()
            saved = self.mapper.to_domain(db_user)

        logger.info(f"User saved successfully with id: {saved.id}")
        return saved

    @db_operation("update_user")
    async def update(self, user: User) -> User:
        """Write name, email and age of an existing user."""
        if user.id is None:
            raise NotFoundError("Cannot update a user without an id")

        async with self.write_session() as session:
            db_user = await session.get(DBUser, user.id)
            if db_user is None:
                logger.warning(f"Attempt to update non-existing user with id: {user.id}")
                raise NotFoundError(f"User not found with id: {user.id}")
            self.mapper.apply(user, db_user)
            await session.flush()
            updated = self.mapper.to_domain(db_user)

        logger.info(f"User updated successfully with id: {updated.id}")
        return updated

    @db_operation("delete_user")
    async def delete(self, user_id: int) -> None:
        """Remove a user."""
        async with self.write_session() as session:
            db_user = await session.get(DBUser, user_id)
            if db_user is None:
                logger.warning(f"Attempt to delete non-existing user with id: {user_id}")
                raise NotFoundError(f"User not found with id: {user_id}")
            await session.delete(db_user)

        logger.info(f"User deleted successfully with id: {user_id}")
