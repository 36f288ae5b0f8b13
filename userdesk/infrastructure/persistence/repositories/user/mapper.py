"""User mapper for converting between domain and database models."""

from typing import override

from attrs import define

from userdesk.domain.entities import User
from userdesk.infrastructure.persistence.database.db_models import DBUser
from userdesk.infrastructure.persistence.repositories.base_repo import BaseModelMapper


@define(frozen=True, slots=True)
class UserMapper(BaseModelMapper[DBUser, User]):
    """Bidirectional mapper between DB and domain models for User."""

    @staticmethod
    @override
    def to_domain(db_model: DBUser) -> User:
        return User(
            id=db_model.id,
            name=db_model.name,
            email=db_model.email,
            age=db_model.age,
        )

    @staticmethod
    @override
    def to_db(domain_model: User) -> DBUser:
        # id stays unset so storage assigns one
        return DBUser(
            name=domain_model.name,
            email=domain_model.email,
            age=domain_model.age,
        )

    @staticmethod
    @override
    def apply(domain_model: User, db_model: DBUser) -> DBUser:
        db_model.name = domain_model.name
        db_model.email = domain_model.email
        db_model.age = domain_model.age
        return db_model
