"""Mapper for User ORM ↔ Domain conversion."""

from learntrack.domain.common.value_objects import Email, UserId
from learntrack.domain.identity.entities.user import User
from learntrack.models import User as UserORM


class UserMapper:
    """Mapper for User ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: UserORM) -> User:
        return User.create_with_id(
            id=UserId(orm_model.id),
            name=orm_model.name,
            email=Email(orm_model.email),
            hashed_password=orm_model.hashed_password,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: User, orm_model: UserORM | None = None) -> UserORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.email = domain_entity.email.value
            orm_model.hashed_password = domain_entity.hashed_password
            return orm_model

        return UserORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            name=domain_entity.name,
            email=domain_entity.email.value,
            hashed_password=domain_entity.hashed_password,
        )
