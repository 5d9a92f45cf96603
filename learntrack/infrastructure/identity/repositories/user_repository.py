"""Repository for User domain entities."""

from sqlalchemy import select
from sqlalchemy.orm import Session

from learntrack.domain.common.value_objects import UserId
from learntrack.domain.identity.entities.user import User
from learntrack.infrastructure.identity.mappers.user_mapper import UserMapper
from learntrack.models import User as UserORM


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        """
        Find a user by ID.

        Args:
            user_id: The user ID

        Returns:
            User entity if found, None otherwise
        """
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None
