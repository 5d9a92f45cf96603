"""Protocol for User repository."""

from typing import Protocol

from learntrack.domain.common.value_objects import UserId
from learntrack.domain.identity.entities.user import User


class UserRepositoryProtocol(Protocol):
    """Protocol for User repository operations."""

    def find_by_id(self, user_id: UserId) -> User | None: ...
