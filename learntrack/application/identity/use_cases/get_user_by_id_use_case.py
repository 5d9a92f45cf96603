"""Use case for loading the authenticated user."""

from learntrack.application.identity.protocols import UserRepositoryProtocol
from learntrack.domain.common.value_objects import UserId
from learntrack.domain.identity.entities.user import User
from learntrack.domain.identity.exceptions import UserNotFoundError


class GetUserByIdUseCase:
    """Resolves the user named in an access token."""

    def __init__(self, user_repository: UserRepositoryProtocol) -> None:
        self.user_repository = user_repository

    def get_user(self, user_id: int) -> User:
        """
        Raises:
            UserNotFoundError: If user is not found
        """
        user = self.user_repository.find_by_id(UserId(user_id))
        if not user:
            raise UserNotFoundError(user_id)
        return user
