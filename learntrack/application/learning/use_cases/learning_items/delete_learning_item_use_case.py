"""Use case for deleting learning items."""

import structlog

from learntrack.application.learning.protocols import (
    DependencyRepositoryProtocol,
    LearningItemRepositoryProtocol,
)
from learntrack.domain.common.value_objects import LearningItemId, UserId
from learntrack.domain.learning.exceptions import LearningItemNotFoundError

logger = structlog.get_logger(__name__)


class DeleteLearningItemUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        dependency_repository: DependencyRepositoryProtocol,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.dependency_repository = dependency_repository

    def delete(self, user_id: int, item_id: int) -> None:
        """
        Delete an item, its modules and every dependency touching it.

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
        """
        item_id_vo = LearningItemId(item_id)
        user_id_vo = UserId(user_id)

        if self.learning_item_repository.find_by_id(item_id_vo, user_id_vo) is None:
            raise LearningItemNotFoundError(item_id)

        removed_edges = self.dependency_repository.delete_by_item_id(item_id_vo)
        self.learning_item_repository.delete(item_id_vo, user_id_vo)

        logger.info(
            "learning_item_deleted",
            learning_item_id=item_id,
            user_id=user_id,
            removed_dependencies=removed_edges,
        )
