"""Use case for removing a prerequisite edge."""

import structlog

from learntrack.application.learning.protocols import (
    DependencyRepositoryProtocol,
    LearningItemRepositoryProtocol,
)
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import DependencyId, LearningItemId, UserId
from learntrack.domain.learning.exceptions import DependencyNotFoundError

logger = structlog.get_logger(__name__)


class UnlinkDependencyUseCase:
    def __init__(
        self,
        dependency_repository: DependencyRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
    ) -> None:
        self.dependency_repository = dependency_repository
        self.learning_item_repository = learning_item_repository

    def unlink(self, user_id: int, item_id: int, dependency_id: int) -> None:
        """
        Delete a dependency that touches the given item.

        Args:
            user_id: ID of the requesting user
            item_id: ID of an item on either end of the edge
            dependency_id: ID of the edge to delete

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
            DependencyNotFoundError: If the edge is missing or does not touch the item
        """
        item_id_vo = LearningItemId(item_id)
        dependency_id_vo = DependencyId(dependency_id)

        get_owned_item(self.learning_item_repository, item_id_vo, UserId(user_id))

        dependency = self.dependency_repository.find_by_id(dependency_id_vo)
        if dependency is None or not dependency.involves(item_id_vo):
            raise DependencyNotFoundError(dependency_id)

        self.dependency_repository.delete(dependency_id_vo)
        logger.info(
            "dependency_unlinked",
            dependency_id=dependency_id,
            source_item_id=dependency.source_item_id.value,
            target_item_id=dependency.target_item_id.value,
        )
