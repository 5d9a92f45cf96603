"""Use case for moving a learning item through its status machine."""

import structlog

from learntrack.application.learning.protocols import LearningItemRepositoryProtocol
from learntrack.application.learning.services import ProgressService
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import LearningItemId, UserId
from learntrack.domain.learning.entities import LearningItem
from learntrack.domain.learning.value_objects import StatusVO

logger = structlog.get_logger(__name__)


class UpdateLearningItemStatusUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        progress_service: ProgressService,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.progress_service = progress_service

    def update_status(self, user_id: int, item_id: int, status: str) -> LearningItem:
        """
        Change an item's status.

        The cached progress is refreshed afterwards, since a completed item
        without modules reports 100.

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
            ValidationError: If status is not a known item status
            InvalidTransitionError: If the transition is not allowed
        """
        new_status = StatusVO.create(status)
        item = get_owned_item(
            self.learning_item_repository, LearningItemId(item_id), UserId(user_id)
        )
        previous = item.status

        item.update_status(new_status)
        item = self.learning_item_repository.save(item)
        self.progress_service.refresh(item)

        logger.info(
            "learning_item_status_updated",
            learning_item_id=item_id,
            previous=str(previous),
            status=str(new_status),
        )
        return item
