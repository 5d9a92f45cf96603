"""Use case for recomputing an item's cached progress on demand."""

from learntrack.application.learning.protocols import LearningItemRepositoryProtocol
from learntrack.application.learning.services import ProgressService, ProgressSummary
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import LearningItemId, UserId


class RecalculateProgressUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        progress_service: ProgressService,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.progress_service = progress_service

    def recalculate(self, user_id: int, item_id: int) -> ProgressSummary:
        """
        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
            InvariantViolationError: If stored module counts are inconsistent
        """
        item = get_owned_item(
            self.learning_item_repository, LearningItemId(item_id), UserId(user_id)
        )
        return self.progress_service.refresh(item)
