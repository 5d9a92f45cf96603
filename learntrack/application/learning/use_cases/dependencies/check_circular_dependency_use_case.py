"""Use case for previewing whether a dependency may be created."""

from learntrack.application.learning.protocols import LearningItemRepositoryProtocol
from learntrack.application.learning.services import CycleCheck, DependencyGraphService
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import LearningItemId, UserId


class CheckCircularDependencyUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        dependency_graph_service: DependencyGraphService,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.dependency_graph_service = dependency_graph_service

    def check(self, user_id: int, source_item_id: int, target_item_id: int) -> CycleCheck:
        """
        Report whether source→target would be rejected, without storing anything.

        Raises:
            LearningItemNotFoundError: If either item is missing or not the user's
        """
        user_id_vo = UserId(user_id)
        source_id = LearningItemId(source_item_id)
        target_id = LearningItemId(target_item_id)

        get_owned_item(self.learning_item_repository, source_id, user_id_vo)
        get_owned_item(self.learning_item_repository, target_id, user_id_vo)

        return self.dependency_graph_service.explain(source_id, target_id)
