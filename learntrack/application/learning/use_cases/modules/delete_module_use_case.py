"""Use case for deleting modules."""

import structlog

from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleRepositoryProtocol,
)
from learntrack.application.learning.services import ProgressService
from learntrack.application.learning.services.ownership import get_owned_module
from learntrack.domain.common.value_objects import ModuleId, UserId

logger = structlog.get_logger(__name__)


class DeleteModuleUseCase:
    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
        progress_service: ProgressService,
    ) -> None:
        self.module_repository = module_repository
        self.learning_item_repository = learning_item_repository
        self.progress_service = progress_service

    def delete_module(self, user_id: int, module_id: int) -> None:
        """
        Delete a module and refresh its item's progress.

        Raises:
            LearningModuleNotFoundError: If the module is missing or not the user's
        """
        module_id_vo = ModuleId(module_id)
        _, item = get_owned_module(
            self.module_repository,
            self.learning_item_repository,
            module_id_vo,
            UserId(user_id),
        )
        self.module_repository.delete(module_id_vo)
        self.progress_service.refresh(item)

        logger.info("module_deleted", module_id=module_id, learning_item_id=item.id.value)
