"""Use case for adding modules to a learning item."""

import structlog

from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleRepositoryProtocol,
)
from learntrack.application.learning.services import ProgressService
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import LearningItemId, UserId
from learntrack.domain.learning.entities import Module

logger = structlog.get_logger(__name__)


class AddModuleUseCase:
    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
        progress_service: ProgressService,
    ) -> None:
        self.module_repository = module_repository
        self.learning_item_repository = learning_item_repository
        self.progress_service = progress_service

    def add_module(
        self, user_id: int, item_id: int, title: str, order: int | None = None
    ) -> Module:
        """
        Append a Pendente module to an item and refresh the item's progress.

        Without an explicit order the module goes after the existing ones.

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
            CompletedItemModulesError: If the item is already Concluido
            ValidationError: If title or order is invalid
        """
        item = get_owned_item(
            self.learning_item_repository, LearningItemId(item_id), UserId(user_id)
        )
        item.ensure_accepts_modules()
        if order is None:
            order = self.module_repository.count(item.id)

        module = self.module_repository.create(
            Module.create(learning_item_id=item.id, title=title, order=order)
        )
        self.progress_service.refresh(item)

        logger.info(
            "module_added",
            module_id=module.id.value,
            learning_item_id=item_id,
            order=order,
        )
        return module
