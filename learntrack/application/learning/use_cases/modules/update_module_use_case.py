"""Use cases for editing modules."""

import structlog

from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleRepositoryProtocol,
)
from learntrack.application.learning.services import ProgressService
from learntrack.application.learning.services.ownership import get_owned_module
from learntrack.domain.common.value_objects import ModuleId, UserId
from learntrack.domain.learning.entities import Module
from learntrack.domain.learning.value_objects import ModuleStatusVO

logger = structlog.get_logger(__name__)


class UpdateModuleUseCase:
    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
    ) -> None:
        self.module_repository = module_repository
        self.learning_item_repository = learning_item_repository

    def update_module(
        self,
        user_id: int,
        module_id: int,
        title: str | None = None,
        order: int | None = None,
    ) -> Module:
        """
        Rename or move a single module.

        Raises:
            LearningModuleNotFoundError: If the module is missing or not the user's
            ValidationError: If the new title or order is invalid
        """
        module, _ = get_owned_module(
            self.module_repository,
            self.learning_item_repository,
            ModuleId(module_id),
            UserId(user_id),
        )
        if title is not None:
            module.rename(title)
        if order is not None:
            module.move_to(order)

        module = self.module_repository.update(module)
        logger.info("module_updated", module_id=module_id)
        return module


class UpdateModuleStatusUseCase:
    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
        progress_service: ProgressService,
    ) -> None:
        self.module_repository = module_repository
        self.learning_item_repository = learning_item_repository
        self.progress_service = progress_service

    def update_status(self, user_id: int, module_id: int, status: str) -> Module:
        """
        Move a module through its status machine and refresh the item's progress.

        Raises:
            LearningModuleNotFoundError: If the module is missing or not the user's
            ValidationError: If status is not a known module status
            InvalidTransitionError: If the transition is not allowed
        """
        new_status = ModuleStatusVO.create(status)
        module, item = get_owned_module(
            self.module_repository,
            self.learning_item_repository,
            ModuleId(module_id),
            UserId(user_id),
        )
        previous = module.status

        module.update_status(new_status)
        module = self.module_repository.update(module)
        summary = self.progress_service.refresh(item)

        logger.info(
            "module_status_updated",
            module_id=module_id,
            learning_item_id=item.id.value,
            previous=str(previous),
            status=str(new_status),
            progress=summary.progress.value,
        )
        return module
