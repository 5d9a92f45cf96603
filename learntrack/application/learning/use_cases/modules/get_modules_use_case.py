"""Use case for listing an item's modules."""

from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleOrderBy,
    ModuleRepositoryProtocol,
    SortDirection,
)
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import LearningItemId, UserId
from learntrack.domain.learning.entities import Module
from learntrack.domain.learning.value_objects import ModuleStatusVO


class GetModulesUseCase:
    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
    ) -> None:
        self.module_repository = module_repository
        self.learning_item_repository = learning_item_repository

    def list_modules(
        self,
        user_id: int,
        item_id: int,
        status: str | None = None,
        order_by: ModuleOrderBy = "order",
        order: SortDirection = "asc",
    ) -> list[Module]:
        """
        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
            ValidationError: If status is not a known module status
        """
        item = get_owned_item(
            self.learning_item_repository, LearningItemId(item_id), UserId(user_id)
        )
        if status is not None:
            return self.module_repository.find_by_status(item.id, ModuleStatusVO.create(status))
        return self.module_repository.find_by_learning_item_id(
            item.id, order_by=order_by, order=order
        )
