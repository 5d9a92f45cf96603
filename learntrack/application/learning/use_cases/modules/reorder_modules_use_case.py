"""Use case for reordering an item's modules."""

import structlog

from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleOrder,
    ModuleRepositoryProtocol,
)
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_objects import LearningItemId, ModuleId, UserId
from learntrack.domain.learning.entities import Module

logger = structlog.get_logger(__name__)


class ReorderModulesUseCase:
    def __init__(
        self,
        module_repository: ModuleRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
    ) -> None:
        self.module_repository = module_repository
        self.learning_item_repository = learning_item_repository

    def reorder(
        self, user_id: int, item_id: int, orders: list[tuple[int, int]]
    ) -> list[Module]:
        """
        Assign new positions to modules of one item in a single step.

        Args:
            user_id: ID of the requesting user
            item_id: ID of the item owning the modules
            orders: (module_id, order) pairs

        Returns:
            The item's modules in their new order

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
            ValidationError: If a module appears twice or an order is negative
            LearningModuleNotFoundError: If a module does not belong to the item
        """
        item = get_owned_item(
            self.learning_item_repository, LearningItemId(item_id), UserId(user_id)
        )

        module_ids = [module_id for module_id, _ in orders]
        if len(set(module_ids)) != len(module_ids):
            raise ValidationError("Each module can only appear once", field="orders")
        if any(order < 0 for _, order in orders):
            raise ValidationError("Module order cannot be negative", field="orders")

        self.module_repository.reorder(
            item.id,
            [
                ModuleOrder(module_id=ModuleId(module_id), order=order)
                for module_id, order in orders
            ],
        )
        logger.info("modules_reordered", learning_item_id=item_id, count=len(orders))
        return self.module_repository.find_by_learning_item_id(item.id)
