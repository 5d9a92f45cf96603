"""Lookups that resolve ids to entities owned by the requesting user."""

from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleRepositoryProtocol,
)
from learntrack.domain.common.value_objects import LearningItemId, ModuleId, UserId
from learntrack.domain.learning.entities import LearningItem, Module
from learntrack.domain.learning.exceptions import (
    LearningItemNotFoundError,
    LearningModuleNotFoundError,
)


def get_owned_item(
    learning_item_repository: LearningItemRepositoryProtocol,
    item_id: LearningItemId,
    user_id: UserId,
) -> LearningItem:
    """
    Load an item the user owns.

    Raises:
        LearningItemNotFoundError: If the item is missing or owned by someone else
    """
    item = learning_item_repository.find_by_id(item_id, user_id)
    if item is None:
        raise LearningItemNotFoundError(item_id.value)
    return item


def get_owned_module(
    module_repository: ModuleRepositoryProtocol,
    learning_item_repository: LearningItemRepositoryProtocol,
    module_id: ModuleId,
    user_id: UserId,
) -> tuple[Module, LearningItem]:
    """
    Load a module together with its owning item, checking ownership through the item.

    Raises:
        LearningModuleNotFoundError: If the module is missing or its item is not the user's
    """
    module = module_repository.find_by_id(module_id)
    if module is None:
        raise LearningModuleNotFoundError(module_id.value)
    item = learning_item_repository.find_by_id(module.learning_item_id, user_id)
    if item is None:
        raise LearningModuleNotFoundError(module_id.value)
    return module, item
