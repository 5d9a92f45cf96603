"""Protocol for Module repository."""

from dataclasses import dataclass
from typing import Literal, Protocol

from learntrack.domain.common.value_objects import LearningItemId, ModuleId
from learntrack.domain.learning.entities import Module
from learntrack.domain.learning.value_objects import ModuleStatusVO

ModuleOrderBy = Literal["order", "created_at", "title"]
SortDirection = Literal["asc", "desc"]


@dataclass(frozen=True)
class ModuleOrder:
    """New position for one module in a reorder request."""

    module_id: ModuleId
    order: int


class ModuleRepositoryProtocol(Protocol):
    """Protocol for Module repository operations."""

    def find_by_id(self, module_id: ModuleId) -> Module | None: ...

    def find_by_learning_item_id(
        self,
        learning_item_id: LearningItemId,
        order_by: ModuleOrderBy = "order",
        order: SortDirection = "asc",
    ) -> list[Module]: ...

    def find_by_status(
        self, learning_item_id: LearningItemId, status: ModuleStatusVO
    ) -> list[Module]: ...

    def create(self, module: Module) -> Module: ...

    def create_many(self, modules: list[Module]) -> list[Module]: ...

    def update(self, module: Module) -> Module:
        """
        Persist title, status and order of an existing module.

        Raises:
            LearningModuleNotFoundError: If the module no longer exists
        """
        ...

    def delete(self, module_id: ModuleId) -> bool: ...

    def delete_by_learning_item_id(self, learning_item_id: LearningItemId) -> int: ...

    def count(self, learning_item_id: LearningItemId) -> int: ...

    def count_completed(self, learning_item_id: LearningItemId) -> int: ...

    def reorder(self, learning_item_id: LearningItemId, orders: list[ModuleOrder]) -> None:
        """
        Apply new positions as one atomic set.

        Raises:
            LearningModuleNotFoundError: If any id is not a module of the item;
                no position is changed in that case
        """
        ...
