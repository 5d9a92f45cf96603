"""Use case for listing an item's prerequisites and dependents."""

from dataclasses import dataclass, field
from typing import Literal

from learntrack.application.learning.protocols import (
    DependencyRepositoryProtocol,
    LearningItemRepositoryProtocol,
)
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.common.value_objects import LearningItemId, UserId
from learntrack.domain.learning.entities import Dependency, LearningItem

DependencyFilter = Literal["prerequisites", "dependents", "all"]


@dataclass(frozen=True)
class RelatedDependency:
    """An edge together with the item on its far end."""

    dependency: Dependency
    item: LearningItem


@dataclass
class ItemDependencies:
    prerequisites: list[RelatedDependency] = field(default_factory=list)
    dependents: list[RelatedDependency] = field(default_factory=list)


class ListDependenciesUseCase:
    def __init__(
        self,
        dependency_repository: DependencyRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
    ) -> None:
        self.dependency_repository = dependency_repository
        self.learning_item_repository = learning_item_repository

    def list_dependencies(
        self, user_id: int, item_id: int, kind: DependencyFilter = "all"
    ) -> ItemDependencies:
        """
        List edges around an item.

        Prerequisites are the items this one requires; dependents are the
        items that require this one.

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
        """
        user_id_vo = UserId(user_id)
        item_id_vo = LearningItemId(item_id)
        get_owned_item(self.learning_item_repository, item_id_vo, user_id_vo)

        result = ItemDependencies()
        if kind in ("prerequisites", "all"):
            result.prerequisites = self._related(
                self.dependency_repository.find_by_source_item_id(item_id_vo),
                user_id_vo,
                far_end="target",
            )
        if kind in ("dependents", "all"):
            result.dependents = self._related(
                self.dependency_repository.find_by_target_item_id(item_id_vo),
                user_id_vo,
                far_end="source",
            )
        return result

    def _related(
        self,
        dependencies: list[Dependency],
        user_id: UserId,
        far_end: Literal["source", "target"],
    ) -> list[RelatedDependency]:
        related: list[RelatedDependency] = []
        for dependency in dependencies:
            other_id = (
                dependency.target_item_id if far_end == "target" else dependency.source_item_id
            )
            other = self.learning_item_repository.find_by_id(other_id, user_id)
            if other is not None:
                related.append(RelatedDependency(dependency=dependency, item=other))
        return related
