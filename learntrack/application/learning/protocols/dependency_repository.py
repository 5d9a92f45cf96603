"""Protocol for Dependency (prerequisite edge) repository."""

from typing import Literal, Protocol

from learntrack.domain.common.value_objects import DependencyId, LearningItemId, UserId
from learntrack.domain.learning.entities import Dependency

DependencyKind = Literal["prerequisites", "dependents"]


class DependencyRepositoryProtocol(Protocol):
    """Protocol for Dependency repository operations."""

    def find_by_id(self, dependency_id: DependencyId) -> Dependency | None: ...

    def find_by_source_item_id(self, source_item_id: LearningItemId) -> list[Dependency]:
        """Edges leaving an item, i.e. its prerequisites. The cycle check relies on this."""
        ...

    def find_by_target_item_id(self, target_item_id: LearningItemId) -> list[Dependency]:
        """Edges pointing at an item, i.e. the items that depend on it."""
        ...

    def find_by_source_and_target(
        self, source_item_id: LearningItemId, target_item_id: LearningItemId
    ) -> Dependency | None: ...

    def exists(self, source_item_id: LearningItemId, target_item_id: LearningItemId) -> bool:
        """Exact (source, target) match."""
        ...

    def create(self, dependency: Dependency) -> Dependency:
        """
        Persist a new edge.

        Raises:
            DuplicateDependencyError: If the (source, target) pair already exists
        """
        ...

    def create_many(self, dependencies: list[Dependency]) -> list[Dependency]:
        """Persist several edges in one transaction; all or none."""
        ...

    def delete(self, dependency_id: DependencyId) -> bool:
        """Return True if deleted, False if not found."""
        ...

    def delete_by_item_id(self, item_id: LearningItemId) -> int:
        """Delete every edge touching an item, as source or target. Returns the count."""
        ...

    def get_dependency_graph(self, item_ids: list[LearningItemId]) -> list[Dependency]:
        """Edges whose both endpoints are within ``item_ids``."""
        ...

    def count(self, item_id: LearningItemId, kind: DependencyKind) -> int: ...

    def lock_graph(self, user_id: UserId) -> None:
        """
        Serialize check-then-create against other writers of the user's graph.

        The lock lasts until the current transaction ends.
        """
        ...
