"""
Dependency entity: a directed prerequisite edge between two learning items.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from learntrack.domain.common.entity import Entity
from learntrack.domain.common.value_objects import DependencyId, LearningItemId
from learntrack.domain.learning.exceptions import SelfDependencyError


@dataclass(eq=False)
class Dependency(Entity[DependencyId]):
    """
    Edge meaning "source requires target to be completed first".

    Business Rules:
    - Source and target are different items
    - Pair uniqueness is enforced by the repository
    - Acyclicity of the whole edge set is checked before creation by
      DependencyGraphService, not by the entity
    """

    id: DependencyId
    source_item_id: LearningItemId
    target_item_id: LearningItemId
    created_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.source_item_id == self.target_item_id:
            raise SelfDependencyError(self.source_item_id.value)

    def involves(self, item_id: LearningItemId) -> bool:
        return item_id in (self.source_item_id, self.target_item_id)

    def is_same_relationship(self, other: "Dependency") -> bool:
        """Same (source, target) pair, ignoring the id."""
        return (
            self.source_item_id == other.source_item_id
            and self.target_item_id == other.target_item_id
        )

    def is_reverse_of(self, other: "Dependency") -> bool:
        """True for the two-node loop A→B / B→A."""
        return (
            self.source_item_id == other.target_item_id
            and self.target_item_id == other.source_item_id
        )

    @classmethod
    def create(
        cls,
        source_item_id: LearningItemId,
        target_item_id: LearningItemId,
    ) -> "Dependency":
        """Create a new edge (ID will be 0 until persisted)."""
        return cls(
            id=DependencyId.generate(),
            source_item_id=source_item_id,
            target_item_id=target_item_id,
            created_at=datetime.now(UTC),
        )

    @classmethod
    def create_with_id(
        cls,
        id: DependencyId,
        source_item_id: LearningItemId,
        target_item_id: LearningItemId,
        created_at: datetime,
    ) -> "Dependency":
        """Reconstitute an edge from persistence."""
        return cls(
            id=id,
            source_item_id=source_item_id,
            target_item_id=target_item_id,
            created_at=created_at,
        )
