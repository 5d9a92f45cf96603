"""Mapper for Dependency ORM ↔ Domain conversion."""

from learntrack.domain.common.value_objects import DependencyId, LearningItemId
from learntrack.domain.learning.entities import Dependency
from learntrack.models import Dependency as DependencyORM


class DependencyMapper:
    """Mapper for Dependency ORM ↔ Domain conversion. Edges are immutable once stored."""

    def to_domain(self, orm_model: DependencyORM) -> Dependency:
        return Dependency.create_with_id(
            id=DependencyId(orm_model.id),
            source_item_id=LearningItemId(orm_model.source_item_id),
            target_item_id=LearningItemId(orm_model.target_item_id),
            created_at=orm_model.created_at,
        )

    def to_orm(self, domain_entity: Dependency) -> DependencyORM:
        return DependencyORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            source_item_id=domain_entity.source_item_id.value,
            target_item_id=domain_entity.target_item_id.value,
            created_at=domain_entity.created_at,
        )
