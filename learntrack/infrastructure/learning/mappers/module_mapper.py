"""Mapper for Module ORM ↔ Domain conversion."""

from learntrack.domain.common.value_objects import LearningItemId, ModuleId
from learntrack.domain.learning.entities import Module
from learntrack.domain.learning.value_objects import ModuleStatusVO
from learntrack.models import Module as ModuleORM


class ModuleMapper:
    """Mapper for Module ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: ModuleORM) -> Module:
        return Module.create_with_id(
            id=ModuleId(orm_model.id),
            learning_item_id=LearningItemId(orm_model.learning_item_id),
            title=orm_model.title,
            status=ModuleStatusVO.create(orm_model.status),
            order=orm_model.order,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Module, orm_model: ModuleORM | None = None) -> ModuleORM:
        if orm_model:
            orm_model.title = domain_entity.title
            orm_model.status = domain_entity.status.value.value
            orm_model.order = domain_entity.order
            return orm_model

        return ModuleORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            learning_item_id=domain_entity.learning_item_id.value,
            title=domain_entity.title,
            status=domain_entity.status.value.value,
            order=domain_entity.order,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
