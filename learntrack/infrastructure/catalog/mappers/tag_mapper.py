"""Mapper for Tag ORM ↔ Domain conversion."""

from learntrack.domain.catalog.entities import Tag
from learntrack.domain.common.value_objects import TagId
from learntrack.models import Tag as TagORM


class TagMapper:
    """Mapper for Tag ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: TagORM) -> Tag:
        return Tag.create_with_id(id=TagId(orm_model.id), name=orm_model.name)

    def to_orm(self, domain_entity: Tag, orm_model: TagORM | None = None) -> TagORM:
        if orm_model:
            orm_model.name = domain_entity.name
            return orm_model

        return TagORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            name=domain_entity.name,
        )
