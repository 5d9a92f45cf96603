"""Mapper for Category ORM ↔ Domain conversion."""

from learntrack.domain.catalog.entities import Category
from learntrack.domain.common.value_objects import CategoryId
from learntrack.models import Category as CategoryORM


class CategoryMapper:
    """Mapper for Category ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: CategoryORM) -> Category:
        return Category.create_with_id(
            id=CategoryId(orm_model.id),
            name=orm_model.name,
            color=orm_model.color,
        )

    def to_orm(
        self, domain_entity: Category, orm_model: CategoryORM | None = None
    ) -> CategoryORM:
        if orm_model:
            orm_model.name = domain_entity.name
            orm_model.color = domain_entity.color
            return orm_model

        return CategoryORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            name=domain_entity.name,
            color=domain_entity.color,
        )
