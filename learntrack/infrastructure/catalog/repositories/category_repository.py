"""Repository for Category domain entities."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from learntrack.domain.catalog.entities import Category
from learntrack.domain.catalog.exceptions import CategoryNameTakenError
from learntrack.domain.common.value_objects import CategoryId
from learntrack.infrastructure.catalog.mappers.category_mapper import CategoryMapper
from learntrack.models import Category as CategoryORM


class CategoryRepository:
    """Repository for Category domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = CategoryMapper()

    def find_by_id(self, category_id: CategoryId) -> Category | None:
        orm_model = self.db.get(CategoryORM, category_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_name(self, name: str) -> Category | None:
        stmt = select(CategoryORM).where(CategoryORM.name == name.strip())
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_all(self) -> list[Category]:
        stmt = select(CategoryORM).order_by(CategoryORM.name)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def save(self, category: Category) -> Category:
        """
        Save a category entity (create or update).

        Raises:
            CategoryNameTakenError: If another category already has the name
        """
        if category.id.value == 0:
            orm_model = self.mapper.to_orm(category)
            self.db.add(orm_model)
        else:
            existing = self.db.get(CategoryORM, category.id.value)
            if not existing:
                raise ValueError(f"Category {category.id.value} not found")
            orm_model = self.mapper.to_orm(category, existing)

        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            raise CategoryNameTakenError(category.name) from e
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, category_id: CategoryId) -> bool:
        orm_model = self.db.get(CategoryORM, category_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True
