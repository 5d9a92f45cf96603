"""Repository for LearningItem domain entities."""

from datetime import date, timedelta
from typing import Any

from sqlalchemy import ColumnElement, case, func, or_, select, update
from sqlalchemy.orm import Session

from learntrack.application.learning.protocols import (
    CategoryCount,
    LearningItemFilters,
    LearningItemOrderBy,
    SortDirection,
)
from learntrack.domain.common.value_objects import CategoryId, LearningItemId, TagId, UserId
from learntrack.domain.learning.entities import LearningItem
from learntrack.domain.learning.exceptions import LearningItemNotFoundError
from learntrack.domain.learning.value_objects import Progress, Status
from learntrack.infrastructure.learning.mappers.learning_item_mapper import LearningItemMapper
from learntrack.models import Category as CategoryORM
from learntrack.models import LearningItem as LearningItemORM
from learntrack.models import Tag as TagORM

_ORDER_COLUMNS = {
    "title": LearningItemORM.title,
    "created_at": LearningItemORM.created_at,
    "updated_at": LearningItemORM.updated_at,
    "due_date": LearningItemORM.due_date,
    "progress": LearningItemORM.progress,
    # Workflow order: Backlog, Em_Andamento, Pausado, Concluido
    "status": case(
        {status.value: rank for rank, status in enumerate(Status)}, value=LearningItemORM.status
    ),
}


def _unfinished() -> ColumnElement[bool]:
    return LearningItemORM.status != Status.CONCLUIDO.value


class LearningItemRepository:
    """Repository for LearningItem domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LearningItemMapper()

    def find_by_id(self, item_id: LearningItemId, user_id: UserId) -> LearningItem | None:
        """
        Find an item by ID with user ownership check.

        Args:
            item_id: The item ID
            user_id: The user ID for ownership verification

        Returns:
            LearningItem entity if found and owned by user, None otherwise
        """
        stmt = select(LearningItemORM).where(
            LearningItemORM.id == item_id.value,
            LearningItemORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def list_for_user(
        self,
        user_id: UserId,
        filters: LearningItemFilters,
        order_by: LearningItemOrderBy = "updated_at",
        order: SortDirection = "desc",
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[LearningItem], int]:
        """
        Get one page of a user's items.

        Args:
            user_id: Owner of the items
            filters: Status, category, tag and text filters
            order_by: Column to sort by; ties are broken by id in the same direction
            order: Sort direction
            offset: Number of matching items to skip
            limit: Maximum number of items to return

        Returns:
            tuple[list[LearningItem], int]: (items on the page, total matching items)
        """
        conditions = [LearningItemORM.user_id == user_id.value]
        if filters.status is not None:
            conditions.append(LearningItemORM.status == filters.status.value.value)
        if filters.category_id is not None:
            conditions.append(LearningItemORM.category_id == filters.category_id.value)
        if filters.tag_ids:
            tag_values = [tag_id.value for tag_id in filters.tag_ids]
            conditions.append(LearningItemORM.tags.any(TagORM.id.in_(tag_values)))
        if filters.search:
            search_pattern = f"%{filters.search}%"
            conditions.append(
                or_(
                    LearningItemORM.title.ilike(search_pattern),
                    LearningItemORM.description_md.ilike(search_pattern),
                )
            )

        total_stmt = select(func.count(LearningItemORM.id)).where(*conditions)
        total = self.db.execute(total_stmt).scalar() or 0

        column = _ORDER_COLUMNS[order_by]
        if order == "desc":
            ordering = [column.desc().nulls_last(), LearningItemORM.id.desc()]
        else:
            ordering = [column.asc().nulls_last(), LearningItemORM.id.asc()]
        stmt = (
            select(LearningItemORM)
            .where(*conditions)
            .order_by(*ordering)
            .offset(offset)
            .limit(limit)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models], total

    def count_by_category(self, category_id: CategoryId) -> int:
        stmt = select(func.count(LearningItemORM.id)).where(
            LearningItemORM.category_id == category_id.value
        )
        return self.db.execute(stmt).scalar() or 0

    def _tag_rows(self, tag_ids: list[TagId]) -> list[TagORM]:
        if not tag_ids:
            return []
        stmt = select(TagORM).where(TagORM.id.in_([tag_id.value for tag_id in tag_ids]))
        return list(self.db.execute(stmt).scalars().all())

    def save(self, item: LearningItem) -> LearningItem:
        """
        Save an item entity (create or update), replacing its tag associations.

        Returns:
            Saved item entity with database-generated values

        Raises:
            LearningItemNotFoundError: If an existing item was deleted meanwhile
        """
        if item.id.value == 0:
            orm_model = self.mapper.to_orm(item)
            self.db.add(orm_model)
        else:
            existing = self.db.get(LearningItemORM, item.id.value)
            if not existing or existing.user_id != item.user_id.value:
                raise LearningItemNotFoundError(item.id.value)
            orm_model = self.mapper.to_orm(item, existing)

        orm_model.tags = self._tag_rows(item.tag_ids)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def update_progress(self, item_id: LearningItemId, progress: Progress) -> None:
        stmt = (
            update(LearningItemORM)
            .where(LearningItemORM.id == item_id.value)
            .values(progress=progress.value)
        )
        self.db.execute(stmt)
        self.db.commit()

    def delete(self, item_id: LearningItemId, user_id: UserId) -> bool:
        """
        Delete an item together with its modules.

        Returns:
            True if deleted, False if not found
        """
        stmt = select(LearningItemORM).where(
            LearningItemORM.id == item_id.value,
            LearningItemORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            return False

        self.db.delete(orm_model)
        self.db.commit()
        return True

    # Report queries

    def _find(
        self,
        *conditions: ColumnElement[bool],
        order_by: list[ColumnElement[Any]],
        limit: int | None = None,
    ) -> list[LearningItem]:
        stmt = select(LearningItemORM).where(*conditions).order_by(*order_by)
        if limit is not None:
            stmt = stmt.limit(limit)
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def count_for_user(self, user_id: UserId) -> int:
        stmt = select(func.count(LearningItemORM.id)).where(
            LearningItemORM.user_id == user_id.value
        )
        return self.db.execute(stmt).scalar() or 0

    def count_by_status(self, user_id: UserId) -> dict[Status, int]:
        stmt = (
            select(LearningItemORM.status, func.count(LearningItemORM.id))
            .where(LearningItemORM.user_id == user_id.value)
            .group_by(LearningItemORM.status)
        )
        return {Status(status): count for status, count in self.db.execute(stmt).all()}

    def count_by_category_for_user(self, user_id: UserId) -> list[CategoryCount]:
        """Item counts for the categories the user has items in, by category name."""
        stmt = (
            select(
                CategoryORM.id,
                CategoryORM.name,
                CategoryORM.color,
                func.count(LearningItemORM.id),
            )
            .join(LearningItemORM, LearningItemORM.category_id == CategoryORM.id)
            .where(LearningItemORM.user_id == user_id.value)
            .group_by(CategoryORM.id, CategoryORM.name, CategoryORM.color)
            .order_by(CategoryORM.name)
        )
        return [
            CategoryCount(category_id=CategoryId(category_id), name=name, color=color, count=count)
            for category_id, name, color, count in self.db.execute(stmt).all()
        ]

    def average_progress(self, user_id: UserId) -> Progress:
        stmt = select(func.avg(LearningItemORM.progress)).where(
            LearningItemORM.user_id == user_id.value
        )
        average = self.db.execute(stmt).scalar()
        return Progress(float(average)) if average is not None else Progress.zero()

    def find_overdue(self, user_id: UserId, today: date) -> list[LearningItem]:
        return self._find(
            LearningItemORM.user_id == user_id.value,
            _unfinished(),
            LearningItemORM.due_date < today,
            order_by=[LearningItemORM.due_date, LearningItemORM.id],
        )

    def find_due_soon(self, user_id: UserId, days: int, today: date) -> list[LearningItem]:
        return self._find(
            LearningItemORM.user_id == user_id.value,
            _unfinished(),
            LearningItemORM.due_date >= today,
            LearningItemORM.due_date <= today + timedelta(days=days),
            order_by=[LearningItemORM.due_date, LearningItemORM.id],
        )

    def find_near_completion(
        self, user_id: UserId, threshold: float, limit: int
    ) -> list[LearningItem]:
        return self._find(
            LearningItemORM.user_id == user_id.value,
            _unfinished(),
            LearningItemORM.progress >= threshold,
            order_by=[LearningItemORM.progress.desc(), LearningItemORM.id],
            limit=limit,
        )

    def find_recently_updated(self, user_id: UserId, limit: int) -> list[LearningItem]:
        return self._find(
            LearningItemORM.user_id == user_id.value,
            order_by=[LearningItemORM.updated_at.desc(), LearningItemORM.id.desc()],
            limit=limit,
        )
