"""Repository for Dependency domain entities."""

import structlog
from sqlalchemy import delete, func, or_, select, text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from learntrack.application.learning.protocols import DependencyKind
from learntrack.domain.common.value_objects import DependencyId, LearningItemId, UserId
from learntrack.domain.learning.entities import Dependency
from learntrack.domain.learning.exceptions import DuplicateDependencyError
from learntrack.infrastructure.learning.mappers.dependency_mapper import DependencyMapper
from learntrack.models import Dependency as DependencyORM

logger = structlog.get_logger(__name__)

# First key of the two-key advisory lock, so graph locks do not collide
# with other advisory lock users of the same database.
GRAPH_LOCK_NAMESPACE = 7_301


def _is_duplicate_edge(error: IntegrityError) -> bool:
    message = str(error.orig)
    return "uq_dependencies_edge" in message or "UNIQUE constraint failed" in message


class DependencyRepository:
    """Repository for Dependency domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = DependencyMapper()

    def find_by_id(self, dependency_id: DependencyId) -> Dependency | None:
        orm_model = self.db.get(DependencyORM, dependency_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_source_item_id(self, source_item_id: LearningItemId) -> list[Dependency]:
        """
        Get the edges leaving an item, i.e. its prerequisites.

        Returns:
            List of dependency entities ordered by id
        """
        stmt = (
            select(DependencyORM)
            .where(DependencyORM.source_item_id == source_item_id.value)
            .order_by(DependencyORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_target_item_id(self, target_item_id: LearningItemId) -> list[Dependency]:
        """
        Get the edges pointing at an item, i.e. the items depending on it.

        Returns:
            List of dependency entities ordered by id
        """
        stmt = (
            select(DependencyORM)
            .where(DependencyORM.target_item_id == target_item_id.value)
            .order_by(DependencyORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def find_by_source_and_target(
        self, source_item_id: LearningItemId, target_item_id: LearningItemId
    ) -> Dependency | None:
        stmt = select(DependencyORM).where(
            DependencyORM.source_item_id == source_item_id.value,
            DependencyORM.target_item_id == target_item_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def exists(self, source_item_id: LearningItemId, target_item_id: LearningItemId) -> bool:
        stmt = select(DependencyORM.id).where(
            DependencyORM.source_item_id == source_item_id.value,
            DependencyORM.target_item_id == target_item_id.value,
        )
        return self.db.execute(stmt).first() is not None

    def create(self, dependency: Dependency) -> Dependency:
        """
        Insert a new edge.

        Raises:
            DuplicateDependencyError: If the pair already exists
        """
        orm_model = self.mapper.to_orm(dependency)
        self.db.add(orm_model)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if _is_duplicate_edge(e):
                raise DuplicateDependencyError(
                    dependency.source_item_id.value, dependency.target_item_id.value
                ) from e
            raise
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def create_many(self, dependencies: list[Dependency]) -> list[Dependency]:
        """
        Insert several edges in one commit; all or none.

        Raises:
            DuplicateDependencyError: If any pair already exists
        """
        orm_models = [self.mapper.to_orm(dependency) for dependency in dependencies]
        self.db.add_all(orm_models)
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            if not _is_duplicate_edge(e):
                raise
            for dependency in dependencies:
                if self.exists(dependency.source_item_id, dependency.target_item_id):
                    raise DuplicateDependencyError(
                        dependency.source_item_id.value, dependency.target_item_id.value
                    ) from e
            raise
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def delete(self, dependency_id: DependencyId) -> bool:
        orm_model = self.db.get(DependencyORM, dependency_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True

    def delete_by_item_id(self, item_id: LearningItemId) -> int:
        """Delete every edge touching an item. Returns the number removed."""
        stmt = delete(DependencyORM).where(
            or_(
                DependencyORM.source_item_id == item_id.value,
                DependencyORM.target_item_id == item_id.value,
            )
        )
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount

    def get_dependency_graph(self, item_ids: list[LearningItemId]) -> list[Dependency]:
        """Get the edges whose both endpoints are among the given items."""
        if not item_ids:
            return []
        values = [item_id.value for item_id in item_ids]
        stmt = (
            select(DependencyORM)
            .where(
                DependencyORM.source_item_id.in_(values),
                DependencyORM.target_item_id.in_(values),
            )
            .order_by(DependencyORM.id)
        )
        return [self.mapper.to_domain(orm) for orm in self.db.execute(stmt).scalars().all()]

    def count(self, item_id: LearningItemId, kind: DependencyKind) -> int:
        column = (
            DependencyORM.source_item_id
            if kind == "prerequisites"
            else DependencyORM.target_item_id
        )
        stmt = select(func.count(DependencyORM.id)).where(column == item_id.value)
        return self.db.execute(stmt).scalar() or 0

    def lock_graph(self, user_id: UserId) -> None:
        """
        Take a transaction-scoped lock on the user's graph.

        Only PostgreSQL supports this; elsewhere the call does nothing and
        the database's own write serialization applies.
        """
        if self.db.get_bind().dialect.name != "postgresql":
            return
        self.db.execute(
            text("SELECT pg_advisory_xact_lock(:namespace, :key)"),
            {"namespace": GRAPH_LOCK_NAMESPACE, "key": user_id.value},
        )
        logger.debug("dependency_graph_locked", user_id=user_id.value)
