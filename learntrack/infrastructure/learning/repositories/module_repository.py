"""Repository for Module domain entities."""

from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from learntrack.application.learning.protocols import ModuleOrder, ModuleOrderBy, SortDirection
from learntrack.domain.common.value_objects import LearningItemId, ModuleId
from learntrack.domain.learning.entities import Module
from learntrack.domain.learning.exceptions import LearningModuleNotFoundError
from learntrack.domain.learning.value_objects import ModuleStatus, ModuleStatusVO
from learntrack.infrastructure.learning.mappers.module_mapper import ModuleMapper
from learntrack.models import Module as ModuleORM

_ORDER_COLUMNS = {
    "order": ModuleORM.order,
    "created_at": ModuleORM.created_at,
    "title": ModuleORM.title,
}


class ModuleRepository:
    """Repository for Module domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = ModuleMapper()

    def find_by_id(self, module_id: ModuleId) -> Module | None:
        orm_model = self.db.get(ModuleORM, module_id.value)
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_learning_item_id(
        self,
        learning_item_id: LearningItemId,
        order_by: ModuleOrderBy = "order",
        order: SortDirection = "asc",
    ) -> list[Module]:
        """
        Get the modules of an item.

        Args:
            learning_item_id: The owning item
            order_by: Column to sort by
            order: Sort direction; ties are broken by id ascending

        Returns:
            List of module entities
        """
        column = _ORDER_COLUMNS[order_by]
        stmt = (
            select(ModuleORM)
            .where(ModuleORM.learning_item_id == learning_item_id.value)
            .order_by(column.desc() if order == "desc" else column.asc(), ModuleORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def find_by_status(
        self, learning_item_id: LearningItemId, status: ModuleStatusVO
    ) -> list[Module]:
        stmt = (
            select(ModuleORM)
            .where(
                ModuleORM.learning_item_id == learning_item_id.value,
                ModuleORM.status == status.value.value,
            )
            .order_by(ModuleORM.order, ModuleORM.id)
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def create(self, module: Module) -> Module:
        orm_model = self.mapper.to_orm(module)
        self.db.add(orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def create_many(self, modules: list[Module]) -> list[Module]:
        """Insert several modules in one commit, preserving input order."""
        orm_models = [self.mapper.to_orm(module) for module in modules]
        self.db.add_all(orm_models)
        self.db.commit()
        for orm_model in orm_models:
            self.db.refresh(orm_model)
        return [self.mapper.to_domain(orm) for orm in orm_models]

    def update(self, module: Module) -> Module:
        """
        Persist title, status and order of an existing module.

        Raises:
            LearningModuleNotFoundError: If the module no longer exists
        """
        orm_model = self.db.get(ModuleORM, module.id.value)
        if not orm_model:
            raise LearningModuleNotFoundError(module.id.value)
        self.mapper.to_orm(module, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        return self.mapper.to_domain(orm_model)

    def delete(self, module_id: ModuleId) -> bool:
        orm_model = self.db.get(ModuleORM, module_id.value)
        if not orm_model:
            return False
        self.db.delete(orm_model)
        self.db.commit()
        return True

    def delete_by_learning_item_id(self, learning_item_id: LearningItemId) -> int:
        stmt = delete(ModuleORM).where(ModuleORM.learning_item_id == learning_item_id.value)
        result = self.db.execute(stmt)
        self.db.commit()
        return result.rowcount

    def count(self, learning_item_id: LearningItemId) -> int:
        stmt = select(func.count(ModuleORM.id)).where(
            ModuleORM.learning_item_id == learning_item_id.value
        )
        return self.db.execute(stmt).scalar() or 0

    def count_completed(self, learning_item_id: LearningItemId) -> int:
        stmt = select(func.count(ModuleORM.id)).where(
            ModuleORM.learning_item_id == learning_item_id.value,
            ModuleORM.status == ModuleStatus.CONCLUIDO.value,
        )
        return self.db.execute(stmt).scalar() or 0

    def reorder(self, learning_item_id: LearningItemId, orders: list[ModuleOrder]) -> None:
        """
        Apply new positions in one commit.

        Raises:
            LearningModuleNotFoundError: If any id is not a module of the item;
                nothing is changed in that case
        """
        stmt = select(ModuleORM).where(ModuleORM.learning_item_id == learning_item_id.value)
        by_id = {orm.id: orm for orm in self.db.execute(stmt).scalars().all()}

        for entry in orders:
            if entry.module_id.value not in by_id:
                raise LearningModuleNotFoundError(entry.module_id.value)

        for entry in orders:
            by_id[entry.module_id.value].order = entry.order
        self.db.commit()
