"""Mapper for LearningItem ORM ↔ Domain conversion."""

from learntrack.domain.common.value_objects import CategoryId, LearningItemId, TagId, UserId
from learntrack.domain.learning.entities import LearningItem
from learntrack.domain.learning.value_objects import Progress, StatusVO
from learntrack.models import LearningItem as LearningItemORM


class LearningItemMapper:
    """
    Mapper for LearningItem ORM ↔ Domain conversion.

    Tag associations are not written here, the repository resolves tag ids
    to rows because that needs the session.
    """

    def to_domain(self, orm_model: LearningItemORM) -> LearningItem:
        return LearningItem.create_with_id(
            id=LearningItemId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            category_id=CategoryId(orm_model.category_id),
            title=orm_model.title,
            status=StatusVO.create(orm_model.status),
            progress=Progress(orm_model.progress),
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
            description_md=orm_model.description_md or "",
            due_date=orm_model.due_date,
            tag_ids=[TagId(tag.id) for tag in orm_model.tags],
        )

    def to_orm(
        self, domain_entity: LearningItem, orm_model: LearningItemORM | None = None
    ) -> LearningItemORM:
        if orm_model:
            orm_model.category_id = domain_entity.category_id.value
            orm_model.title = domain_entity.title
            orm_model.description_md = domain_entity.description_md
            orm_model.due_date = domain_entity.due_date
            orm_model.status = domain_entity.status.value.value
            orm_model.progress = domain_entity.progress.value
            return orm_model

        return LearningItemORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            category_id=domain_entity.category_id.value,
            title=domain_entity.title,
            description_md=domain_entity.description_md,
            due_date=domain_entity.due_date,
            status=domain_entity.status.value.value,
            progress=domain_entity.progress.value,
            created_at=domain_entity.created_at,
            updated_at=domain_entity.updated_at,
        )
