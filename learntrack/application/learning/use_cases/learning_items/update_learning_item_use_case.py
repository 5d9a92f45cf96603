"""Use case for editing a learning item's descriptive fields."""

from datetime import date

import structlog

from learntrack.application.catalog.protocols import (
    CategoryRepositoryProtocol,
    TagRepositoryProtocol,
)
from learntrack.application.learning.protocols import LearningItemRepositoryProtocol
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.catalog.exceptions import CategoryNotFoundError
from learntrack.domain.common.value_objects import CategoryId, LearningItemId, UserId
from learntrack.domain.learning.entities import LearningItem

logger = structlog.get_logger(__name__)


class UpdateLearningItemUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.category_repository = category_repository
        self.tag_repository = tag_repository

    def update(
        self,
        user_id: int,
        item_id: int,
        title: str | None = None,
        description_md: str | None = None,
        category_id: int | None = None,
        tag_names: list[str] | None = None,
        due_date: date | None = None,
        clear_due_date: bool = False,
    ) -> LearningItem:
        """
        Apply the given changes; ``None`` leaves a field untouched.

        Status is not editable here, it has its own use case.

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
            CategoryNotFoundError: If the new category does not exist
            ValidationError: If any new value is invalid
        """
        item = get_owned_item(
            self.learning_item_repository, LearningItemId(item_id), UserId(user_id)
        )

        if title is not None:
            item.rename(title)
        if description_md is not None:
            item.update_description(description_md)
        if category_id is not None:
            category_id_vo = CategoryId(category_id)
            if self.category_repository.find_by_id(category_id_vo) is None:
                raise CategoryNotFoundError(category_id)
            item.change_category(category_id_vo)
        if clear_due_date:
            item.update_due_date(None)
        elif due_date is not None:
            item.update_due_date(due_date)
        if tag_names is not None:
            tags = self.tag_repository.get_or_create_many(tag_names)
            item.set_tags([tag.id for tag in tags])

        item = self.learning_item_repository.save(item)
        logger.info("learning_item_updated", learning_item_id=item_id, user_id=user_id)
        return item
