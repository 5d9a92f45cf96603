"""Use case for creating learning items."""

from datetime import date

import structlog

from learntrack.application.catalog.protocols import (
    CategoryRepositoryProtocol,
    TagRepositoryProtocol,
)
from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleRepositoryProtocol,
)
from learntrack.application.learning.services import ProgressService
from learntrack.domain.catalog.exceptions import CategoryNotFoundError
from learntrack.domain.common.value_objects import CategoryId, UserId
from learntrack.domain.learning.entities import LearningItem, Module

logger = structlog.get_logger(__name__)


class CreateLearningItemUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
        progress_service: ProgressService,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.module_repository = module_repository
        self.category_repository = category_repository
        self.tag_repository = tag_repository
        self.progress_service = progress_service

    def create(
        self,
        user_id: int,
        category_id: int,
        title: str,
        description_md: str = "",
        due_date: date | None = None,
        tag_names: list[str] | None = None,
        module_titles: list[str] | None = None,
    ) -> LearningItem:
        """
        Create a learning item, optionally with its initial modules.

        Tags are referenced by name and created on first use. Modules are
        numbered in the order given.

        Args:
            user_id: ID of the owner
            category_id: ID of an existing category
            title: Item title
            description_md: Markdown description
            due_date: Optional due date, not in the past
            tag_names: Tag names to attach
            module_titles: Titles of modules to create with the item

        Returns:
            The persisted item with its progress computed

        Raises:
            CategoryNotFoundError: If the category does not exist
            ValidationError: If any field is invalid
        """
        category_id_vo = CategoryId(category_id)
        if self.category_repository.find_by_id(category_id_vo) is None:
            raise CategoryNotFoundError(category_id)

        item = LearningItem.create(
            user_id=UserId(user_id),
            category_id=category_id_vo,
            title=title,
            description_md=description_md,
            due_date=due_date,
        )
        # Validated against the unsaved item so a bad title fails before anything is stored
        drafts = [
            Module.create(learning_item_id=item.id, title=module_title, order=index)
            for index, module_title in enumerate(module_titles or [])
        ]

        tags = self.tag_repository.get_or_create_many(tag_names or [])
        item.set_tags([tag.id for tag in tags])
        item = self.learning_item_repository.save(item)

        if drafts:
            self.module_repository.create_many(
                [
                    Module.create(learning_item_id=item.id, title=draft.title, order=draft.order)
                    for draft in drafts
                ]
            )
            self.progress_service.refresh(item)

        logger.info(
            "learning_item_created",
            learning_item_id=item.id.value,
            user_id=user_id,
            module_count=len(module_titles or []),
        )
        return item
