"""Use cases for managing categories."""

import structlog

from learntrack.application.catalog.protocols import CategoryRepositoryProtocol
from learntrack.application.learning.protocols import LearningItemRepositoryProtocol
from learntrack.domain.catalog.entities import Category
from learntrack.domain.catalog.exceptions import (
    CategoryInUseError,
    CategoryNameTakenError,
    CategoryNotFoundError,
)
from learntrack.domain.common.value_objects import CategoryId

logger = structlog.get_logger(__name__)


class CategoryUseCase:
    """Category CRUD. Categories are shared by all users."""

    def __init__(
        self,
        category_repository: CategoryRepositoryProtocol,
        learning_item_repository: LearningItemRepositoryProtocol,
    ) -> None:
        self.category_repository = category_repository
        self.learning_item_repository = learning_item_repository

    def _get(self, category_id: int) -> Category:
        category = self.category_repository.find_by_id(CategoryId(category_id))
        if not category:
            raise CategoryNotFoundError(category_id)
        return category

    def _ensure_name_free(self, name: str, current: Category | None = None) -> None:
        existing = self.category_repository.find_by_name(name.strip())
        if existing and (current is None or existing.id != current.id):
            raise CategoryNameTakenError(name.strip())

    def list_categories(self) -> list[Category]:
        return self.category_repository.find_all()

    def create_category(self, name: str, color: str) -> Category:
        """
        Create a category.

        Raises:
            ValidationError: If name or color is invalid
            CategoryNameTakenError: If the name is already used
        """
        category = Category.create(name=name, color=color)
        self._ensure_name_free(category.name)

        category = self.category_repository.save(category)
        logger.info("category_created", category_id=category.id.value, name=category.name)
        return category

    def update_category(
        self, category_id: int, name: str | None = None, color: str | None = None
    ) -> Category:
        """
        Rename and/or recolor a category.

        Raises:
            CategoryNotFoundError: If the category does not exist
            ValidationError: If the new name or color is invalid
            CategoryNameTakenError: If another category already uses the name
        """
        category = self._get(category_id)
        if name is not None:
            self._ensure_name_free(name, current=category)
            category.rename(name)
        if color is not None:
            category.recolor(color)

        category = self.category_repository.save(category)
        logger.info("category_updated", category_id=category_id)
        return category

    def delete_category(self, category_id: int) -> None:
        """
        Delete an unused category.

        Raises:
            CategoryNotFoundError: If the category does not exist
            CategoryInUseError: If learning items still reference it
        """
        category = self._get(category_id)
        item_count = self.learning_item_repository.count_by_category(category.id)
        if item_count:
            raise CategoryInUseError(category_id, item_count)

        self.category_repository.delete(category.id)
        logger.info("category_deleted", category_id=category_id)
