"""Protocol for Category repository."""

from typing import Protocol

from learntrack.domain.catalog.entities import Category
from learntrack.domain.common.value_objects import CategoryId


class CategoryRepositoryProtocol(Protocol):
    """Protocol for Category repository operations."""

    def find_by_id(self, category_id: CategoryId) -> Category | None: ...

    def find_by_name(self, name: str) -> Category | None:
        """Case-sensitive exact match on the trimmed name."""
        ...

    def find_all(self) -> list[Category]:
        """All categories ordered by name."""
        ...

    def save(self, category: Category) -> Category:
        """
        Create or update a category.

        Raises:
            CategoryNameTakenError: If the name collides with another category
        """
        ...

    def delete(self, category_id: CategoryId) -> bool: ...
