"""Protocol for LearningItem repository."""

from dataclasses import dataclass, field
from datetime import date
from typing import Literal, Protocol

from learntrack.application.learning.protocols.module_repository import SortDirection
from learntrack.domain.common.value_objects import CategoryId, LearningItemId, TagId, UserId
from learntrack.domain.learning.entities import LearningItem
from learntrack.domain.learning.value_objects import Progress, Status, StatusVO

LearningItemOrderBy = Literal["title", "created_at", "updated_at", "due_date", "progress", "status"]


@dataclass(frozen=True)
class LearningItemFilters:
    """
    Filters for listing a user's items. Unset fields do not filter.

    ``tag_ids`` matches items carrying any of the tags. ``search`` is a
    case-insensitive substring of the title or the description.
    """

    status: StatusVO | None = None
    category_id: CategoryId | None = None
    tag_ids: tuple[TagId, ...] = field(default_factory=tuple)
    search: str | None = None


@dataclass(frozen=True)
class CategoryCount:
    """Number of a user's items in one category."""

    category_id: CategoryId
    name: str
    color: str
    count: int


class LearningItemRepositoryProtocol(Protocol):
    """Protocol for LearningItem repository operations, always scoped to the owner."""

    def find_by_id(self, item_id: LearningItemId, user_id: UserId) -> LearningItem | None:
        """
        Find an item by ID with user ownership check.

        Returns:
            LearningItem if found and owned by user, None otherwise
        """
        ...

    def list_for_user(
        self,
        user_id: UserId,
        filters: LearningItemFilters,
        order_by: LearningItemOrderBy = "updated_at",
        order: SortDirection = "desc",
        offset: int = 0,
        limit: int = 10,
    ) -> tuple[list[LearningItem], int]:
        """One page of the user's items matching the filters, and the total match count."""
        ...

    def count_by_category(self, category_id: CategoryId) -> int: ...

    def save(self, item: LearningItem) -> LearningItem:
        """Create or update an item, including its tag associations."""
        ...

    def update_progress(self, item_id: LearningItemId, progress: Progress) -> None:
        """Write only the cached progress column."""
        ...

    def delete(self, item_id: LearningItemId, user_id: UserId) -> bool:
        """Delete an item and, by cascade, its modules. Returns False if not found."""
        ...

    # Report queries

    def count_for_user(self, user_id: UserId) -> int: ...

    def count_by_status(self, user_id: UserId) -> dict[Status, int]:
        """Item counts per status; statuses without items are absent."""
        ...

    def count_by_category_for_user(self, user_id: UserId) -> list[CategoryCount]: ...

    def average_progress(self, user_id: UserId) -> Progress:
        """Mean cached progress over all the user's items, zero when there are none."""
        ...

    def find_overdue(self, user_id: UserId, today: date) -> list[LearningItem]:
        """Unfinished items whose due date is before today, earliest first."""
        ...

    def find_due_soon(self, user_id: UserId, days: int, today: date) -> list[LearningItem]:
        """Unfinished items due between today and ``days`` from now, earliest first."""
        ...

    def find_near_completion(
        self, user_id: UserId, threshold: float, limit: int
    ) -> list[LearningItem]:
        """Unfinished items with progress at or above ``threshold``, highest first."""
        ...

    def find_recently_updated(self, user_id: UserId, limit: int) -> list[LearningItem]: ...
