"""
LearningItem aggregate: a course, book or certification being tracked.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

from learntrack.domain.common.entity import Entity
from learntrack.domain.common.exceptions import InvalidTransitionError, ValidationError
from learntrack.domain.common.value_objects import CategoryId, LearningItemId, TagId, UserId
from learntrack.domain.learning.entities.module import Module
from learntrack.domain.learning.exceptions import CompletedItemModulesError
from learntrack.domain.learning.value_objects import Progress, StatusVO

MAX_TITLE_LENGTH = 200
DEFAULT_DUE_SOON_DAYS = 7


def _validate_title(title: str) -> None:
    if not title or not title.strip():
        raise ValidationError("Learning item title cannot be empty", field="title", value=title)
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Learning item title cannot exceed {MAX_TITLE_LENGTH} characters",
            field="title",
            value=title,
        )


def _today() -> date:
    return datetime.now(UTC).date()


@dataclass(eq=False)
class LearningItem(Entity[LearningItemId]):
    """
    Learning item aggregate root.

    Business Rules:
    - Title is 1-200 characters
    - Belongs to exactly one user and one category
    - Starts in Backlog with zero progress
    - Status only changes through update_status, following the item table
    - Progress is cached and derived from module counts, never set directly
    - A due date in the past is only accepted for completed items
    - A completed item takes no new modules

    The due date rule is checked when the date is set, not on
    reconstitution, so items that became overdue can still be loaded.
    """

    id: LearningItemId
    user_id: UserId
    category_id: CategoryId
    title: str
    status: StatusVO
    progress: Progress
    created_at: datetime
    updated_at: datetime
    description_md: str = ""
    due_date: date | None = None
    tag_ids: list[TagId] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_title(self.title)
        if self.user_id is None:
            raise ValidationError("Learning item must belong to a user", field="user_id")
        if self.category_id is None:
            raise ValidationError("Learning item must belong to a category", field="category_id")

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def _check_due_date(self, due_date: date | None) -> None:
        if due_date is not None and due_date < _today() and not self.status.is_concluido():
            raise ValidationError(
                "Due date cannot be in the past for active items",
                field="due_date",
                value=due_date.isoformat(),
            )

    # Query methods
    def belongs_to(self, user_id: UserId) -> bool:
        return self.user_id == user_id

    def is_overdue(self, today: date | None = None) -> bool:
        if self.due_date is None or self.status.is_concluido():
            return False
        return self.due_date < (today or _today())

    def is_due_soon(self, days: int = DEFAULT_DUE_SOON_DAYS, today: date | None = None) -> bool:
        if self.due_date is None or self.status.is_concluido():
            return False
        remaining = (self.due_date - (today or _today())).days
        return 0 <= remaining <= days

    # Mutations
    def rename(self, new_title: str) -> None:
        _validate_title(new_title)
        self.title = new_title.strip()
        self._touch()

    def update_description(self, description_md: str) -> None:
        self.description_md = description_md
        self._touch()

    def update_due_date(self, due_date: date | None) -> None:
        """
        Set or clear the due date.

        Raises:
            ValidationError: If the date is in the past and the item is not complete
        """
        self._check_due_date(due_date)
        self.due_date = due_date
        self._touch()

    def change_category(self, category_id: CategoryId) -> None:
        self.category_id = category_id
        self._touch()

    def set_tags(self, tag_ids: list[TagId]) -> None:
        self.tag_ids = list(dict.fromkeys(tag_ids))
        self._touch()

    def update_status(self, new_status: StatusVO) -> None:
        """
        Move the item to a new status.

        Args:
            new_status: The requested status

        Raises:
            InvalidTransitionError: If the item table forbids the transition
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidTransitionError("LearningItem", str(self.status), str(new_status))
        self.status = new_status
        self._touch()

    def ensure_accepts_modules(self) -> None:
        """
        Check that modules may still be added to this item.

        Raises:
            CompletedItemModulesError: If the item is Concluido
        """
        if self.status.is_concluido():
            raise CompletedItemModulesError(self.id.value)

    def refresh_progress(self, completed: int, total: int) -> Progress:
        """
        Recompute the cached progress from module counts.

        An item without modules has zero progress unless it is complete,
        in which case it reports 100.

        Raises:
            InvariantViolationError: If completed exceeds total
        """
        if total == 0 and self.status.is_concluido():
            self.progress = Progress.complete()
        else:
            self.progress = Progress.from_modules(completed, total)
        self._touch()
        return self.progress

    def refresh_progress_from(self, modules: list[Module]) -> Progress:
        """Recompute the cached progress from loaded modules."""
        foreign = [m for m in modules if not m.belongs_to(self.id)]
        if foreign:
            raise ValidationError(
                "Module does not belong to this learning item",
                field="learning_item_id",
                value=foreign[0].learning_item_id.value,
            )
        completed = sum(1 for m in modules if m.is_concluido())
        return self.refresh_progress(completed, len(modules))

    # Factory methods
    @classmethod
    def create(
        cls,
        user_id: UserId,
        category_id: CategoryId,
        title: str,
        description_md: str = "",
        due_date: date | None = None,
        tag_ids: list[TagId] | None = None,
    ) -> "LearningItem":
        """Create a new item in Backlog with zero progress (ID will be 0 until persisted)."""
        _validate_title(title)
        now = datetime.now(UTC)
        item = cls(
            id=LearningItemId.generate(),
            user_id=user_id,
            category_id=category_id,
            title=title.strip(),
            status=StatusVO.backlog(),
            progress=Progress.zero(),
            created_at=now,
            updated_at=now,
            description_md=description_md,
            tag_ids=list(dict.fromkeys(tag_ids or [])),
        )
        item._check_due_date(due_date)
        item.due_date = due_date
        return item

    @classmethod
    def create_with_id(
        cls,
        id: LearningItemId,
        user_id: UserId,
        category_id: CategoryId,
        title: str,
        status: StatusVO,
        progress: Progress,
        created_at: datetime,
        updated_at: datetime,
        description_md: str = "",
        due_date: date | None = None,
        tag_ids: list[TagId] | None = None,
    ) -> "LearningItem":
        """Reconstitute an item from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            category_id=category_id,
            title=title,
            status=status,
            progress=progress,
            created_at=created_at,
            updated_at=updated_at,
            description_md=description_md,
            due_date=due_date,
            tag_ids=list(tag_ids or []),
        )
