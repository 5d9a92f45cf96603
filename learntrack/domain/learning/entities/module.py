"""
Module entity: an ordered sub-unit of a learning item.
"""

from dataclasses import dataclass
from datetime import UTC, datetime

from learntrack.domain.common.entity import Entity
from learntrack.domain.common.exceptions import InvalidTransitionError, ValidationError
from learntrack.domain.common.value_objects import LearningItemId, ModuleId
from learntrack.domain.learning.value_objects import ModuleStatusVO

MAX_TITLE_LENGTH = 200


def _validate_title(title: str) -> None:
    if not title or not title.strip():
        raise ValidationError("Module title cannot be empty", field="title", value=title)
    if len(title) > MAX_TITLE_LENGTH:
        raise ValidationError(
            f"Module title cannot exceed {MAX_TITLE_LENGTH} characters",
            field="title",
            value=title,
        )


def _validate_order(order: int) -> None:
    if order < 0:
        raise ValidationError("Module order must be non-negative", field="order", value=order)


@dataclass(eq=False)
class Module(Entity[ModuleId]):
    """
    A chapter, lesson or section of a learning item.

    Business Rules:
    - Title is 1-200 characters
    - Order is non-negative
    - A module always belongs to exactly one learning item, and never moves
    - Status only changes through update_status, following the module table
    """

    id: ModuleId
    learning_item_id: LearningItemId
    title: str
    status: ModuleStatusVO
    order: int
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_title(self.title)
        _validate_order(self.order)
        if self.learning_item_id is None:
            raise ValidationError(
                "Module must belong to a learning item", field="learning_item_id"
            )

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def rename(self, new_title: str) -> None:
        """
        Change the module title.

        Raises:
            ValidationError: If the title is empty or too long
        """
        _validate_title(new_title)
        self.title = new_title.strip()
        self._touch()

    def move_to(self, new_order: int) -> None:
        """
        Change the module position within its item.

        Raises:
            ValidationError: If the order is negative
        """
        _validate_order(new_order)
        self.order = new_order
        self._touch()

    def update_status(self, new_status: ModuleStatusVO) -> None:
        """
        Move the module to a new status.

        Args:
            new_status: The requested status

        Raises:
            InvalidTransitionError: If the module table forbids the transition
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidTransitionError("Module", str(self.status), str(new_status))
        self.status = new_status
        self._touch()

    def mark_as_pendente(self) -> None:
        self.update_status(ModuleStatusVO.pendente())

    def mark_as_em_andamento(self) -> None:
        self.update_status(ModuleStatusVO.em_andamento())

    def mark_as_concluido(self) -> None:
        self.update_status(ModuleStatusVO.concluido())

    def is_concluido(self) -> bool:
        return self.status.is_concluido()

    def belongs_to(self, learning_item_id: LearningItemId) -> bool:
        return self.learning_item_id == learning_item_id

    @classmethod
    def create(
        cls,
        learning_item_id: LearningItemId,
        title: str,
        order: int,
        status: ModuleStatusVO | None = None,
    ) -> "Module":
        """Create a new module in Pendente (ID will be 0 until persisted)."""
        _validate_title(title)
        now = datetime.now(UTC)
        return cls(
            id=ModuleId.generate(),
            learning_item_id=learning_item_id,
            title=title.strip(),
            status=status or ModuleStatusVO.pendente(),
            order=order,
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def create_with_id(
        cls,
        id: ModuleId,
        learning_item_id: LearningItemId,
        title: str,
        status: ModuleStatusVO,
        order: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Module":
        """Reconstitute a module from persistence."""
        return cls(
            id=id,
            learning_item_id=learning_item_id,
            title=title,
            status=status,
            order=order,
            created_at=created_at,
            updated_at=updated_at,
        )
