"""
Progress value object.

Progress is a percentage derived from module completion. It is never
authored directly by a user: it is either computed with
``Progress.from_modules`` or set to one of the terminal values.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Self

from learntrack.domain.common.exceptions import InvariantViolationError, ValidationError
from learntrack.domain.common.value_object import ValueObject

MIN_PROGRESS = 0.0
MAX_PROGRESS = 100.0


def _round_percentage(value: float) -> float:
    return float(Decimal(str(value)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Progress(ValueObject):
    """Completion percentage in [0, 100], kept at two decimal places."""

    value: float

    def __post_init__(self) -> None:
        if not MIN_PROGRESS <= self.value <= MAX_PROGRESS:
            raise ValidationError(
                f"Progress must be between 0 and 100, got: {self.value}",
                field="progress",
                value=self.value,
            )
        # frozen dataclass: bypass __setattr__ to store the rounded value
        object.__setattr__(self, "value", _round_percentage(self.value))

    @classmethod
    def zero(cls) -> Self:
        return cls(MIN_PROGRESS)

    @classmethod
    def complete(cls) -> Self:
        return cls(MAX_PROGRESS)

    @classmethod
    def from_modules(cls, completed: int, total: int) -> Self:
        """
        Derive progress from module completion counts.

        Args:
            completed: Number of modules in Concluido
            total: Number of modules the item has

        Returns:
            Zero for an item without modules, otherwise completed/total as a percentage

        Raises:
            InvariantViolationError: If completed exceeds total
        """
        if total == 0:
            return cls.zero()

        if completed > total:
            raise InvariantViolationError(
                "Progress",
                f"Completed modules ({completed}) cannot exceed total ({total})",
            )

        return cls(completed / total * 100)

    def is_zero(self) -> bool:
        return self.value == MIN_PROGRESS

    def is_complete(self) -> bool:
        return self.value == MAX_PROGRESS

    def is_in_progress(self) -> bool:
        return MIN_PROGRESS < self.value < MAX_PROGRESS

    def as_percentage(self) -> str:
        return f"{self.value:g}%"

    def __str__(self) -> str:
        return f"{self.value:g}"
