"""Category entity for organizing learning items."""

import re
from dataclasses import dataclass

from learntrack.domain.common.entity import Entity
from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_objects.ids import CategoryId

MAX_NAME_LENGTH = 50

# #RGB, #RRGGBB or #RRGGBBAA
HEX_COLOR_PATTERN = re.compile(r"^#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def _validate_name(name: str) -> None:
    if not name or not name.strip():
        raise ValidationError("Category name cannot be empty", field="name", value=name)
    if len(name.strip()) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Category name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
        )


def _validate_color(color: str) -> None:
    if not color or not HEX_COLOR_PATTERN.match(color):
        raise ValidationError(f"Invalid hex color: {color}", field="color", value=color)


@dataclass(eq=False)
class Category(Entity[CategoryId]):
    """
    Category entity.

    Business Rules:
    - Name is 1-50 characters and unique (enforced at repository level)
    - Color is a hex color: #RGB, #RRGGBB or #RRGGBBAA
    - Fields change only through rename/recolor
    """

    id: CategoryId
    name: str
    color: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_name(self.name)
        _validate_color(self.color)

    def rename(self, new_name: str) -> None:
        """
        Rename this category.

        Raises:
            ValidationError: If the name is empty or too long
        """
        _validate_name(new_name)
        self.name = new_name.strip()

    def recolor(self, new_color: str) -> None:
        """
        Change the display color.

        Raises:
            ValidationError: If the color is not a valid hex color
        """
        _validate_color(new_color)
        self.color = new_color

    @classmethod
    def create(cls, name: str, color: str) -> "Category":
        """Factory for creating new category."""
        _validate_name(name)
        return cls(id=CategoryId.generate(), name=name.strip(), color=color)

    @classmethod
    def create_with_id(cls, id: CategoryId, name: str, color: str) -> "Category":
        """Factory for reconstituting category from persistence."""
        return cls(id=id, name=name, color=color)
