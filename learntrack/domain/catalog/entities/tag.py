"""Tag entity for classifying learning items."""

import re
from dataclasses import dataclass

from learntrack.domain.common.entity import Entity
from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_objects.ids import TagId

MAX_NAME_LENGTH = 30

TAG_NAME_PATTERN = re.compile(r"^[a-z0-9-]+$")


def normalize_tag_name(name: str) -> str:
    """Lower-case and trim a tag name. Applying it twice changes nothing."""
    return name.strip().lower()


def _validate_name(name: str) -> None:
    if not name:
        raise ValidationError("Tag name cannot be empty", field="name", value=name)
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(
            f"Tag name cannot exceed {MAX_NAME_LENGTH} characters", field="name", value=name
        )
    if " " in name:
        raise ValidationError(
            "Tag name cannot contain spaces. Use hyphens instead.", field="name", value=name
        )
    if not TAG_NAME_PATTERN.match(name):
        raise ValidationError(
            "Tag name can only contain lowercase letters, numbers, and hyphens",
            field="name",
            value=name,
        )


@dataclass(eq=False)
class Tag(Entity[TagId]):
    """
    Tag entity.

    Business Rules:
    - Name is stored normalized (lower-case, trimmed)
    - Name is at most 30 characters of [a-z0-9-]
    - Name is unique (enforced at repository level)
    """

    id: TagId
    name: str

    def __post_init__(self) -> None:
        """Validate invariants."""
        _validate_name(self.name)

    def rename(self, new_name: str) -> None:
        normalized = normalize_tag_name(new_name)
        _validate_name(normalized)
        self.name = normalized

    @classmethod
    def create(cls, name: str) -> "Tag":
        """Factory for creating new tag from a raw, not yet normalized name."""
        return cls(id=TagId.generate(), name=normalize_tag_name(name))

    @classmethod
    def create_with_id(cls, id: TagId, name: str) -> "Tag":
        """Factory for reconstituting tag from persistence."""
        return cls(id=id, name=name)
