"""Common value objects shared across all domain modules."""

from .email import Email
from .ids import (
    CategoryId,
    DependencyId,
    LearningItemId,
    ModuleId,
    TagId,
    UserId,
)

__all__ = [
    # IDs
    "CategoryId",
    "DependencyId",
    "LearningItemId",
    "ModuleId",
    "TagId",
    "UserId",
    # Scalars
    "Email",
]
