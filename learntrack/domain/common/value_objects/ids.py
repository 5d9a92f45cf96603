from dataclasses import dataclass

from ..entity import EntityId


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class CategoryId(EntityId):
    """Strongly-typed category identifier."""


@dataclass(frozen=True)
class TagId(EntityId):
    """Strongly-typed tag identifier."""


@dataclass(frozen=True)
class LearningItemId(EntityId):
    """Strongly-typed learning item identifier."""


@dataclass(frozen=True)
class ModuleId(EntityId):
    """Strongly-typed module identifier."""


@dataclass(frozen=True)
class DependencyId(EntityId):
    """Strongly-typed dependency identifier."""
