"""
Base classes for Entities and their identifiers.

Entities have an identity that runs through time. Two entities are equal
when their ids are equal, whatever their other attributes hold.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Generic, Self, TypeVar

from .value_object import ValueObject


@dataclass(frozen=True)
class EntityId(ValueObject):
    """
    Strongly-typed integer identifier.

    Ids are assigned by the database. A freshly created entity carries the
    placeholder ``0`` until it is persisted, so negative values are the only
    invalid ones. Subclassing keeps a ``ModuleId`` from being passed where a
    ``LearningItemId`` is expected.
    """

    value: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_persisted(self) -> bool:
        return self.value != 0

    @classmethod
    def generate(cls) -> Self:
        """Placeholder id; the database assigns the real one."""
        return cls(0)


IdType = TypeVar("IdType", bound=EntityId)


class Entity(ABC, Generic[IdType]):
    """
    Base class for Entities in the domain model.

    Subclasses are mutable dataclasses declared with ``eq=False`` so that
    identity-based equality from this class is kept.
    """

    id: IdType

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"
