"""Protocol for Tag repository."""

from typing import Protocol

from learntrack.domain.catalog.entities import Tag
from learntrack.domain.common.value_objects import TagId


class TagRepositoryProtocol(Protocol):
    """Protocol for Tag repository operations."""

    def find_by_id(self, tag_id: TagId) -> Tag | None: ...

    def find_by_name(self, name: str) -> Tag | None: ...

    def find_all(self) -> list[Tag]: ...

    def get_or_create_many(self, names: list[str]) -> list[Tag]:
        """
        Resolve normalized names to tags, creating the missing ones.

        Returns:
            Tags in the order of first appearance of their name
        """
        ...

    def save(self, tag: Tag) -> Tag: ...

    def delete(self, tag_id: TagId) -> bool: ...
