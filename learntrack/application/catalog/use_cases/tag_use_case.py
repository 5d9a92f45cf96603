"""Use cases for managing tags."""

import structlog

from learntrack.application.catalog.protocols import TagRepositoryProtocol
from learntrack.domain.catalog.entities import Tag
from learntrack.domain.catalog.exceptions import TagNameTakenError, TagNotFoundError
from learntrack.domain.common.value_objects import TagId

logger = structlog.get_logger(__name__)


class TagUseCase:
    def __init__(self, tag_repository: TagRepositoryProtocol) -> None:
        self.tag_repository = tag_repository

    def list_tags(self) -> list[Tag]:
        return self.tag_repository.find_all()

    def create_tag(self, name: str) -> Tag:
        """
        Create a tag from a raw name, which is normalized first.

        Raises:
            ValidationError: If the normalized name is invalid
            TagNameTakenError: If the normalized name already exists
        """
        tag = Tag.create(name)
        if self.tag_repository.find_by_name(tag.name):
            raise TagNameTakenError(tag.name)

        tag = self.tag_repository.save(tag)
        logger.info("tag_created", tag_id=tag.id.value, name=tag.name)
        return tag

    def delete_tag(self, tag_id: int) -> None:
        """
        Delete a tag and detach it from every item.

        Raises:
            TagNotFoundError: If the tag does not exist
        """
        if not self.tag_repository.delete(TagId(tag_id)):
            raise TagNotFoundError(tag_id)
        logger.info("tag_deleted", tag_id=tag_id)
