"""Use case for reading learning items."""

from dataclasses import dataclass, field

from learntrack.application.catalog.protocols import TagRepositoryProtocol
from learntrack.application.learning.protocols import (
    LearningItemFilters,
    LearningItemOrderBy,
    LearningItemRepositoryProtocol,
    ModuleRepositoryProtocol,
    SortDirection,
)
from learntrack.application.learning.services.ownership import get_owned_item
from learntrack.domain.catalog.entities import Tag, normalize_tag_name
from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_objects import CategoryId, LearningItemId, TagId, UserId
from learntrack.domain.learning.entities import LearningItem, Module
from learntrack.domain.learning.value_objects import StatusVO

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100


@dataclass
class LearningItemDetails:
    """An item with its tags resolved and, for single reads, its modules."""

    item: LearningItem
    tags: list[Tag] = field(default_factory=list)
    modules: list[Module] = field(default_factory=list)


@dataclass
class LearningItemPage:
    items: list[LearningItemDetails]
    total: int
    page: int
    limit: int


class GetLearningItemsUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
        tag_repository: TagRepositoryProtocol,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.module_repository = module_repository
        self.tag_repository = tag_repository

    def get_item(self, user_id: int, item_id: int) -> LearningItemDetails:
        """
        Get one item with its tags and modules in display order.

        Raises:
            LearningItemNotFoundError: If the item is missing or not the user's
        """
        item = get_owned_item(
            self.learning_item_repository, LearningItemId(item_id), UserId(user_id)
        )
        tags_by_id = {tag.id: tag for tag in self.tag_repository.find_all()}
        return LearningItemDetails(
            item=item,
            tags=[tags_by_id[tag_id] for tag_id in item.tag_ids if tag_id in tags_by_id],
            modules=self.module_repository.find_by_learning_item_id(item.id),
        )

    def list_items(
        self,
        user_id: int,
        status: str | None = None,
        category_id: int | None = None,
        tags: list[str] | None = None,
        search: str | None = None,
        order_by: LearningItemOrderBy = "updated_at",
        order: SortDirection = "desc",
        page: int = 1,
        limit: int = DEFAULT_PAGE_SIZE,
    ) -> LearningItemPage:
        """
        List one page of the user's items, optionally filtered.

        Args:
            user_id: ID of the owner
            status: Only items in this status
            category_id: Only items of this category
            tags: Only items carrying at least one of these tag names
            search: Case-insensitive text to find in the title or description
            order_by: Sort column
            order: Sort direction
            page: 1-based page number
            limit: Page size, at most MAX_PAGE_SIZE

        Returns:
            The page of items with their tags, and the total number of matches

        Raises:
            ValidationError: If status, page or limit is invalid
        """
        if page < 1:
            raise ValidationError("Page must be at least 1", field="page", value=page)
        if not 1 <= limit <= MAX_PAGE_SIZE:
            raise ValidationError(
                f"Limit must be between 1 and {MAX_PAGE_SIZE}", field="limit", value=limit
            )

        tag_ids: tuple[TagId, ...] = ()
        if tags:
            found = [self.tag_repository.find_by_name(normalize_tag_name(name)) for name in tags]
            tag_ids = tuple(tag.id for tag in found if tag is not None)
            if not tag_ids:
                # None of the requested tags exist, so nothing can match
                return LearningItemPage(items=[], total=0, page=page, limit=limit)

        filters = LearningItemFilters(
            status=StatusVO.create(status) if status is not None else None,
            category_id=CategoryId(category_id) if category_id is not None else None,
            tag_ids=tag_ids,
            search=search.strip() if search and search.strip() else None,
        )
        items, total = self.learning_item_repository.list_for_user(
            UserId(user_id),
            filters,
            order_by=order_by,
            order=order,
            offset=(page - 1) * limit,
            limit=limit,
        )

        tags_by_id = {t.id: t for t in self.tag_repository.find_all()}
        return LearningItemPage(
            items=[
                LearningItemDetails(
                    item=item,
                    tags=[tags_by_id[tag_id] for tag_id in item.tag_ids if tag_id in tags_by_id],
                )
                for item in items
            ],
            total=total,
            page=page,
            limit=limit,
        )
