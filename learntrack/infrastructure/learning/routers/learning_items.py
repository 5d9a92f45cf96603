import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from learntrack.application.learning.protocols import LearningItemOrderBy, SortDirection
from learntrack.application.learning.use_cases.learning_items import (
    MAX_PAGE_SIZE,
    CreateLearningItemUseCase,
    DeleteLearningItemUseCase,
    GetLearningItemsUseCase,
    LearningItemDetails,
    RecalculateProgressUseCase,
    UpdateLearningItemStatusUseCase,
    UpdateLearningItemUseCase,
)
from learntrack.config import get_settings
from learntrack.core import container
from learntrack.domain.common.exceptions import DomainError
from learntrack.domain.learning.entities import LearningItem as LearningItemEntity
from learntrack.domain.learning.entities import Module as ModuleEntity
from learntrack.infrastructure.common.di import inject_use_case
from learntrack.infrastructure.identity.dependencies import CurrentUser
from learntrack.infrastructure.learning.schemas import (
    LearningItem,
    LearningItemCreateRequest,
    LearningItemDetail,
    LearningItemsListResponse,
    LearningItemStatusUpdateRequest,
    LearningItemUpdateRequest,
    Module,
    ProgressResponse,
    TagSummary,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/items", tags=["learning-items"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


def to_module_schema(module: ModuleEntity) -> Module:
    return Module(
        id=module.id.value,
        learning_item_id=module.learning_item_id.value,
        title=module.title,
        status=str(module.status),
        order=module.order,
        created_at=module.created_at,
        updated_at=module.updated_at,
    )


def _item_fields(details: LearningItemDetails) -> dict[str, Any]:
    item = details.item
    due_soon_days = get_settings().DUE_SOON_DAYS
    return {
        "id": item.id.value,
        "user_id": item.user_id.value,
        "category_id": item.category_id.value,
        "title": item.title,
        "description_md": item.description_md,
        "due_date": item.due_date,
        "status": str(item.status),
        "progress": item.progress.value,
        "is_overdue": item.is_overdue(),
        "is_due_soon": item.is_due_soon(days=due_soon_days),
        "tags": [TagSummary(id=tag.id.value, name=tag.name) for tag in details.tags],
        "created_at": item.created_at,
        "updated_at": item.updated_at,
    }


def to_item_schema(details: LearningItemDetails) -> LearningItem:
    return LearningItem(**_item_fields(details))


def to_item_detail_schema(details: LearningItemDetails) -> LearningItemDetail:
    return LearningItemDetail(
        **_item_fields(details),
        modules=[to_module_schema(module) for module in details.modules],
    )


def _fail(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=UNEXPECTED_ERROR,
    )


@router.post("", response_model=LearningItemDetail, status_code=status.HTTP_201_CREATED)
def create_learning_item(
    request: LearningItemCreateRequest,
    current_user: CurrentUser,
    use_case: CreateLearningItemUseCase = Depends(
        inject_use_case(container.create_learning_item_use_case)
    ),
    query_use_case: GetLearningItemsUseCase = Depends(
        inject_use_case(container.get_learning_items_use_case)
    ),
) -> LearningItemDetail:
    """
    Create a learning item in Backlog.

    Tags are referenced by name and created when missing. Modules listed in
    the request are created with the item in the given order.
    """
    try:
        item: LearningItemEntity = use_case.create(
            user_id=current_user.id.value,
            category_id=request.category_id,
            title=request.title,
            description_md=request.description_md,
            due_date=request.due_date,
            tag_names=request.tags,
            module_titles=request.modules,
        )
        details = query_use_case.get_item(current_user.id.value, item.id.value)
        return to_item_detail_schema(details)
    except DomainError:
        # Handled by the application's exception handlers
        raise
    except Exception as e:
        raise _fail("create learning item", e) from e


@router.get("", response_model=LearningItemsListResponse)
def list_learning_items(
    current_user: CurrentUser,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    category_id: int | None = None,
    tag: Annotated[list[str] | None, Query(description="Tag names; any of them matches")] = None,
    search: str | None = Query(None, description="Text to find in the title or description"),
    order_by: LearningItemOrderBy = "updated_at",
    order: SortDirection = "desc",
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(10, ge=1, le=MAX_PAGE_SIZE, description="Items per page"),
    use_case: GetLearningItemsUseCase = Depends(
        inject_use_case(container.get_learning_items_use_case)
    ),
) -> LearningItemsListResponse:
    """
    List the current user's items, most recently updated first by default.

    Filters combine; ``tag`` may be repeated. ``total`` counts every match,
    not only the returned page.
    """
    try:
        result = use_case.list_items(
            current_user.id.value,
            status=status_filter,
            category_id=category_id,
            tags=tag,
            search=search,
            order_by=order_by,
            order=order,
            page=page,
            limit=limit,
        )
        return LearningItemsListResponse(
            items=[to_item_schema(details) for details in result.items],
            total=result.total,
            page=result.page,
            limit=result.limit,
        )
    except DomainError:
        raise
    except Exception as e:
        raise _fail("list learning items", e) from e


@router.get("/{item_id}", response_model=LearningItemDetail)
def get_learning_item(
    item_id: int,
    current_user: CurrentUser,
    use_case: GetLearningItemsUseCase = Depends(
        inject_use_case(container.get_learning_items_use_case)
    ),
) -> LearningItemDetail:
    """Get one item with its tags and modules."""
    try:
        return to_item_detail_schema(use_case.get_item(current_user.id.value, item_id))
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"get learning item {item_id}", e) from e


@router.patch("/{item_id}", response_model=LearningItemDetail)
def update_learning_item(
    item_id: int,
    request: LearningItemUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateLearningItemUseCase = Depends(
        inject_use_case(container.update_learning_item_use_case)
    ),
    query_use_case: GetLearningItemsUseCase = Depends(
        inject_use_case(container.get_learning_items_use_case)
    ),
) -> LearningItemDetail:
    """Edit title, description, category, tags or due date."""
    try:
        use_case.update(
            user_id=current_user.id.value,
            item_id=item_id,
            title=request.title,
            description_md=request.description_md,
            category_id=request.category_id,
            tag_names=request.tags,
            due_date=request.due_date,
            clear_due_date="due_date" in request.model_fields_set and request.due_date is None,
        )
        return to_item_detail_schema(query_use_case.get_item(current_user.id.value, item_id))
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"update learning item {item_id}", e) from e


@router.patch("/{item_id}/status", response_model=LearningItemDetail)
def update_learning_item_status(
    item_id: int,
    request: LearningItemStatusUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateLearningItemStatusUseCase = Depends(
        inject_use_case(container.update_learning_item_status_use_case)
    ),
    query_use_case: GetLearningItemsUseCase = Depends(
        inject_use_case(container.get_learning_items_use_case)
    ),
) -> LearningItemDetail:
    """
    Move an item to another status.

    Returns 400 when the transition is not allowed, e.g. leaving Concluido.
    """
    try:
        use_case.update_status(current_user.id.value, item_id, request.status)
        return to_item_detail_schema(query_use_case.get_item(current_user.id.value, item_id))
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"update status of learning item {item_id}", e) from e


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_learning_item(
    item_id: int,
    current_user: CurrentUser,
    use_case: DeleteLearningItemUseCase = Depends(
        inject_use_case(container.delete_learning_item_use_case)
    ),
) -> None:
    """Delete an item with its modules and every dependency touching it."""
    try:
        use_case.delete(current_user.id.value, item_id)
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"delete learning item {item_id}", e) from e


@router.post("/{item_id}/progress/recalculate", response_model=ProgressResponse)
def recalculate_progress(
    item_id: int,
    current_user: CurrentUser,
    use_case: RecalculateProgressUseCase = Depends(
        inject_use_case(container.recalculate_progress_use_case)
    ),
) -> ProgressResponse:
    """Recompute the cached progress from the item's modules."""
    try:
        summary = use_case.recalculate(current_user.id.value, item_id)
        return ProgressResponse(
            learning_item_id=item_id,
            progress=summary.progress.value,
            completed_modules=summary.completed_modules,
            total_modules=summary.total_modules,
        )
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"recalculate progress of learning item {item_id}", e) from e
