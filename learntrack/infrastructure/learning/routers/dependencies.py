import logging
from typing import Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from learntrack.application.learning.use_cases.dependencies import (
    CheckCircularDependencyUseCase,
    LinkDependencyUseCase,
    ListDependenciesUseCase,
    RelatedDependency,
    UnlinkDependencyUseCase,
)
from learntrack.core import container
from learntrack.domain.common.exceptions import DomainError
from learntrack.domain.learning.entities import Dependency as DependencyEntity
from learntrack.infrastructure.common.di import inject_use_case
from learntrack.infrastructure.identity.dependencies import CurrentUser
from learntrack.infrastructure.learning.schemas import (
    CircularCheckRequest,
    CircularCheckResponse,
    DependenciesCreateResponse,
    DependenciesListResponse,
    Dependency,
    DependencyCreateRequest,
    DependencyWithItem,
    RelatedItem,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dependencies"])


def _to_schema(dependency: DependencyEntity) -> Dependency:
    return Dependency(
        id=dependency.id.value,
        source_item_id=dependency.source_item_id.value,
        target_item_id=dependency.target_item_id.value,
        created_at=dependency.created_at,
    )


def _to_related_schema(related: RelatedDependency) -> DependencyWithItem:
    dependency, item = related.dependency, related.item
    return DependencyWithItem(
        id=dependency.id.value,
        source_item_id=dependency.source_item_id.value,
        target_item_id=dependency.target_item_id.value,
        created_at=dependency.created_at,
        item=RelatedItem(
            id=item.id.value,
            title=item.title,
            status=str(item.status),
            progress=item.progress.value,
        ),
    )


def _fail(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/items/{item_id}/dependencies", response_model=DependenciesListResponse)
def list_dependencies(
    item_id: int,
    current_user: CurrentUser,
    kind: Literal["prerequisites", "dependents", "all"] = Query("all", alias="type"),
    use_case: ListDependenciesUseCase = Depends(
        inject_use_case(container.list_dependencies_use_case)
    ),
) -> DependenciesListResponse:
    """
    List an item's prerequisites (items it requires) and/or dependents
    (items that require it).
    """
    try:
        result = use_case.list_dependencies(current_user.id.value, item_id, kind)
        return DependenciesListResponse(
            prerequisites=[_to_related_schema(r) for r in result.prerequisites],
            dependents=[_to_related_schema(r) for r in result.dependents],
        )
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"list dependencies of learning item {item_id}", e) from e


@router.post(
    "/items/{item_id}/dependencies",
    response_model=DependenciesCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_dependencies(
    item_id: int,
    request: DependencyCreateRequest,
    current_user: CurrentUser,
    use_case: LinkDependencyUseCase = Depends(
        inject_use_case(container.link_dependency_use_case)
    ),
) -> DependenciesCreateResponse:
    """
    Make the item require one or more other items.

    Rejected with 400 for a self-dependency or when the edge would close a
    cycle, and with 409 when the edge already exists. A batch is stored
    only if every edge in it is valid.
    """
    try:
        if request.target_item_id is not None:
            created = [use_case.link(current_user.id.value, item_id, request.target_item_id)]
        else:
            created = use_case.link_many(
                current_user.id.value, item_id, request.target_item_ids or []
            )
        return DependenciesCreateResponse(dependencies=[_to_schema(d) for d in created])
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"create dependencies for learning item {item_id}", e) from e


@router.delete(
    "/items/{item_id}/dependencies/{dependency_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_dependency(
    item_id: int,
    dependency_id: int,
    current_user: CurrentUser,
    use_case: UnlinkDependencyUseCase = Depends(
        inject_use_case(container.unlink_dependency_use_case)
    ),
) -> None:
    """Remove a dependency touching the item."""
    try:
        use_case.unlink(current_user.id.value, item_id, dependency_id)
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"delete dependency {dependency_id}", e) from e


@router.post("/dependencies/check-circular", response_model=CircularCheckResponse)
def check_circular_dependency(
    request: CircularCheckRequest,
    current_user: CurrentUser,
    use_case: CheckCircularDependencyUseCase = Depends(
        inject_use_case(container.check_circular_dependency_use_case)
    ),
) -> CircularCheckResponse:
    """Preview whether a dependency could be created, without storing it."""
    try:
        result = use_case.check(
            current_user.id.value, request.source_item_id, request.target_item_id
        )
        return CircularCheckResponse(
            would_create_cycle=result.would_create_cycle,
            is_self_dependency=result.is_self_dependency,
            message=result.message,
        )
    except DomainError:
        raise
    except Exception as e:
        raise _fail("check circular dependency", e) from e
