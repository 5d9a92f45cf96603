import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from learntrack.application.catalog.use_cases import CategoryUseCase
from learntrack.core import container
from learntrack.domain.catalog.entities import Category as CategoryEntity
from learntrack.domain.common.exceptions import DomainError
from learntrack.infrastructure.catalog.schemas import (
    CategoriesListResponse,
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
)
from learntrack.infrastructure.common.di import inject_use_case
from learntrack.infrastructure.identity.dependencies import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])


def _to_schema(category: CategoryEntity) -> Category:
    return Category(id=category.id.value, name=category.name, color=category.color)


@router.get("", response_model=CategoriesListResponse)
def list_categories(
    _current_user: CurrentUser,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> CategoriesListResponse:
    """List all categories by name."""
    try:
        return CategoriesListResponse(
            categories=[_to_schema(category) for category in use_case.list_categories()]
        )
    except Exception as e:
        logger.error(f"Failed to list categories: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(
    request: CategoryCreateRequest,
    _current_user: CurrentUser,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> Category:
    """Create a category; 409 if the name is taken."""
    try:
        return _to_schema(use_case.create_category(request.name, request.color))
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to create category: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.patch("/{category_id}", response_model=Category)
def update_category(
    category_id: int,
    request: CategoryUpdateRequest,
    _current_user: CurrentUser,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> Category:
    """Rename and/or recolor a category."""
    try:
        category = use_case.update_category(category_id, name=request.name, color=request.color)
        return _to_schema(category)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to update category {category_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    _current_user: CurrentUser,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> None:
    """Delete a category that no learning item uses."""
    try:
        use_case.delete_category(category_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete category {category_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
