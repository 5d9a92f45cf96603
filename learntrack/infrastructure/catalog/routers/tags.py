import logging

from fastapi import APIRouter, Depends, HTTPException
from starlette import status

from learntrack.application.catalog.use_cases import TagUseCase
from learntrack.core import container
from learntrack.domain.common.exceptions import DomainError
from learntrack.infrastructure.catalog.schemas import Tag, TagCreateRequest, TagsListResponse
from learntrack.infrastructure.common.di import inject_use_case
from learntrack.infrastructure.identity.dependencies import CurrentUser

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/tags", tags=["tags"])


@router.get("", response_model=TagsListResponse)
def list_tags(
    _current_user: CurrentUser,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> TagsListResponse:
    """List all tags by name."""
    try:
        return TagsListResponse(
            tags=[Tag(id=tag.id.value, name=tag.name) for tag in use_case.list_tags()]
        )
    except Exception as e:
        logger.error(f"Failed to list tags: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.post("", response_model=Tag, status_code=status.HTTP_201_CREATED)
def create_tag(
    request: TagCreateRequest,
    _current_user: CurrentUser,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> Tag:
    """
    Create a tag.

    The name is trimmed and lowercased; it may then only contain letters,
    digits and hyphens.
    """
    try:
        tag = use_case.create_tag(request.name)
        return Tag(id=tag.id.value, name=tag.name)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to create tag: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.delete("/{tag_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_tag(
    tag_id: int,
    _current_user: CurrentUser,
    use_case: TagUseCase = Depends(inject_use_case(container.tag_use_case)),
) -> None:
    """Delete a tag and detach it from all items."""
    try:
        use_case.delete_tag(tag_id)
    except DomainError:
        raise
    except Exception as e:
        logger.error(f"Failed to delete tag {tag_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e
