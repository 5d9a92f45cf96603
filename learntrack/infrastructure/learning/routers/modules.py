import logging
from typing import Annotated, Literal

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from learntrack.application.learning.use_cases.modules import (
    AddModuleUseCase,
    DeleteModuleUseCase,
    GetModulesUseCase,
    ReorderModulesUseCase,
    UpdateModuleStatusUseCase,
    UpdateModuleUseCase,
)
from learntrack.core import container
from learntrack.domain.common.exceptions import DomainError
from learntrack.infrastructure.common.di import inject_use_case
from learntrack.infrastructure.identity.dependencies import CurrentUser
from learntrack.infrastructure.learning.routers.learning_items import to_module_schema
from learntrack.infrastructure.learning.schemas import (
    Module,
    ModuleCreateRequest,
    ModuleReorderRequest,
    ModulesListResponse,
    ModuleStatusUpdateRequest,
    ModuleUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["modules"])


def _fail(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/items/{item_id}/modules", response_model=ModulesListResponse)
def list_modules(
    item_id: int,
    current_user: CurrentUser,
    status_filter: Annotated[str | None, Query(alias="status")] = None,
    order_by: Literal["order", "created_at", "title"] = "order",
    order: Literal["asc", "desc"] = "asc",
    use_case: GetModulesUseCase = Depends(inject_use_case(container.get_modules_use_case)),
) -> ModulesListResponse:
    """List an item's modules, by position unless another sort is requested."""
    try:
        modules = use_case.list_modules(
            current_user.id.value,
            item_id,
            status=status_filter,
            order_by=order_by,
            order=order,
        )
        return ModulesListResponse(modules=[to_module_schema(module) for module in modules])
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"list modules of learning item {item_id}", e) from e


@router.post(
    "/items/{item_id}/modules",
    response_model=Module,
    status_code=status.HTTP_201_CREATED,
)
def add_module(
    item_id: int,
    request: ModuleCreateRequest,
    current_user: CurrentUser,
    use_case: AddModuleUseCase = Depends(inject_use_case(container.add_module_use_case)),
) -> Module:
    """Add a Pendente module; the item's progress is recomputed."""
    try:
        module = use_case.add_module(
            current_user.id.value, item_id, request.title, order=request.order
        )
        return to_module_schema(module)
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"add module to learning item {item_id}", e) from e


@router.put("/items/{item_id}/modules/order", response_model=ModulesListResponse)
def reorder_modules(
    item_id: int,
    request: ModuleReorderRequest,
    current_user: CurrentUser,
    use_case: ReorderModulesUseCase = Depends(
        inject_use_case(container.reorder_modules_use_case)
    ),
) -> ModulesListResponse:
    """
    Assign new positions to an item's modules.

    All ids are checked first; if any does not belong to the item nothing
    is changed.
    """
    try:
        modules = use_case.reorder(
            current_user.id.value,
            item_id,
            [(entry.module_id, entry.order) for entry in request.orders],
        )
        return ModulesListResponse(modules=[to_module_schema(module) for module in modules])
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"reorder modules of learning item {item_id}", e) from e


@router.patch("/modules/{module_id}", response_model=Module)
def update_module(
    module_id: int,
    request: ModuleUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateModuleUseCase = Depends(inject_use_case(container.update_module_use_case)),
) -> Module:
    """Rename or move a module."""
    try:
        module = use_case.update_module(
            current_user.id.value, module_id, title=request.title, order=request.order
        )
        return to_module_schema(module)
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"update module {module_id}", e) from e


@router.patch("/modules/{module_id}/status", response_model=Module)
def update_module_status(
    module_id: int,
    request: ModuleStatusUpdateRequest,
    current_user: CurrentUser,
    use_case: UpdateModuleStatusUseCase = Depends(
        inject_use_case(container.update_module_status_use_case)
    ),
) -> Module:
    """Move a module to another status; the item's progress is recomputed."""
    try:
        module = use_case.update_status(current_user.id.value, module_id, request.status)
        return to_module_schema(module)
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"update status of module {module_id}", e) from e


@router.delete("/modules/{module_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_module(
    module_id: int,
    current_user: CurrentUser,
    use_case: DeleteModuleUseCase = Depends(inject_use_case(container.delete_module_use_case)),
) -> None:
    """Delete a module; the item's progress is recomputed."""
    try:
        use_case.delete_module(current_user.id.value, module_id)
    except DomainError:
        raise
    except Exception as e:
        raise _fail(f"delete module {module_id}", e) from e
