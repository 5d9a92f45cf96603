import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from starlette import status

from learntrack.application.learning.protocols import CategoryCount
from learntrack.application.learning.use_cases.reports import (
    MAX_REPORT_LIMIT,
    GetDashboardMetricsUseCase,
)
from learntrack.application.learning.use_cases.reports import ReportItem as ReportItemResult
from learntrack.core import container
from learntrack.domain.common.exceptions import DomainError
from learntrack.domain.learning.value_objects import Status
from learntrack.infrastructure.common.di import inject_use_case
from learntrack.infrastructure.identity.dependencies import CurrentUser
from learntrack.infrastructure.learning.schemas import (
    CategoryCountItem,
    DashboardMetricsResponse,
    ItemsByCategoryResponse,
    ItemsByStatusResponse,
    ReportItem,
    ReportItemsResponse,
    StatusCount,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


def _status_counts(counts: dict[Status, int]) -> list[StatusCount]:
    return [StatusCount(status=str(s), count=count) for s, count in counts.items()]


def _category_counts(counts: list[CategoryCount]) -> list[CategoryCountItem]:
    return [
        CategoryCountItem(
            category_id=c.category_id.value, name=c.name, color=c.color, count=c.count
        )
        for c in counts
    ]


def _report_items(results: list[ReportItemResult]) -> list[ReportItem]:
    return [
        ReportItem(
            id=r.item.id.value,
            title=r.item.title,
            status=str(r.item.status),
            progress=r.item.progress.value,
            due_date=r.item.due_date,
            category_id=r.item.category_id.value,
            category_name=r.category_name,
            updated_at=r.item.updated_at,
        )
        for r in results
    ]


def _fail(action: str, e: Exception) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An unexpected error occurred. Please try again later.",
    )


@router.get("/dashboard", response_model=DashboardMetricsResponse)
def get_dashboard(
    current_user: CurrentUser,
    use_case: GetDashboardMetricsUseCase = Depends(
        inject_use_case(container.get_dashboard_metrics_use_case)
    ),
) -> DashboardMetricsResponse:
    """
    Get the dashboard figures for the current user.

    Includes counts by status and category, average progress, and the
    overdue, due-soon, near-completion and recently updated items.
    """
    try:
        metrics = use_case.get_metrics(current_user.id.value)
        return DashboardMetricsResponse(
            total_items=metrics.total_items,
            status_counts=_status_counts(metrics.status_counts),
            category_counts=_category_counts(metrics.category_counts),
            average_progress=metrics.average_progress.value,
            overdue=_report_items(metrics.overdue),
            due_soon=_report_items(metrics.due_soon),
            near_completion=_report_items(metrics.near_completion),
            recently_updated=_report_items(metrics.recently_updated),
        )
    except DomainError:
        raise
    except Exception as e:
        raise _fail("compute dashboard metrics", e) from e


@router.get("/items-by-status", response_model=ItemsByStatusResponse)
def get_items_by_status(
    current_user: CurrentUser,
    use_case: GetDashboardMetricsUseCase = Depends(
        inject_use_case(container.get_dashboard_metrics_use_case)
    ),
) -> ItemsByStatusResponse:
    """Count the current user's items per status."""
    try:
        counts = use_case.items_by_status(current_user.id.value)
        return ItemsByStatusResponse(items=_status_counts(counts))
    except DomainError:
        raise
    except Exception as e:
        raise _fail("count items by status", e) from e


@router.get("/items-by-category", response_model=ItemsByCategoryResponse)
def get_items_by_category(
    current_user: CurrentUser,
    use_case: GetDashboardMetricsUseCase = Depends(
        inject_use_case(container.get_dashboard_metrics_use_case)
    ),
) -> ItemsByCategoryResponse:
    """Count the current user's items per category."""
    try:
        counts = use_case.items_by_category(current_user.id.value)
        return ItemsByCategoryResponse(items=_category_counts(counts))
    except DomainError:
        raise
    except Exception as e:
        raise _fail("count items by category", e) from e


@router.get("/top-items-to-complete", response_model=ReportItemsResponse)
def get_top_items_to_complete(
    current_user: CurrentUser,
    limit: int = Query(5, ge=1, le=MAX_REPORT_LIMIT, description="Maximum number of items"),
    use_case: GetDashboardMetricsUseCase = Depends(
        inject_use_case(container.get_dashboard_metrics_use_case)
    ),
) -> ReportItemsResponse:
    """Unfinished items closest to completion."""
    try:
        items = use_case.top_items_to_complete(current_user.id.value, limit)
        return ReportItemsResponse(items=_report_items(items))
    except DomainError:
        raise
    except Exception as e:
        raise _fail("list top items to complete", e) from e


@router.get("/recently-updated", response_model=ReportItemsResponse)
def get_recently_updated(
    current_user: CurrentUser,
    limit: int = Query(5, ge=1, le=MAX_REPORT_LIMIT, description="Maximum number of items"),
    use_case: GetDashboardMetricsUseCase = Depends(
        inject_use_case(container.get_dashboard_metrics_use_case)
    ),
) -> ReportItemsResponse:
    """The current user's most recently changed items."""
    try:
        items = use_case.recently_updated(current_user.id.value, limit)
        return ReportItemsResponse(items=_report_items(items))
    except DomainError:
        raise
    except Exception as e:
        raise _fail("list recently updated items", e) from e
