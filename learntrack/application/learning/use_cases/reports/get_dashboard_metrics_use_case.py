"""Use case for the dashboard reports of a user's learning items."""

from dataclasses import dataclass
from datetime import UTC, date, datetime

import structlog

from learntrack.application.catalog.protocols import CategoryRepositoryProtocol
from learntrack.application.learning.protocols import (
    CategoryCount,
    LearningItemRepositoryProtocol,
)
from learntrack.config import get_settings
from learntrack.domain.common.exceptions import ValidationError
from learntrack.domain.common.value_objects import UserId
from learntrack.domain.learning.entities import LearningItem
from learntrack.domain.learning.value_objects import Progress, Status

logger = structlog.get_logger(__name__)

NEAR_COMPLETION_THRESHOLD = 80.0
DASHBOARD_LIST_LIMIT = 5
MAX_REPORT_LIMIT = 50


@dataclass
class ReportItem:
    """An item as listed in a report, with its category name resolved."""

    item: LearningItem
    category_name: str


@dataclass
class DashboardMetrics:
    total_items: int
    status_counts: dict[Status, int]
    category_counts: list[CategoryCount]
    average_progress: Progress
    overdue: list[ReportItem]
    due_soon: list[ReportItem]
    near_completion: list[ReportItem]
    recently_updated: list[ReportItem]


def _check_limit(limit: int) -> None:
    if not 1 <= limit <= MAX_REPORT_LIMIT:
        raise ValidationError(
            f"Limit must be between 1 and {MAX_REPORT_LIMIT}", field="limit", value=limit
        )


class GetDashboardMetricsUseCase:
    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        category_repository: CategoryRepositoryProtocol,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.category_repository = category_repository

        settings = get_settings()
        self.due_soon_days = settings.DUE_SOON_DAYS

    def _with_category_names(self, items: list[LearningItem]) -> list[ReportItem]:
        names = {category.id: category.name for category in self.category_repository.find_all()}
        return [
            ReportItem(item=item, category_name=names.get(item.category_id, "")) for item in items
        ]

    def get_metrics(self, user_id: int, today: date | None = None) -> DashboardMetrics:
        """
        Collect every dashboard figure for a user.

        Completed items never count as overdue, due soon or near completion.
        The due-soon window comes from the DUE_SOON_DAYS setting.

        Args:
            user_id: ID of the owner
            today: Reference date, defaults to the current UTC date

        Returns:
            Counts by status and category, average progress and the item lists
        """
        owner = UserId(user_id)
        today = today or datetime.now(UTC).date()
        repository = self.learning_item_repository

        metrics = DashboardMetrics(
            total_items=repository.count_for_user(owner),
            status_counts=self.items_by_status(user_id),
            category_counts=repository.count_by_category_for_user(owner),
            average_progress=repository.average_progress(owner),
            overdue=self._with_category_names(repository.find_overdue(owner, today)),
            due_soon=self._with_category_names(
                repository.find_due_soon(owner, self.due_soon_days, today)
            ),
            near_completion=self._with_category_names(
                repository.find_near_completion(
                    owner, NEAR_COMPLETION_THRESHOLD, DASHBOARD_LIST_LIMIT
                )
            ),
            recently_updated=self._with_category_names(
                repository.find_recently_updated(owner, DASHBOARD_LIST_LIMIT)
            ),
        )

        logger.debug(
            "dashboard_metrics_computed",
            user_id=user_id,
            total_items=metrics.total_items,
            overdue=len(metrics.overdue),
        )
        return metrics

    def items_by_status(self, user_id: int) -> dict[Status, int]:
        """Item counts for every status, in workflow order, zero where empty."""
        counts = self.learning_item_repository.count_by_status(UserId(user_id))
        return {status: counts.get(status, 0) for status in Status}

    def items_by_category(self, user_id: int) -> list[CategoryCount]:
        return self.learning_item_repository.count_by_category_for_user(UserId(user_id))

    def top_items_to_complete(
        self, user_id: int, limit: int = DASHBOARD_LIST_LIMIT
    ) -> list[ReportItem]:
        """
        Unfinished items with the most progress first.

        Raises:
            ValidationError: If limit is outside 1..MAX_REPORT_LIMIT
        """
        _check_limit(limit)
        items = self.learning_item_repository.find_near_completion(UserId(user_id), 0.0, limit)
        return self._with_category_names(items)

    def recently_updated(
        self, user_id: int, limit: int = DASHBOARD_LIST_LIMIT
    ) -> list[ReportItem]:
        """
        The user's items, most recently changed first.

        Raises:
            ValidationError: If limit is outside 1..MAX_REPORT_LIMIT
        """
        _check_limit(limit)
        items = self.learning_item_repository.find_recently_updated(UserId(user_id), limit)
        return self._with_category_names(items)
