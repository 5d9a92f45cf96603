"""Refreshes an item's cached progress from the state of its modules."""

from dataclasses import dataclass

import structlog

from learntrack.application.learning.protocols import (
    LearningItemRepositoryProtocol,
    ModuleRepositoryProtocol,
)
from learntrack.domain.learning.entities import LearningItem
from learntrack.domain.learning.value_objects import Progress

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ProgressSummary:
    progress: Progress
    completed_modules: int
    total_modules: int


class ProgressService:
    """
    Recomputes and persists cached progress.

    Called after any module is added, removed or changes status, and after
    the item's own status changes.
    """

    def __init__(
        self,
        learning_item_repository: LearningItemRepositoryProtocol,
        module_repository: ModuleRepositoryProtocol,
    ) -> None:
        self.learning_item_repository = learning_item_repository
        self.module_repository = module_repository

    def refresh(self, item: LearningItem) -> ProgressSummary:
        """
        Count the item's modules, update its cached progress and persist it.

        Raises:
            InvariantViolationError: If the counts are inconsistent
        """
        total = self.module_repository.count(item.id)
        completed = self.module_repository.count_completed(item.id)

        previous = item.progress
        progress = item.refresh_progress(completed, total)
        self.learning_item_repository.update_progress(item.id, progress)

        if progress != previous:
            logger.info(
                "progress_recalculated",
                learning_item_id=item.id.value,
                previous=previous.value,
                progress=progress.value,
                completed_modules=completed,
                total_modules=total,
            )
        return ProgressSummary(
            progress=progress, completed_modules=completed, total_modules=total
        )
