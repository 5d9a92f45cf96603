from .create_learning_item_use_case import CreateLearningItemUseCase
from .delete_learning_item_use_case import DeleteLearningItemUseCase
from .get_learning_items_use_case import (
    MAX_PAGE_SIZE,
    GetLearningItemsUseCase,
    LearningItemDetails,
    LearningItemPage,
)
from .recalculate_progress_use_case import RecalculateProgressUseCase
from .update_learning_item_status_use_case import UpdateLearningItemStatusUseCase
from .update_learning_item_use_case import UpdateLearningItemUseCase

__all__ = [
    "CreateLearningItemUseCase",
    "DeleteLearningItemUseCase",
    "GetLearningItemsUseCase",
    "LearningItemDetails",
    "LearningItemPage",
    "MAX_PAGE_SIZE",
    "RecalculateProgressUseCase",
    "UpdateLearningItemStatusUseCase",
    "UpdateLearningItemUseCase",
]
