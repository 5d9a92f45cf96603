"""Learning context schemas."""

from learntrack.infrastructure.learning.schemas.dependency_schemas import (
    CircularCheckRequest,
    CircularCheckResponse,
    DependenciesCreateResponse,
    DependenciesListResponse,
    Dependency,
    DependencyCreateRequest,
    DependencyWithItem,
    RelatedItem,
)
from learntrack.infrastructure.learning.schemas.learning_item_schemas import (
    LearningItem,
    LearningItemCreateRequest,
    LearningItemDetail,
    LearningItemsListResponse,
    LearningItemStatusUpdateRequest,
    LearningItemUpdateRequest,
    ProgressResponse,
    TagSummary,
)
from learntrack.infrastructure.learning.schemas.module_schemas import (
    Module,
    ModuleCreateRequest,
    ModuleOrderEntry,
    ModuleReorderRequest,
    ModulesListResponse,
    ModuleStatusUpdateRequest,
    ModuleUpdateRequest,
)
from learntrack.infrastructure.learning.schemas.report_schemas import (
    CategoryCountItem,
    DashboardMetricsResponse,
    ItemsByCategoryResponse,
    ItemsByStatusResponse,
    ReportItem,
    ReportItemsResponse,
    StatusCount,
)

__all__ = [
    "CategoryCountItem",
    "CircularCheckRequest",
    "CircularCheckResponse",
    "DashboardMetricsResponse",
    "DependenciesCreateResponse",
    "DependenciesListResponse",
    "Dependency",
    "DependencyCreateRequest",
    "DependencyWithItem",
    "ItemsByCategoryResponse",
    "ItemsByStatusResponse",
    "LearningItem",
    "LearningItemCreateRequest",
    "LearningItemDetail",
    "LearningItemStatusUpdateRequest",
    "LearningItemUpdateRequest",
    "LearningItemsListResponse",
    "Module",
    "ModuleCreateRequest",
    "ModuleOrderEntry",
    "ModuleReorderRequest",
    "ModuleStatusUpdateRequest",
    "ModuleUpdateRequest",
    "ModulesListResponse",
    "ProgressResponse",
    "RelatedItem",
    "ReportItem",
    "ReportItemsResponse",
    "StatusCount",
    "TagSummary",
]
