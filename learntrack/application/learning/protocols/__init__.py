from .dependency_repository import (
    DependencyKind,
    DependencyRepositoryProtocol,
)
from .learning_item_repository import (
    CategoryCount,
    LearningItemFilters,
    LearningItemOrderBy,
    LearningItemRepositoryProtocol,
)
from .module_repository import (
    ModuleOrder,
    ModuleOrderBy,
    ModuleRepositoryProtocol,
    SortDirection,
)

__all__ = [
    "CategoryCount",
    "DependencyKind",
    "DependencyRepositoryProtocol",
    "LearningItemFilters",
    "LearningItemOrderBy",
    "LearningItemRepositoryProtocol",
    "ModuleOrder",
    "ModuleOrderBy",
    "ModuleRepositoryProtocol",
    "SortDirection",
]
