from .check_circular_dependency_use_case import CheckCircularDependencyUseCase
from .link_dependency_use_case import LinkDependencyUseCase
from .list_dependencies_use_case import (
    DependencyFilter,
    ItemDependencies,
    ListDependenciesUseCase,
    RelatedDependency,
)
from .unlink_dependency_use_case import UnlinkDependencyUseCase

__all__ = [
    "CheckCircularDependencyUseCase",
    "DependencyFilter",
    "ItemDependencies",
    "LinkDependencyUseCase",
    "ListDependenciesUseCase",
    "RelatedDependency",
    "UnlinkDependencyUseCase",
]
