"""Learning module domain exceptions."""

from learntrack.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError

SELF_DEPENDENCY_MESSAGE = "An item cannot depend on itself"
CIRCULAR_DEPENDENCY_MESSAGE = (
    "Creating this dependency would create a circular reference in the dependency chain"
)


class LearningItemNotFoundError(EntityNotFoundError):
    """Raised when a learning item cannot be found for the requesting user."""

    def __init__(self, item_id: int) -> None:
        super().__init__("Learning item", item_id)


class LearningModuleNotFoundError(EntityNotFoundError):
    """Raised when a module cannot be found."""

    def __init__(self, module_id: int) -> None:
        super().__init__("Module", module_id)


class DependencyNotFoundError(EntityNotFoundError):
    """Raised when a dependency cannot be found."""

    def __init__(self, dependency_id: int) -> None:
        super().__init__("Dependency", dependency_id)


class SelfDependencyError(BusinessRuleViolationError):
    """Raised when an item is proposed as its own prerequisite."""

    def __init__(self, item_id: int) -> None:
        super().__init__("no_self_dependency", SELF_DEPENDENCY_MESSAGE)
        self.details["item_id"] = item_id
        self.item_id = item_id


class CircularDependencyError(BusinessRuleViolationError):
    """Raised when a proposed edge would close a loop in the prerequisite graph."""

    def __init__(self, source_item_id: int, target_item_id: int) -> None:
        super().__init__("acyclic_dependencies", CIRCULAR_DEPENDENCY_MESSAGE)
        self.details["source_item_id"] = source_item_id
        self.details["target_item_id"] = target_item_id
        self.source_item_id = source_item_id
        self.target_item_id = target_item_id


class DuplicateDependencyError(BusinessRuleViolationError):
    """Raised when the exact (source, target) edge already exists."""

    def __init__(self, source_item_id: int, target_item_id: int) -> None:
        super().__init__(
            "unique_dependency",
            f"Dependency from item {source_item_id} to item {target_item_id} already exists",
        )
        self.details["source_item_id"] = source_item_id
        self.details["target_item_id"] = target_item_id
        self.source_item_id = source_item_id
        self.target_item_id = target_item_id


class CompletedItemModulesError(BusinessRuleViolationError):
    """Raised when a module is added to an item that is already Concluido."""

    def __init__(self, item_id: int) -> None:
        super().__init__(
            "completed_item_is_closed", "Cannot add modules to a completed learning item"
        )
        self.details["learning_item_id"] = item_id
        self.item_id = item_id
