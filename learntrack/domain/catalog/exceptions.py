"""Catalog domain exceptions."""

from learntrack.domain.common.exceptions import BusinessRuleViolationError, EntityNotFoundError


class CategoryNotFoundError(EntityNotFoundError):
    """Raised when a category cannot be found."""

    def __init__(self, category_id: int) -> None:
        super().__init__("Category", category_id)


class TagNotFoundError(EntityNotFoundError):
    """Raised when a tag cannot be found."""

    def __init__(self, tag_id: int) -> None:
        super().__init__("Tag", tag_id)


class CategoryNameTakenError(BusinessRuleViolationError):
    """Raised when another category already uses the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__("unique_category_name", f"Category '{name}' already exists")
        self.details["name"] = name
        self.name = name


class TagNameTakenError(BusinessRuleViolationError):
    """Raised when another tag already uses the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__("unique_tag_name", f"Tag '{name}' already exists")
        self.details["name"] = name
        self.name = name


class CategoryInUseError(BusinessRuleViolationError):
    """Raised when deleting a category that learning items still reference."""

    def __init__(self, category_id: int, item_count: int) -> None:
        super().__init__(
            "category_in_use",
            f"Category {category_id} is used by {item_count} learning item(s)",
        )
        self.details["category_id"] = category_id
        self.details["item_count"] = item_count
