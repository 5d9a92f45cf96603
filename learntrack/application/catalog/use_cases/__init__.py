from .category_use_case import CategoryUseCase
from .tag_use_case import TagUseCase

__all__ = ["CategoryUseCase", "TagUseCase"]
