from .category_repository import CategoryRepositoryProtocol
from .tag_repository import TagRepositoryProtocol

__all__ = ["CategoryRepositoryProtocol", "TagRepositoryProtocol"]
