from .category import Category
from .tag import Tag, normalize_tag_name

__all__ = ["Category", "Tag", "normalize_tag_name"]
