from .dependency import Dependency
from .learning_item import LearningItem
from .module import Module

__all__ = ["Dependency", "LearningItem", "Module"]
