"""Value objects for the learning module."""

from .module_status import MODULE_TRANSITIONS, ModuleStatus, ModuleStatusVO
from .progress import Progress
from .status import ITEM_TRANSITIONS, Status, StatusVO

__all__ = [
    "ITEM_TRANSITIONS",
    "MODULE_TRANSITIONS",
    "ModuleStatus",
    "ModuleStatusVO",
    "Progress",
    "Status",
    "StatusVO",
]
