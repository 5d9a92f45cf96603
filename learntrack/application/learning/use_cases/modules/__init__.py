from .add_module_use_case import AddModuleUseCase
from .delete_module_use_case import DeleteModuleUseCase
from .get_modules_use_case import GetModulesUseCase
from .reorder_modules_use_case import ReorderModulesUseCase
from .update_module_use_case import UpdateModuleStatusUseCase, UpdateModuleUseCase

__all__ = [
    "AddModuleUseCase",
    "DeleteModuleUseCase",
    "GetModulesUseCase",
    "ReorderModulesUseCase",
    "UpdateModuleStatusUseCase",
    "UpdateModuleUseCase",
]
