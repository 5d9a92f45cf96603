from .get_user_by_id_use_case import GetUserByIdUseCase

__all__ = ["GetUserByIdUseCase"]
