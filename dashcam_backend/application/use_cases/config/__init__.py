from .get_config import GetConfigUseCase
from .update_config import UpdateConfigUseCase

__all__ = ["GetConfigUseCase", "UpdateConfigUseCase"]
