from .register_media import RegisterMediaUseCase
from .get_media_status import GetMediaStatusUseCase

__all__ = ["RegisterMediaUseCase", "GetMediaStatusUseCase"]
