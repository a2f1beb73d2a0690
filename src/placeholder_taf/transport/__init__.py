from .config import ClientConfig
from .transport import ApiTransport

__all__ = ["ClientConfig", "ApiTransport"]
