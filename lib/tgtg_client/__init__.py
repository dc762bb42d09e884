from .auth_context import AuthContext, AuthSnapshot
from .client import TgtgClient
from .config_types import ClientConfig
from .errors import ApiError, ArgumentError, AuthError, ConfigurationError, DecodeError, ErrorEntry, TgtgClientError
from .models import WireModel

__all__ = [
    "TgtgClient",
    "ClientConfig",
    "AuthContext",
    "AuthSnapshot",
    "TgtgClientError",
    "ApiError",
    "AuthError",
    "ArgumentError",
    "ConfigurationError",
    "DecodeError",
    "ErrorEntry",
    "WireModel",
]
