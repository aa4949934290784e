from .client import VaultClient
from .config_types import DEFAULT_BASE_URL, ClientConfig
from .errors import (
    ApiError,
    AuthError,
    ConfigurationError,
    DecodeError,
    NetworkError,
    NotFoundError,
    SerializationError,
    VaultClientError,
)

__all__ = [
    "VaultClient",
    "ClientConfig",
    "DEFAULT_BASE_URL",
    "VaultClientError",
    "ApiError",
    "AuthError",
    "NotFoundError",
    "NetworkError",
    "ConfigurationError",
    "SerializationError",
    "DecodeError",
]
