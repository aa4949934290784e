from __future__ import annotations


class VaultClientError(Exception):
    """Base client error."""


class ConfigurationError(VaultClientError):
    """Client is not set up (empty base URL, closed transport)."""


class SerializationError(VaultClientError):
    """Request payload could not be encoded as JSON."""


class NetworkError(VaultClientError):
    """Transport/network layer error."""


class DecodeError(VaultClientError):
    """Response body could not be decoded into the requested type."""


class ApiError(VaultClientError):
    def __init__(self, status_code: int, message: str, details: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class AuthError(ApiError):
    """Auth-related API error."""


class NotFoundError(ApiError):
    """Requested resource does not exist."""
