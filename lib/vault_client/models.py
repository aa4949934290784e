from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    return "" if value is None else str(value)


def _opt_str(data: dict[str, Any], key: str) -> str | None:
    value = data.get(key)
    return None if value is None else str(value)


def _prune_none(data: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in data.items() if v is not None}


def _require_dict(data: Any, name: str) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise TypeError(f"{name} must be a JSON object, got {type(data).__name__}")
    return data


def list_of(factory: Callable[[Any], T]) -> Callable[[Any], list[T]]:
    """Decoder for a JSON array of objects handled by ``factory``."""

    def _decode(data: Any) -> list[T]:
        if not isinstance(data, list):
            raise TypeError(f"expected a JSON array, got {type(data).__name__}")
        return [factory(item) for item in data]

    return _decode


@dataclass
class Version:
    version: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> Version:
        data = _require_dict(data, "version")
        return cls(version=_str(data, "version"))

    def to_dict(self) -> dict[str, Any]:
        return {"version": self.version}


@dataclass
class Environment:
    id: str = ""
    name: str = ""
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Environment:
        data = _require_dict(data, "environment")
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            description=_opt_str(data, "description"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _prune_none({"id": self.id, "name": self.name, "description": self.description})


@dataclass
class EnvironmentCreate:
    name: str
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune_none({"name": self.name, "description": self.description})


@dataclass
class EnvironmentCreateResponse:
    id: str = ""
    name: str = ""
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> EnvironmentCreateResponse:
        data = _require_dict(data, "environment")
        return cls(
            id=_str(data, "id"),
            name=_str(data, "name"),
            description=_opt_str(data, "description"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _prune_none({"id": self.id, "name": self.name, "description": self.description})


@dataclass
class Token:
    id: str = ""
    description: str = ""
    environment: str | None = None
    expires_at: str | None = None
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Token:
        data = _require_dict(data, "token")
        return cls(
            id=_str(data, "id"),
            description=_str(data, "description"),
            environment=_opt_str(data, "environment"),
            expires_at=_opt_str(data, "expiresAt"),
            created_at=_opt_str(data, "createdAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _prune_none(
            {
                "id": self.id,
                "description": self.description,
                "environment": self.environment,
                "expiresAt": self.expires_at,
                "createdAt": self.created_at,
            }
        )


@dataclass
class TokenCreate:
    description: str
    environment: str | None = None
    expires_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune_none(
            {
                "description": self.description,
                "environment": self.environment,
                "expiresAt": self.expires_at,
            }
        )


@dataclass
class TokenCreateResponse:
    id: str = ""
    token: str = ""
    description: str = ""
    environment: str | None = None
    expires_at: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> TokenCreateResponse:
        data = _require_dict(data, "token")
        return cls(
            id=_str(data, "id"),
            token=_str(data, "token"),
            description=_str(data, "description"),
            environment=_opt_str(data, "environment"),
            expires_at=_opt_str(data, "expiresAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _prune_none(
            {
                "id": self.id,
                "token": self.token,
                "description": self.description,
                "environment": self.environment,
                "expiresAt": self.expires_at,
            }
        )


@dataclass
class Secret:
    id: str = ""
    description: str = ""
    environment: str | None = None
    created_at: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> Secret:
        data = _require_dict(data, "secret")
        return cls(
            id=_str(data, "id"),
            description=_str(data, "description"),
            environment=_opt_str(data, "environment"),
            created_at=_opt_str(data, "createdAt"),
        )

    def to_dict(self) -> dict[str, Any]:
        return _prune_none(
            {
                "id": self.id,
                "description": self.description,
                "environment": self.environment,
                "createdAt": self.created_at,
            }
        )


@dataclass
class SecretCreate:
    description: str
    secret: str
    environment: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return _prune_none(
            {
                "description": self.description,
                "secret": self.secret,
                "environment": self.environment,
            }
        )


@dataclass
class SecretDecrypt:
    id: str = ""
    secret: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> SecretDecrypt:
        data = _require_dict(data, "secret")
        return cls(id=_str(data, "id"), secret=_str(data, "secret"))

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "secret": self.secret}
