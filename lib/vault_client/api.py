from __future__ import annotations

from typing import Protocol, runtime_checkable

from .models import (
    Environment,
    EnvironmentCreate,
    EnvironmentCreateResponse,
    Secret,
    SecretCreate,
    SecretDecrypt,
    Token,
    TokenCreate,
    TokenCreateResponse,
    Version,
)


@runtime_checkable
class VaultApi(Protocol):
    """Operations offered by the vault API.

    ``VaultClient`` implements this; code that only needs the operations
    (the CLI, tests) should depend on this protocol instead.
    """

    def get_version(self) -> Version | None: ...

    def get_environments(self) -> list[Environment]: ...

    def get_environment(self, environment_id: str) -> Environment | None: ...

    def create_environment(self, create: EnvironmentCreate) -> EnvironmentCreateResponse | None: ...

    def delete_environment(self, environment_id: str) -> None: ...

    def get_tokens(self) -> list[Token]: ...

    def get_token(self, token_id: str) -> Token | None: ...

    def create_token(self, create: TokenCreate) -> TokenCreateResponse | None: ...

    def delete_token(self, token_id: str) -> None: ...

    def get_secrets(self) -> list[Secret]: ...

    def get_secret(self, secret_id: str) -> Secret | None: ...

    def create_secret(self, create: SecretCreate) -> Secret | None: ...

    def decrypt_secret(self, secret_id: str) -> SecretDecrypt | None: ...

    def delete_secret(self, secret_id: str) -> None: ...

    def close(self) -> None: ...
