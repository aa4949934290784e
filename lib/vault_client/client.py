from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from .config_types import ClientConfig
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
    list_of,
)
from .transport import Transport

logger = logging.getLogger(__name__)


def _seg(value: str) -> str:
    return quote(str(value), safe="")


class VaultClient:
    def __init__(
            self,
            cfg: ClientConfig,
            *,
            verbose: bool = False,
            transport: httpx.BaseTransport | None = None,
    ):
        self._t = Transport(cfg, verbose=verbose, transport=transport)
        self.validate_connection()

    @classmethod
    def from_token(cls, token: str, base_url: str | None = None, **kwargs) -> VaultClient:
        return cls(ClientConfig(base_url=base_url, token=token), **kwargs)

    @property
    def base_url(self) -> str:
        return self._t.base_url

    @property
    def verbose(self) -> bool:
        return self._t.verbose

    def set_verbose(self, verbose: bool) -> None:
        self._t.verbose = verbose

    def validate_connection(self) -> None:
        if self.verbose:
            logger.info("Setup new Vault client to %s", self.base_url)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> VaultClient:
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def get_version(self) -> Version | None:
        return self._t.request("GET", "/version", decode=Version.from_dict)

    # --- environments ---
    def get_environments(self) -> list[Environment]:
        return self._t.request("GET", "/environments", decode=list_of(Environment.from_dict)) or []

    def get_environment(self, environment_id: str) -> Environment | None:
        return self._t.request("GET", f"/environments/{_seg(environment_id)}", decode=Environment.from_dict)

    def create_environment(self, create: EnvironmentCreate) -> EnvironmentCreateResponse | None:
        return self._t.request(
            "POST", "/environments", json_body=create, decode=EnvironmentCreateResponse.from_dict
        )

    def delete_environment(self, environment_id: str) -> None:
        self._t.request("DELETE", f"/environments/{_seg(environment_id)}")

    # --- tokens ---
    def get_tokens(self) -> list[Token]:
        return self._t.request("GET", "/tokens", decode=list_of(Token.from_dict)) or []

    def get_token(self, token_id: str) -> Token | None:
        return self._t.request("GET", f"/tokens/{_seg(token_id)}", decode=Token.from_dict)

    def create_token(self, create: TokenCreate) -> TokenCreateResponse | None:
        return self._t.request("POST", "/tokens", json_body=create, decode=TokenCreateResponse.from_dict)

    def delete_token(self, token_id: str) -> None:
        self._t.request("DELETE", f"/tokens/{_seg(token_id)}")

    # --- secrets ---
    def get_secrets(self) -> list[Secret]:
        return self._t.request("GET", "/secrets", decode=list_of(Secret.from_dict)) or []

    def get_secret(self, secret_id: str) -> Secret | None:
        return self._t.request("GET", f"/secrets/{_seg(secret_id)}", decode=Secret.from_dict)

    def create_secret(self, create: SecretCreate) -> Secret | None:
        return self._t.request("POST", "/secrets", json_body=create, decode=Secret.from_dict)

    def decrypt_secret(self, secret_id: str) -> SecretDecrypt | None:
        return self._t.request("GET", f"/secrets/{_seg(secret_id)}/decrypt", decode=SecretDecrypt.from_dict)

    def delete_secret(self, secret_id: str) -> None:
        self._t.request("DELETE", f"/secrets/{_seg(secret_id)}")
