from __future__ import annotations
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://vault.previder.io"


@dataclass(frozen=True)
class ClientConfig:
    base_url: str | None = None
    token: str | None = None
    timeout_s: float | None = 15.0
    client_version: str | None = None

    @property
    def effective_base_url(self) -> str:
        if self.base_url is None:
            return DEFAULT_BASE_URL
        return self.base_url.strip().rstrip("/")
