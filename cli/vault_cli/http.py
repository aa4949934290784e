from __future__ import annotations

from typing import NoReturn

import typer
from vault_client import (
    AuthError,
    ClientConfig,
    ConfigurationError,
    NetworkError,
    NotFoundError,
    VaultClient,
    VaultClientError,
)

from . import __version__, console
from .config import AppConfig, normalize_base_url
from .logging_ import is_verbose


def make_client(
    cfg: AppConfig,
    *,
    base_url_override: str | None,
    verbose: bool | None = None,
) -> VaultClient:
    base_url = normalize_base_url(base_url_override or cfg.base_url, warn=True)
    token = cfg.auth.token or None
    if not token:
        console.warn("No API token configured. Run 'vault config set --token' or set VAULT_TOKEN.")
    try:
        return VaultClient(
            ClientConfig(base_url=base_url, token=token, client_version=__version__),
            verbose=is_verbose() if verbose is None else verbose,
        )
    except ConfigurationError as e:
        console.err(str(e))
        raise typer.Exit(code=2)


def fail(action: str, e: VaultClientError) -> NoReturn:
    if isinstance(e, AuthError):
        console.err("Unauthorized. Check your API token.")
    elif isinstance(e, NotFoundError):
        console.err(f"{action}: not found.")
    elif isinstance(e, NetworkError):
        console.err(f"Vault API request failed: {e}")
    else:
        console.err(f"{action}: {e}")
    raise typer.Exit(code=2)
