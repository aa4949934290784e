from __future__ import annotations

import os
import sys
import tomllib
from dataclasses import dataclass
from typing import Any

import tomli_w
from platformdirs import user_config_dir
from vault_client import DEFAULT_BASE_URL

from . import console

APP_NAME = "vault-cli"
CONFIG_FILENAME = "config.toml"
ENV_BASE_URL = "VAULT_BASE_URL"
ENV_TOKEN = "VAULT_TOKEN"

_WARNED_BASE_URL_SCHEME = False


@dataclass
class AuthConfig:
    token: str = ""


@dataclass
class AppConfig:
    base_url: str
    auth: AuthConfig


def config_path() -> str:
    return f"{user_config_dir(APP_NAME)}/{CONFIG_FILENAME}"


def default_config() -> AppConfig:
    return AppConfig(base_url=DEFAULT_BASE_URL, auth=AuthConfig(token=""))


def normalize_base_url(raw: str | None, *, warn: bool = False) -> str:
    value = (raw or "").strip()
    if not value:
        return ""
    value = value.rstrip("/")
    lowered = value.lower()
    if lowered.startswith("http://") or lowered.startswith("https://"):
        return value

    host = value.split("/", 1)[0]
    host = host.split(":", 1)[0].lower()
    if host in {"localhost", "127.0.0.1", "0.0.0.0"}:
        scheme = "http://"
    else:
        scheme = "https://"

    normalized = f"{scheme}{value}"
    if warn:
        _warn_missing_scheme(normalized)
    return normalized


def _warn_missing_scheme(normalized: str) -> None:
    global _WARNED_BASE_URL_SCHEME
    if _WARNED_BASE_URL_SCHEME:
        return
    if not (sys.stderr.isatty() or sys.stdout.isatty()):
        return
    console.warn(f"base_url missing scheme, assuming {normalized}")
    _WARNED_BASE_URL_SCHEME = True


def to_toml(cfg: AppConfig) -> dict[str, Any]:
    data: dict[str, Any] = {"base_url": cfg.base_url}
    if cfg.auth.token:
        data["auth"] = {"token": cfg.auth.token}
    return data


def from_toml(data: dict[str, Any]) -> AppConfig:
    cfg = default_config()
    base_url = normalize_base_url(str(data.get("base_url") or ""), warn=True)
    if base_url:
        cfg.base_url = base_url
    auth_raw = data.get("auth") or {}
    if isinstance(auth_raw, dict):
        cfg.auth.token = str(auth_raw.get("token") or "")
    return cfg


def load_config() -> AppConfig:
    """Load the config file, then apply VAULT_BASE_URL / VAULT_TOKEN on top."""
    path = config_path()
    try:
        with open(path, "rb") as f:
            cfg = from_toml(tomllib.load(f))
    except FileNotFoundError:
        cfg = default_config()

    env_base_url = os.getenv(ENV_BASE_URL, "").strip()
    if env_base_url:
        cfg.base_url = normalize_base_url(env_base_url, warn=True)
    env_token = os.getenv(ENV_TOKEN, "").strip()
    if env_token:
        cfg.auth.token = env_token
    return cfg


def load_file_config() -> AppConfig:
    path = config_path()
    try:
        with open(path, "rb") as f:
            return from_toml(tomllib.load(f))
    except FileNotFoundError:
        return default_config()


def save_config(cfg: AppConfig) -> str:
    path = config_path()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "wb") as f:
        f.write(tomli_w.dumps(to_toml(cfg)).encode("utf-8"))
    os.chmod(path, 0o600)
    return path
