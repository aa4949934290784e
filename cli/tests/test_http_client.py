from __future__ import annotations

import pytest
import typer
from vault_client import ApiError, AuthError, ConfigurationError, NetworkError, NotFoundError

from vault_cli import config, http


def test_make_client_passes_config(monkeypatch) -> None:
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg, *, verbose):
            captured["base_url"] = client_cfg.base_url
            captured["token"] = client_cfg.token
            captured["verbose"] = verbose

    monkeypatch.setattr("vault_cli.http.VaultClient", _FakeClient)
    cfg = config.AppConfig(base_url="https://vault.test", auth=config.AuthConfig(token="api-key"))

    http.make_client(cfg, base_url_override=None, verbose=True)

    assert captured == {"base_url": "https://vault.test", "token": "api-key", "verbose": True}


def test_make_client_normalizes_base_url_override(monkeypatch) -> None:
    captured = {}

    class _FakeClient:
        def __init__(self, client_cfg, *, verbose):
            captured["base_url"] = client_cfg.base_url

    monkeypatch.setattr("vault_cli.http.VaultClient", _FakeClient)

    http.make_client(config.default_config(), base_url_override="vault.example.com/")

    assert captured["base_url"] == "https://vault.example.com"


def test_make_client_configuration_error_exits(monkeypatch, capsys) -> None:
    class _FakeClient:
        def __init__(self, client_cfg, *, verbose):
            raise ConfigurationError("Vault client not set up: base_url is empty")

    monkeypatch.setattr("vault_cli.http.VaultClient", _FakeClient)

    with pytest.raises(typer.Exit) as exc:
        http.make_client(config.default_config(), base_url_override=None)

    assert exc.value.exit_code == 2
    assert "base_url is empty" in capsys.readouterr().out


@pytest.mark.parametrize(
    "error, expected",
    [
        (AuthError(401, "Unauthorized"), "Unauthorized. Check your API token."),
        (NotFoundError(404, "missing"), "Failed to get secret: not found."),
        (NetworkError("connection refused"), "Vault API request failed: connection refused"),
        (ApiError(500, "boom"), "Failed to get secret: boom"),
    ],
)
def test_fail_maps_errors_to_exit_code(error, expected, capsys) -> None:
    with pytest.raises(typer.Exit) as exc:
        http.fail("Failed to get secret", error)

    assert exc.value.exit_code == 2
    assert expected in capsys.readouterr().out
