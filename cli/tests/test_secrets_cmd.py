from __future__ import annotations

import io

import pytest
import typer
from vault_client.models import Secret, SecretDecrypt, Token, TokenCreateResponse

from vault_cli.commands import secrets_cmd, tokens_cmd
from vault_cli.config import AppConfig, AuthConfig


class _FakeClient:
    def __init__(self) -> None:
        self.closed = False
        self.created = None
        self.deleted = None

    def create_secret(self, create):
        self.created = create
        return Secret(id="sec-1", description=create.description)

    def get_secret(self, secret_id: str):
        return Secret(id=secret_id, description="[/bold] pw", environment="[red]prod")

    def decrypt_secret(self, secret_id: str):
        return SecretDecrypt(id=secret_id, secret="hunter2")

    def delete_secret(self, secret_id: str) -> None:
        self.deleted = secret_id

    def get_tokens(self) -> list[Token]:
        return [Token(id="tok-1", description="ci", expires_at="2026-01-01T00:00:00+00:00")]

    def create_token(self, create):
        self.created = create
        return TokenCreateResponse(id="tok-1", token="plain-token", description=create.description)

    def close(self) -> None:
        self.closed = True


def _make_cfg() -> AppConfig:
    return AppConfig(base_url="https://vault.test", auth=AuthConfig(token="api-key"))


@pytest.fixture
def client(monkeypatch) -> _FakeClient:
    fake = _FakeClient()
    for mod in (secrets_cmd, tokens_cmd):
        monkeypatch.setattr(mod, "load_config", _make_cfg)
        monkeypatch.setattr(mod, "make_client", lambda *_args, **_kwargs: fake)
    return fake


def test_decrypt_prints_plain_value(client, capsys) -> None:
    secrets_cmd.decrypt_secret(secret_id="sec-1", base_url=None, json_out=False)

    assert capsys.readouterr().out == "hunter2\n"
    assert client.closed is True


def test_create_secret_from_stdin(client, monkeypatch) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("s3cr3t\n"))

    secrets_cmd.create_secret(
        description="db password",
        secret=None,
        from_stdin=True,
        environment="env-1",
        base_url=None,
        json_out=False,
    )

    assert client.created.secret == "s3cr3t"
    assert client.created.environment == "env-1"


def test_create_secret_rejects_both_sources(client) -> None:
    with pytest.raises(typer.Exit) as exc:
        secrets_cmd.create_secret(
            description="db password",
            secret="x",
            from_stdin=True,
            environment=None,
            base_url=None,
            json_out=False,
        )

    assert exc.value.exit_code == 2
    assert client.created is None


def test_delete_secret_with_yes(client) -> None:
    secrets_cmd.delete_secret(secret_id="sec-1", yes=True, base_url=None)

    assert client.deleted == "sec-1"


def test_create_token_shows_plain_token_once(client, capsys) -> None:
    tokens_cmd.create_token(description="ci", environment=None, expires_at=None, base_url=None, json_out=False)

    out = capsys.readouterr().out
    assert "plain-token" in out
    assert client.created.description == "ci"


def test_list_tokens_table(client, capsys) -> None:
    tokens_cmd.list_tokens(base_url=None, json_out=False)

    out = capsys.readouterr().out
    assert "tok-1" in out
    assert "2026-01-01T00:00:00Z" in out


def test_get_secret_prints_bracketed_values(client, capsys) -> None:
    secrets_cmd.get_secret(secret_id="sec-1", base_url=None, json_out=False)

    out = capsys.readouterr().out
    assert "description=[/bold] pw" in out
    assert "environment=[red]prod" in out
