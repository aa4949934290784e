from __future__ import annotations

import json

import pytest
import typer
from vault_client import AuthError
from vault_client.models import Environment, EnvironmentCreateResponse

from vault_cli.commands import environments_cmd
from vault_cli.config import AppConfig, AuthConfig


class _FakeClient:
    def __init__(self) -> None:
        self.closed = False
        self.created = None
        self.deleted = None

    def get_environments(self) -> list[Environment]:
        return [Environment(id="env-1", name="dev", description="Development")]

    def create_environment(self, create):
        self.created = create
        return EnvironmentCreateResponse(id="env-1", name=create.name)

    def delete_environment(self, environment_id: str) -> None:
        self.deleted = environment_id

    def close(self) -> None:
        self.closed = True


def _make_cfg() -> AppConfig:
    return AppConfig(base_url="https://vault.test", auth=AuthConfig(token="api-key"))


@pytest.fixture
def client(monkeypatch) -> _FakeClient:
    fake = _FakeClient()
    monkeypatch.setattr(environments_cmd, "load_config", _make_cfg)
    monkeypatch.setattr(environments_cmd, "make_client", lambda *_args, **_kwargs: fake)
    return fake


def test_list_json(client, capsys) -> None:
    environments_cmd.list_environments(base_url=None, json_out=True)

    data = json.loads(capsys.readouterr().out)
    assert data == [{"id": "env-1", "name": "dev", "description": "Development"}]
    assert client.closed is True


def test_create_environment(client, capsys) -> None:
    environments_cmd.create_environment(name=" dev ", description=None, base_url=None, json_out=False)

    assert client.created.name == "dev"
    assert "id=env-1" in capsys.readouterr().out


def test_create_rejects_blank_name(client) -> None:
    with pytest.raises(typer.Exit) as exc:
        environments_cmd.create_environment(name="  ", description=None, base_url=None, json_out=False)

    assert exc.value.exit_code == 2
    assert client.created is None


def test_delete_requires_confirmation(client, monkeypatch) -> None:
    monkeypatch.setattr(typer, "confirm", lambda *_args, **_kwargs: False)

    with pytest.raises(typer.Exit) as exc:
        environments_cmd.delete_environment(environment_id="env-1", yes=False, base_url=None)

    assert exc.value.exit_code == 0
    assert client.deleted is None


def test_delete_skips_prompt_with_yes(client, monkeypatch) -> None:
    monkeypatch.setattr(typer, "confirm", lambda *_args, **_kwargs: (_ for _ in ()).throw(RuntimeError("prompted")))

    environments_cmd.delete_environment(environment_id="env-1", yes=True, base_url=None)

    assert client.deleted == "env-1"
    assert client.closed is True


def test_unauthorized_exits_and_closes(client, monkeypatch, capsys) -> None:
    def _raise():
        raise AuthError(401, "Unauthorized")

    monkeypatch.setattr(client, "get_environments", _raise)

    with pytest.raises(typer.Exit) as exc:
        environments_cmd.list_environments(base_url=None, json_out=False)

    assert exc.value.exit_code == 2
    assert client.closed is True
    assert "Unauthorized" in capsys.readouterr().out


def test_list_prints_bracketed_description(client, monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        client,
        "get_environments",
        lambda: [Environment(id="env-1", name="dev", description="uses [/] tags")],
    )

    environments_cmd.list_environments(base_url=None, json_out=False)

    assert "uses [/] tags" in capsys.readouterr().out


def test_get_prints_bracketed_description(client, monkeypatch, capsys) -> None:
    monkeypatch.setattr(
        client,
        "get_environment",
        lambda environment_id: Environment(id=environment_id, name="[bold]dev", description="[/bold] pw"),
        raising=False,
    )

    environments_cmd.get_environment(environment_id="env-1", base_url=None, json_out=False)

    assert "name=[bold]dev description=[/bold] pw" in capsys.readouterr().out
