from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table
from vault_client import VaultClientError
from vault_client.models import EnvironmentCreate

from .. import console
from ..config import load_config
from ..formatting import or_dash
from ..http import fail, make_client

app = typer.Typer(help="Manage vault environments.")


@app.command("list")
def list_environments(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        environments = client.get_environments()
    except VaultClientError as e:
        fail("Failed to list environments", e)
    finally:
        client.close()

    if json_out:
        console.print_json([env.to_dict() for env in environments])
        return

    table = Table(title="Environments")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("description")
    for env in environments:
        table.add_row(escape(env.id), escape(env.name), escape(or_dash(env.description)))

    console.console.print(table)


@app.command("get")
def get_environment(
        environment_id: str = typer.Argument(..., help="Environment ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        env = client.get_environment(environment_id)
    except VaultClientError as e:
        fail(f"Failed to get environment {environment_id}", e)
    finally:
        client.close()

    if env is None:
        console.err(f"Environment {environment_id} returned no data.")
        raise typer.Exit(code=2)
    if json_out:
        console.print_json(env.to_dict())
        return
    console.plain(f"id={env.id} name={env.name} description={or_dash(env.description)}")


@app.command("create")
def create_environment(
        name: str = typer.Argument(..., help="Environment name."),
        description: str | None = typer.Option(None, "--description", help="Free-form description."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    name = name.strip()
    if not name:
        console.err("Environment name must not be empty.")
        raise typer.Exit(code=2)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        created = client.create_environment(EnvironmentCreate(name=name, description=description))
    except VaultClientError as e:
        fail("Failed to create environment", e)
    finally:
        client.close()

    if json_out:
        console.print_json(created.to_dict() if created else {})
        return
    if created is None:
        console.ok(f"Environment created: name={name}")
        return
    console.ok(f"Environment created: id={created.id} name={created.name}")


@app.command("delete")
def delete_environment(
        environment_id: str = typer.Argument(..., help="Environment ID."),
        yes: bool = typer.Option(False, "--yes", help="Skip confirmation prompt."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes:
        if not typer.confirm(f"Delete environment {environment_id}?", default=False):
            console.info("Aborted.")
            raise typer.Exit(code=0)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        client.delete_environment(environment_id)
    except VaultClientError as e:
        fail(f"Failed to delete environment {environment_id}", e)
    finally:
        client.close()

    console.ok(f"Environment {environment_id} deleted.")
