from __future__ import annotations

import sys

import typer
from rich.markup import escape
from rich.table import Table
from vault_client import VaultClientError
from vault_client.models import SecretCreate

from .. import console
from ..config import load_config
from ..formatting import format_timestamp, or_dash
from ..http import fail, make_client

app = typer.Typer(help="Manage vault secrets.")


@app.command("list")
def list_secrets(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        secrets = client.get_secrets()
    except VaultClientError as e:
        fail("Failed to list secrets", e)
    finally:
        client.close()

    if json_out:
        console.print_json([s.to_dict() for s in secrets])
        return

    table = Table(title="Secrets")
    table.add_column("id", style="bold")
    table.add_column("description")
    table.add_column("environment")
    table.add_column("created")
    for s in secrets:
        table.add_row(
            escape(s.id),
            escape(or_dash(s.description)),
            escape(or_dash(s.environment)),
            escape(format_timestamp(s.created_at)),
        )

    console.console.print(table)


@app.command("get")
def get_secret(
        secret_id: str = typer.Argument(..., help="Secret ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        secret = client.get_secret(secret_id)
    except VaultClientError as e:
        fail(f"Failed to get secret {secret_id}", e)
    finally:
        client.close()

    if secret is None:
        console.err(f"Secret {secret_id} returned no data.")
        raise typer.Exit(code=2)
    if json_out:
        console.print_json(secret.to_dict())
        return
    console.plain(
        f"id={secret.id} description={or_dash(secret.description)} environment={or_dash(secret.environment)} "
        f"created={format_timestamp(secret.created_at)}"
    )


def _read_secret_value(secret: str | None, from_stdin: bool) -> str:
    if secret is not None and from_stdin:
        console.err("Use either --secret or --secret-stdin, not both.")
        raise typer.Exit(code=2)
    if from_stdin:
        return sys.stdin.read().rstrip("\n")
    if secret is not None:
        return secret
    return typer.prompt("Secret value", hide_input=True, confirmation_prompt=True)


@app.command("create")
def create_secret(
        description: str = typer.Argument(..., help="Secret description."),
        secret: str | None = typer.Option(None, "--secret", help="Secret value (prompted when omitted)."),
        from_stdin: bool = typer.Option(False, "--secret-stdin", help="Read the secret value from stdin."),
        environment: str | None = typer.Option(None, "--environment", help="Environment ID to store the secret in."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    value = _read_secret_value(secret, from_stdin)
    if not value:
        console.err("Secret value must not be empty.")
        raise typer.Exit(code=2)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        created = client.create_secret(SecretCreate(description=description, secret=value, environment=environment))
    except VaultClientError as e:
        fail("Failed to create secret", e)
    finally:
        client.close()

    if json_out:
        console.print_json(created.to_dict() if created else {})
        return
    if created is None:
        console.ok("Secret created.")
        return
    console.ok(f"Secret created: id={created.id}")


@app.command("decrypt")
def decrypt_secret(
        secret_id: str = typer.Argument(..., help="Secret ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        decrypted = client.decrypt_secret(secret_id)
    except VaultClientError as e:
        fail(f"Failed to decrypt secret {secret_id}", e)
    finally:
        client.close()

    if decrypted is None:
        console.err(f"Secret {secret_id} returned no data.")
        raise typer.Exit(code=2)
    if json_out:
        console.print_json(decrypted.to_dict())
        return
    # plain output so it can be piped
    typer.echo(decrypted.secret)


@app.command("delete")
def delete_secret(
        secret_id: str = typer.Argument(..., help="Secret ID."),
        yes: bool = typer.Option(False, "--yes", help="Skip confirmation prompt."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes:
        if not typer.confirm(f"Delete secret {secret_id}?", default=False):
            console.info("Aborted.")
            raise typer.Exit(code=0)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        client.delete_secret(secret_id)
    except VaultClientError as e:
        fail(f"Failed to delete secret {secret_id}", e)
    finally:
        client.close()

    console.ok(f"Secret {secret_id} deleted.")
