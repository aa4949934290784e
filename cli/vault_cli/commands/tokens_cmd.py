from __future__ import annotations

import typer
from rich.markup import escape
from rich.table import Table
from vault_client import VaultClientError
from vault_client.models import TokenCreate

from .. import console
from ..config import load_config
from ..formatting import format_timestamp, or_dash
from ..http import fail, make_client

app = typer.Typer(help="Manage vault API tokens.")


@app.command("list")
def list_tokens(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        tokens = client.get_tokens()
    except VaultClientError as e:
        fail("Failed to list tokens", e)
    finally:
        client.close()

    if json_out:
        console.print_json([t.to_dict() for t in tokens])
        return

    table = Table(title="Tokens")
    table.add_column("id", style="bold")
    table.add_column("description")
    table.add_column("environment")
    table.add_column("created")
    table.add_column("expires")
    for t in tokens:
        table.add_row(
            escape(t.id),
            escape(or_dash(t.description)),
            escape(or_dash(t.environment)),
            escape(format_timestamp(t.created_at)),
            escape(format_timestamp(t.expires_at)),
        )

    console.console.print(table)


@app.command("get")
def get_token(
        token_id: str = typer.Argument(..., help="Token ID."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        token = client.get_token(token_id)
    except VaultClientError as e:
        fail(f"Failed to get token {token_id}", e)
    finally:
        client.close()

    if token is None:
        console.err(f"Token {token_id} returned no data.")
        raise typer.Exit(code=2)
    if json_out:
        console.print_json(token.to_dict())
        return
    console.plain(
        f"id={token.id} description={or_dash(token.description)} environment={or_dash(token.environment)} "
        f"expires={format_timestamp(token.expires_at)}"
    )


@app.command("create")
def create_token(
        description: str = typer.Argument(..., help="Token description."),
        environment: str | None = typer.Option(None, "--environment", help="Scope the token to an environment ID."),
        expires_at: str | None = typer.Option(None, "--expires-at", help="Expiry timestamp (ISO 8601)."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        created = client.create_token(
            TokenCreate(description=description, environment=environment, expires_at=expires_at)
        )
    except VaultClientError as e:
        fail("Failed to create token", e)
    finally:
        client.close()

    if json_out:
        console.print_json(created.to_dict() if created else {})
        return
    if created is None:
        console.ok("Token created.")
        return
    console.ok(f"Token created: id={created.id}")
    if created.token:
        console.warn("Store this token now, it will not be shown again:")
        typer.echo(created.token)


@app.command("delete")
def delete_token(
        token_id: str = typer.Argument(..., help="Token ID."),
        yes: bool = typer.Option(False, "--yes", help="Skip confirmation prompt."),
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
):
    if not yes:
        if not typer.confirm(f"Delete token {token_id}?", default=False):
            console.info("Aborted.")
            raise typer.Exit(code=0)

    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        client.delete_token(token_id)
    except VaultClientError as e:
        fail(f"Failed to delete token {token_id}", e)
    finally:
        client.close()

    console.ok(f"Token {token_id} deleted.")
