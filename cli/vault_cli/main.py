from __future__ import annotations

import typer
from vault_client import VaultClientError

from . import console
from .commands import config_cmd, environments_cmd, secrets_cmd, tokens_cmd
from .config import load_config
from .http import fail, make_client
from .logging_ import setup_logging


def version(
        base_url: str | None = typer.Option(None, "--base-url", help="Override base URL."),
        json_out: bool = typer.Option(False, "--json", help="Print raw JSON."),
):
    """Show the vault API version."""
    cfg = load_config()
    client = make_client(cfg, base_url_override=base_url)

    try:
        data = client.get_version()
    except VaultClientError as e:
        fail("Failed to fetch API version", e)
    finally:
        client.close()

    if json_out:
        console.print_json(data.to_dict() if data else {})
        return
    console.plain(f"base_url={client.base_url} version={data.version if data else '-'}")


def _build_app() -> typer.Typer:
    app = typer.Typer(
        name="vault",
        help="Vault secrets CLI",
        no_args_is_help=True,
    )

    app.add_typer(environments_cmd.app, name="environments")
    app.add_typer(tokens_cmd.app, name="tokens")
    app.add_typer(secrets_cmd.app, name="secrets")
    app.add_typer(config_cmd.app, name="config")
    app.command("version")(version)

    @app.callback()
    def _main(
            verbose: bool = typer.Option(False, "-v", "--verbose", help="Verbose logs."),
    ):
        setup_logging(verbose)

    return app


app = _build_app()


def main() -> None:
    app()


if __name__ == "__main__":
    main()
