from __future__ import annotations

import typer

from .. import console
from ..config import config_path, load_config, load_file_config, normalize_base_url, save_config

app = typer.Typer(help="Show or change local CLI configuration.")


@app.command("show")
def show_config() -> None:
    cfg = load_config()
    token_state = "(set)" if cfg.auth.token else "(empty)"
    console.plain(f"base_url={cfg.base_url} token={token_state}")


@app.command("set")
def set_config(
        base_url: str | None = typer.Option(None, "--base-url", help="Vault API base URL."),
        token: str | None = typer.Option(None, "--token", help="Vault API key."),
) -> None:
    if base_url is None and token is None:
        console.err("Nothing to set. Use --base-url and/or --token.")
        raise typer.Exit(code=2)

    # env overrides must not end up in the file
    cfg = load_file_config()
    if base_url is not None:
        normalized = normalize_base_url(base_url, warn=True)
        if not normalized:
            console.err("base_url must not be empty.")
            raise typer.Exit(code=2)
        cfg.base_url = normalized
    if token is not None:
        cfg.auth.token = token.strip()

    path = save_config(cfg)
    console.ok(f"Config updated: {path}")


@app.command("path")
def show_path() -> None:
    typer.echo(config_path())
