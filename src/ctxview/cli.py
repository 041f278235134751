"""Typer CLI for ctxview."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ctxview.context.models import DirectoryEntry
from ctxview.core.agents import ConfigWorkspaceResolver
from ctxview.core.settings import load_settings
from ctxview.gateway.server import Gateway, GatewayError
from ctxview.main import build_gateway
from ctxview.utils.format import (
    describe_context_file,
    format_file_size,
    format_timestamp,
)

app = typer.Typer(help="Browse agent workspace context files")
console = Console()
err_console = Console(stderr=True)

methods_app = typer.Typer(help="Gateway methods")
config_app = typer.Typer(help="Configuration")


@app.callback()
def main() -> None:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command("ls")
def list_files(path: str = typer.Argument("", help="Directory relative to the workspace")) -> None:
    """List one directory level of the workspace."""
    result = _request("context.list", {"path": path})
    entries = [DirectoryEntry.from_dict(raw) for raw in result.get("entries", [])]
    table = Table(title=escape(result.get("path") or "(no workspace)"))
    table.add_column("Name", no_wrap=True)
    table.add_column("Size", justify="right")
    table.add_column("Modified")
    table.add_column("Notes", overflow="fold")
    for entry in entries:
        name = escape(f"{entry.name}/" if entry.is_directory else entry.name)
        size = "" if entry.is_directory else format_file_size(entry.size)
        table.add_row(
            name,
            size,
            format_timestamp(entry.modified_at),
            describe_context_file(entry.name) or "",
        )
    console.print(table)
    if not entries:
        console.print("No files found in this directory.")


@app.command("cat")
def read_file(path: str) -> None:
    """Print a workspace file."""
    result = _request("context.read", {"path": path})
    typer.echo(result.get("content", ""), nl=False)


@app.command("call")
def call_method(
    method: str,
    params_json: str | None = typer.Option(None, "--params", help="JSON params object"),
) -> None:
    """Dispatch a raw gateway request and print the response envelope."""
    try:
        params = json.loads(params_json) if params_json else None
    except json.JSONDecodeError as exc:
        err_console.print(f"invalid --params: {exc}")
        raise typer.Exit(code=2) from exc
    gateway = _gateway()
    response = asyncio.run(gateway.call(method, params))
    console.print_json(json.dumps(response.to_dict()))
    if not response.ok:
        raise typer.Exit(code=1)


@methods_app.command("list")
def methods_list() -> None:
    gateway = _gateway()
    for spec in gateway.registry.list_specs():
        console.print(f"{spec.name} - {spec.description}")


@config_app.command("show")
def config_show() -> None:
    settings = load_settings()
    workspace = ConfigWorkspaceResolver(settings).resolve()
    console.print(f"config_path={settings.config_path}")
    console.print(f"workspace_override={settings.workspace_override}")
    console.print(f"agent_id={workspace.agent_id}")
    console.print(f"workspace={workspace.root or 'missing'}")
    console.print(f"log_level={settings.log_level}")


app.add_typer(methods_app, name="methods")
app.add_typer(config_app, name="config")


def _gateway() -> Gateway:
    return build_gateway(load_settings())


def _request(method: str, params: dict[str, Any]) -> dict[str, Any]:
    gateway = _gateway()
    try:
        return asyncio.run(gateway.request(method, params))
    except GatewayError as exc:
        err_console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1) from exc
