"""zk4lw CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from zk4lw.client import DEFAULT_PORT, DEFAULT_TIMEOUT, FourLetterWordClient
from zk4lw.errors import FourLetterWordError

app = typer.Typer(
    name="zk4lw",
    help="ZooKeeper four-letter-word client",
    no_args_is_help=True,
)
console = Console()

ServerOption = typer.Option(None, "--server", "-s", help="Server name from .zk4lw.yaml")
HostOption = typer.Option(None, "--host", "-H", help="Server host (overrides --server)")
PortOption = typer.Option(None, "--port", "-P", help="Server port")
TimeoutOption = typer.Option(None, "--timeout", "-t", help="Per-call deadline in seconds")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _resolve_client(
    server: Optional[str],
    host: Optional[str],
    port: Optional[int],
    timeout: Optional[float],
) -> FourLetterWordClient:
    """Build a client from --host/--port, or from a named server in the config."""
    if host:
        return FourLetterWordClient(host, port=port or DEFAULT_PORT, timeout=timeout or DEFAULT_TIMEOUT)

    from zk4lw.config.loader import load_config

    if not server:
        console.print("[red]Specify --host or --server[/red]")
        raise typer.Exit(1)
    try:
        config = load_config()
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    if server not in config.servers:
        console.print(f"[red]Unknown server: {server}[/red]")
        console.print(f"Available: {', '.join(config.servers.keys()) or 'none'}")
        raise typer.Exit(1)
    entry = config.resolved(server)
    return FourLetterWordClient(
        entry.host,
        port=port or entry.port or DEFAULT_PORT,
        timeout=timeout or entry.timeout or DEFAULT_TIMEOUT,
    )


def _execute(client: FourLetterWordClient, command_word: str) -> Any:
    from zk4lw.commands import COMMAND_REGISTRY

    command = COMMAND_REGISTRY[command_word]()
    try:
        return client.execute(command)
    except FourLetterWordError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)


def _fmt(value: Any) -> str:
    return "—" if value is None else str(value)


@app.command()
def mntr(
    server: Optional[str] = ServerOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    timeout: Optional[float] = TimeoutOption,
    extras: bool = typer.Option(True, "--extras/--no-extras", help="List unmapped keys"),
) -> None:
    """Show the monitoring variables of a server."""
    client = _resolve_client(server, host, port, timeout)
    resp = _execute(client, "mntr")

    table = Table(title=f"mntr {client.host}:{client.port}")
    table.add_column("Field", style="bold")
    table.add_column("Value")
    rows = [
        ("version", resp.version),
        ("revision", resp.revision),
        ("build date", resp.build_date),
        ("server state", str(resp.server_state)),
        ("latency avg/max/min", f"{resp.latency.avg}/{resp.latency.max}/{resp.latency.min}"),
        ("packets received", resp.packets_received),
        ("packets sent", resp.packets_sent),
        ("alive connections", resp.num_alive_connections),
        ("outstanding requests", resp.outstanding_requests),
        ("znodes", resp.znode_count),
        ("watches", resp.watch_count),
        ("ephemerals", resp.ephemerals_count),
        ("approximate data size", resp.approximate_data_size),
        ("open file descriptors", resp.open_file_descriptor_count),
        ("max file descriptors", resp.max_file_descriptor_count),
    ]
    if resp.is_leader:
        rows += [
            ("followers", resp.followers),
            ("synced followers", resp.synced_followers),
            ("pending syncs", resp.pending_syncs),
            ("last proposal size", resp.last_proposal_size),
            ("max proposal size", resp.max_proposal_size),
            ("min proposal size", resp.min_proposal_size),
        ]
    for name, value in rows:
        table.add_row(name, _fmt(value))
    console.print(table)

    if extras and resp.extras:
        extra_table = Table(title=f"Unmapped keys ({len(resp.extras)})")
        extra_table.add_column("Key", style="dim")
        extra_table.add_column("Value")
        for key, value in resp.extras.items():
            extra_table.add_row(key, value)
        console.print(extra_table)


@app.command()
def ruok(
    server: Optional[str] = ServerOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    timeout: Optional[float] = TimeoutOption,
) -> None:
    """Check whether a server is running in a non-error state."""
    client = _resolve_client(server, host, port, timeout)
    resp = _execute(client, "ruok")
    if resp.ok:
        console.print(f"[green]✓[/green] {client.host}:{client.port} imok")
    else:
        console.print(f"[red]✗[/red] {client.host}:{client.port} answered {resp.raw!r}")
        raise typer.Exit(1)


def _print_key_values(title: str, pairs: dict[str, str]) -> None:
    table = Table(title=title)
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in pairs.items():
        table.add_row(key, value)
    console.print(table)


@app.command()
def conf(
    server: Optional[str] = ServerOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    timeout: Optional[float] = TimeoutOption,
) -> None:
    """Show the serving configuration of a server."""
    client = _resolve_client(server, host, port, timeout)
    _print_key_values(f"conf {client.host}:{client.port}", _execute(client, "conf"))


@app.command()
def envi(
    server: Optional[str] = ServerOption,
    host: Optional[str] = HostOption,
    port: Optional[int] = PortOption,
    timeout: Optional[float] = TimeoutOption,
) -> None:
    """Show the serving environment of a server."""
    client = _resolve_client(server, host, port, timeout)
    _print_key_values(f"envi {client.host}:{client.port}", _execute(client, "envi"))


@app.command()
def status() -> None:
    """Probe every configured server and show its role and health."""
    from zk4lw.config.loader import load_config
    from zk4lw.ensemble.registry import EnsembleRegistry

    try:
        config = load_config()
    except (FileNotFoundError, ValueError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    registry = EnsembleRegistry(config)
    statuses = registry.get_all_statuses_sync()

    table = Table(title="Ensemble Status")
    table.add_column("Server", style="bold")
    table.add_column("Address")
    table.add_column("Status")
    table.add_column("Role")
    table.add_column("Version")
    table.add_column("Znodes")
    table.add_column("Latency")

    for s in statuses:
        label = s.status_label
        if label == "healthy":
            style = "green"
        elif label == "unreachable":
            style = "yellow"
        else:
            style = "red"
        monitor = s.probe.monitor if s.probe else None
        latency = f"{s.probe.latency_ms:.0f}ms" if s.probe and s.probe.latency_ms else "—"
        table.add_row(
            s.key,
            s.address,
            f"[{style}]{label}[/{style}]",
            str(monitor.server_state) if monitor else "—",
            monitor.version if monitor else "—",
            str(monitor.znode_count) if monitor else "—",
            latency,
        )

    console.print(table)
    for s in statuses:
        if s.probe and s.probe.error:
            console.print(f"  [dim]{s.key}: {s.probe.error}[/dim]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Bind host"),
    port: int = typer.Option(8000, help="Bind port"),
) -> None:
    """Start the HTTP API."""
    import uvicorn

    console.print(f"[bold]zk4lw[/bold] starting on http://{host}:{port}")
    uvicorn.run("zk4lw.api.app:app", host=host, port=port, reload=False)


config_app = typer.Typer(name="config", help="Configuration commands")
app.add_typer(config_app)


@config_app.command("validate")
def config_validate(
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .zk4lw.yaml"),
) -> None:
    """Validate configuration file."""
    import yaml

    from zk4lw.config.loader import load_config

    errors: list[str] = []
    try:
        config = load_config(path=path)
        console.print("[green]✓[/green] YAML parses correctly")
        console.print("[green]✓[/green] Pydantic validation passes")
    except FileNotFoundError as exc:
        console.print(f"[red]✗ {exc}[/red]")
        raise typer.Exit(1)
    except yaml.YAMLError as exc:
        console.print(f"[red]✗ YAML parsing failed: {exc}[/red]")
        raise typer.Exit(1)
    except ValueError as exc:
        console.print("[green]✓[/green] YAML parses correctly")
        console.print(f"[red]✗ Pydantic validation failed: {exc}[/red]")
        raise typer.Exit(1)

    if not config.servers:
        errors.append("No servers configured")

    seen: dict[str, str] = {}
    for key in config.servers:
        entry = config.resolved(key)
        if not entry.host.strip():
            errors.append(f"Server '{key}': empty host")
            continue
        if entry.address in seen:
            errors.append(f"Server '{key}': same address as '{seen[entry.address]}' ({entry.address})")
        else:
            seen[entry.address] = key
            console.print(f"[green]✓[/green] Server '{key}' at {entry.address}")

    if not errors:
        console.print("\n[green bold]Configuration is valid.[/green bold]")
    else:
        for err in errors:
            console.print(f"[red]✗ {err}[/red]")
        console.print(f"\n[red bold]{len(errors)} validation error(s) found.[/red bold]")
        raise typer.Exit(1)


@config_app.command("show")
def config_show(
    path: Path | None = typer.Option(None, "--path", "-p", help="Path to .zk4lw.yaml"),
) -> None:
    """Print resolved configuration."""
    from zk4lw.config.loader import load_config

    try:
        config = load_config(path=path)
    except FileNotFoundError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)
    except ValueError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1)

    console.print(f"[bold]{config.zk4lw.name}[/bold] v{config.zk4lw.version}\n")

    console.print("[bold]Defaults:[/bold]")
    console.print(f"  Port: {config.defaults.port}")
    console.print(f"  Timeout: {config.defaults.timeout}s\n")

    console.print("[bold]Servers:[/bold]")
    for key in config.servers:
        entry = config.resolved(key)
        console.print(f"  {key}: {entry.address} (timeout {entry.timeout}s)")
        if entry.description:
            console.print(f"    {entry.description}")


def main() -> None:
    app()
