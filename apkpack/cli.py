"""
apkpack CLI.

Command-line interface for planning packaging actions from module declarations.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .core.config import get_config
from .core.exceptions import ApkPackError
from .core.logging import setup_logging

app = typer.Typer(
    name="apkpack",
    help="Plan aapt packaging actions for Android app modules",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        console.print(f"apkpack v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """apkpack: module declarations to aapt invocations."""
    pass


@app.command()
def plan(
    declarations: Path = typer.Argument(
        ...,
        help="JSON module declaration file",
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    ),
    module: Optional[str] = typer.Option(
        None,
        "--module",
        "-m",
        help="Only plan this module and its dependencies",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write plans and invocation logs to this directory",
    ),
    keep_going: bool = typer.Option(
        False,
        "--keep-going",
        "-k",
        help="Keep planning other modules after a failure",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
) -> None:
    """Resolve build actions for the declared app modules."""
    config = get_config()
    if verbose:
        config.log_level = "DEBUG"
    setup_logging(config)

    from .graph import ModuleGraph, load_declarations

    try:
        graph = ModuleGraph.from_declarations(
            load_declarations(declarations),
            config.environment,
            fail_fast=config.walker.fail_fast and not keep_going,
        )
        results = graph.evaluate(only=module)
    except ApkPackError as e:
        console.print(f"[bold red]✗ Planning failed![/bold red]\n{e}")
        raise typer.Exit(1)

    table = Table(title="Packaging Plan")
    table.add_column("Module", style="cyan")
    table.add_column("Status")
    table.add_column("Invocations")
    table.add_column("Install")

    for name, result in results.items():
        if result.success and result.data is not None:
            actions = result.data
            table.add_row(
                name,
                "[green]OK[/green]",
                ", ".join(i.kind.value for i in actions.invocations),
                str(actions.install.destination) if actions.install else "",
            )
        else:
            table.add_row(name, "[red]FAILED[/red]", result.error or "", "")

    console.print(table)

    if verbose:
        for name, result in results.items():
            if not result.success or result.data is None:
                continue
            for invocation in result.data.invocations:
                console.print(Panel(invocation.render(), title=f"{name}: {invocation.kind.value}"))

    if output is not None:
        from .storage import LocalStorageBackend

        storage = LocalStorageBackend(output)

        async def store_all() -> int:
            written = 0
            for result in results.values():
                if result.success and result.data is not None:
                    written += len(await storage.store_build_actions(result.data))
            return written

        written = asyncio.run(store_all())
        console.print(f"\n[bold]Wrote {written} files to:[/bold] {output}")

    failed = sum(1 for r in results.values() if not r.success)
    if failed:
        console.print(f"\n[bold red]✗ {failed} module(s) failed[/bold red]")
        raise typer.Exit(1)


@app.command()
def config() -> None:
    """Show the build environment used for planning."""
    cfg = get_config()
    env = cfg.environment

    table = Table(title="Current Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")

    table.add_row("Log Level", cfg.log_level)
    table.add_row("Platform SDK Version", env.platform_sdk_version)
    table.add_row("Platform Version", env.platform_version)
    table.add_row("Build Number", env.build_number)
    table.add_row("Product Characteristics", env.product_aapt_characteristics)
    table.add_row("Default Certificate", env.default_certificate)
    table.add_row("Certificate Directory", env.default_app_certificate_dir)
    table.add_row("Source Root", str(env.source_root))
    table.add_row("Resource Overlays", ", ".join(str(o) for o in env.resource_overlays) or "None")
    table.add_row("Out Dir", str(env.out_dir))
    table.add_row("Install Dir", str(env.install_dir))
    table.add_row("Fail Fast", str(cfg.walker.fail_fast))

    console.print(table)

    console.print("\n[dim]Configure via environment variables:[/dim]")
    console.print("  APKPACK_PLATFORM_SDK_VERSION, APKPACK_PLATFORM_VERSION, APKPACK_BUILD_NUMBER")
    console.print("  APKPACK_SOURCE_ROOT, APKPACK_RESOURCE_OVERLAYS, APKPACK_OUT_DIR")


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
