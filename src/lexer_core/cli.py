"""
Lexer Core CLI - Command-line interface.

Submit registry calls and inspect registry state from the terminal.
Each successful write is mined into its own block.
"""

import logging
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from lexer_core.config import LexerSettings
from lexer_core.contract import LexerCore
from lexer_core.core.exceptions import LexerCoreError, format_exception
from lexer_core.core.models import CallResult, ConfidentialityLevel

app = typer.Typer(
    name="lexer-core",
    help="Lexer Core - participant profile and resource-type registry",
    no_args_is_help=True,
)
console = Console()


def _load_core() -> LexerCore:
    """Load the configured registry or exit with the reason."""
    try:
        settings = LexerSettings.from_env()
        logging.basicConfig(level=settings.logging_level, format="%(levelname)s %(name)s: %(message)s")
        return LexerCore.load(settings)
    except LexerCoreError as e:
        console.print(f"[red]Cannot load registry: {format_exception(e)}[/red]")
        raise typer.Exit(1)


def _report(result: CallResult, core: LexerCore) -> None:
    """Print a write outcome, mining a block on success."""
    if not result.is_ok():
        console.print(
            f"[red]Rejected ({result.error_code.name if result.error_code else 'error'}):[/red] "
            f"{result.error}"
        )
        raise typer.Exit(1)

    height = core.mine_block()
    console.print(
        f"[green](ok true)[/green] {result.operation} for '{result.key}' "
        f"at height {result.block_height}"
    )
    console.print(f"[dim]Ledger height now {height}[/dim]")


@app.command("profile-update")
def profile_update(
    caller: str = typer.Option(..., "--caller", "-c", help="Calling identity"),
    alias: Optional[str] = typer.Option(None, "--alias", "-a", help="Display alias"),
    metadata_url: Optional[str] = typer.Option(
        None, "--metadata-url", "-u", help="Profile metadata URL"
    ),
):
    """
    Create or replace the caller's profile.

    Options left out are cleared on the stored profile.
    """
    core = _load_core()
    result = core.update_participant_profile(caller, alias=alias, metadata_url=metadata_url)
    _report(result, core)


@app.command()
def profile(
    identity: str = typer.Argument(..., help="Identity to look up"),
):
    """Show a participant profile."""
    core = _load_core()
    record = core.get_participant_profile(identity)
    if record is None:
        console.print(f"[yellow]No profile for {identity}[/yellow]")
        return

    table = Table(title=f"Profile: {identity}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    for field, value in record.to_record().items():
        table.add_row(field, "-" if value is None else str(value))
    console.print(table)


@app.command("register-type")
def register_type(
    type_id: str = typer.Argument(..., help="Resource type identifier"),
    name: str = typer.Argument(..., help="Display name"),
    description: str = typer.Argument(..., help="Description"),
    level: int = typer.Argument(..., help="Confidentiality level (0-3)"),
    caller: str = typer.Option(..., "--caller", "-c", help="Calling identity"),
):
    """Register or overwrite a resource type (administrator only)."""
    core = _load_core()
    result = core.register_resource_type(caller, type_id, name, description, level)
    _report(result, core)


@app.command("resource-type")
def resource_type(
    type_id: str = typer.Argument(..., help="Resource type identifier"),
):
    """Show a resource type definition."""
    core = _load_core()
    record = core.get_resource_type_details(type_id)
    if record is None:
        console.print(f"[yellow]No resource type '{type_id}'[/yellow]")
        return

    table = Table(title=f"Resource Type: {type_id}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("name", record.name)
    table.add_row("description", record.description)
    level = ConfidentialityLevel(record.confidentiality_level)
    table.add_row("confidentiality-level", f"{level.value} ({level.name.lower()})")
    console.print(table)


@app.command()
def status(
    recent: int = typer.Option(5, "--recent", "-n", help="Number of audit entries to show"),
):
    """Show registry status and recent write calls."""
    core = _load_core()
    summary = core.status()

    console.print(
        Panel.fit(
            f"[bold blue]Lexer Core[/bold blue]\n"
            f"Administrator: {summary['administrator']}\n"
            f"Block height: {summary['block_height']}\n"
            f"Profiles: {summary['profiles']}\n"
            f"Resource types: {summary['resource_types']}",
        )
    )

    if core.storage is None:
        console.print("[dim]Persistence disabled; no audit log[/dim]")
        return

    entries = core.storage.read_audit_log(limit=recent)
    if not entries:
        console.print("[yellow]No write calls recorded[/yellow]")
        return

    table = Table(title=f"Recent Calls ({len(entries)})")
    table.add_column("Height", justify="right")
    table.add_column("Operation", style="cyan")
    table.add_column("Caller")
    table.add_column("Key")
    table.add_column("Status")
    for entry in entries:
        status_style = "green" if entry.get("status") == "success" else "red"
        table.add_row(
            str(entry.get("block_height", "-")),
            entry.get("operation", ""),
            entry.get("caller", ""),
            entry.get("key", ""),
            f"[{status_style}]{entry.get('status', '')}[/{status_style}]",
        )
    console.print(table)


@app.command()
def version():
    """Show Lexer Core version."""
    from lexer_core import __version__

    console.print(f"Lexer Core v{__version__}")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
