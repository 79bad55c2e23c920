"""
Catalog CLI Commands

Commands for listing tactics and techniques.
"""

from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from attack_taxonomy.catalog import Domain, Technique, parse_technique, tactics_for_domain
from attack_taxonomy.errors import InvalidTechniqueError

console = Console()

app = typer.Typer(
    name="catalog",
    help="List ATT&CK tactics and techniques",
    no_args_is_help=True,
)


@app.command("tactics")
def list_tactics(
    domain: Annotated[
        Domain | None,
        typer.Option("--domain", "-d", help="Only list tactics of one matrix"),
    ] = None,
) -> None:
    """
    List tactics.

    Example:
        attack-taxonomy catalog tactics --domain enterprise-attack
    """
    domains = [domain] if domain else list(Domain)

    table = Table(title="ATT&CK Tactics", show_header=True, header_style="bold cyan")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Shortname", style="magenta")
    table.add_column("Domain", style="green")

    for d in domains:
        for tactic in tactics_for_domain(d):
            table.add_row(tactic.value, tactic.label, tactic.shortname, d.value)

    console.print(table)


@app.command("techniques")
def list_techniques(
    parent: Annotated[
        str | None,
        typer.Option("--parent", "-p", help="List the sub-techniques of this technique"),
    ] = None,
    subtechniques: Annotated[
        bool,
        typer.Option("--subtechniques", "-s", help="Include sub-techniques"),
    ] = False,
) -> None:
    """
    List techniques.

    Example:
        attack-taxonomy catalog techniques
        attack-taxonomy catalog techniques --parent T1003
    """
    if parent:
        try:
            base = parse_technique(parent)
        except InvalidTechniqueError as e:
            console.print(f"[red]Error:[/red] {e}")
            raise typer.Exit(1)
        if base.is_subtechnique:
            console.print(f"[red]Error:[/red] {base} is already a sub-technique")
            raise typer.Exit(1)
        techniques = list(base.subtechniques)
        title = f"Sub-techniques of {base} {base.label} ({len(techniques)})"
    else:
        techniques = [t for t in Technique if subtechniques or not t.is_subtechnique]
        title = f"ATT&CK Techniques ({len(techniques)})"

    if not techniques:
        console.print("[yellow]No sub-techniques found[/yellow]")
        return

    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="white")
    table.add_column("Sub-techniques", style="green", justify="right")

    for technique in techniques:
        count = len(technique.subtechniques)
        table.add_row(technique.value, technique.full_label, str(count) if count else "")

    console.print(table)
