"""
ATT&CK Taxonomy CLI Main Entry Point

The main Typer application that assembles all command groups.
"""

import json
from pathlib import Path
from typing import Annotated

import structlog
import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from attack_taxonomy import __version__
from attack_taxonomy.catalog import ATTACK_VERSION, Tactic, Technique
from attack_taxonomy.errors import InvalidIdentifierError, TableLoadError
from attack_taxonomy.mapping import MitreInfo

# Configure structlog
structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        structlog.dev.ConsoleRenderer(colors=True),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

console = Console()

# Create the main app
app = typer.Typer(
    name="attack-taxonomy",
    help="Typed MITRE ATT&CK tactic and technique identifiers",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(
            Panel(
                Text.from_markup(
                    f"[bold cyan]attack-taxonomy[/bold cyan] v{__version__}\n"
                    f"[dim]ATT&CK technique table v{ATTACK_VERSION or 'unknown'}[/dim]"
                ),
                title="Version",
                border_style="cyan",
            )
        )
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
) -> None:
    """
    Look up, list and validate MITRE ATT&CK identifiers.
    """
    if verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG)


# Import and register sub-commands
from attack_taxonomy.cli.catalog_cmd import app as catalog_app

app.add_typer(catalog_app, name="catalog", help="List tactics and techniques")


def _describe(identifier: str) -> dict[str, str]:
    """Resolve one identifier as a tactic, then as a technique."""
    try:
        tactic = Tactic.parse(identifier)
        return {
            "input": identifier,
            "id": tactic.value,
            "kind": "tactic",
            "name": tactic.label,
            "context": tactic.domain.value,
        }
    except InvalidIdentifierError:
        pass

    technique = Technique.parse(identifier)
    return {
        "input": identifier,
        "id": technique.value,
        "kind": "sub-technique" if technique.is_subtechnique else "technique",
        "name": technique.label,
        "context": technique.parent.value if technique.parent else "",
    }


@app.command()
def lookup(
    identifiers: Annotated[
        list[str], typer.Argument(help="Tactic or technique IDs, e.g. TA0007 t1059.001")
    ],
    json_output: Annotated[
        bool,
        typer.Option("--json", help="Output results as JSON"),
    ] = False,
) -> None:
    """
    Resolve tactic and technique identifiers.

    Exits with status 1 if any identifier is not recognized.

    Example:
        attack-taxonomy lookup TA0011 command_and_control T1059.001
    """
    results = []
    invalid = []
    for identifier in identifiers:
        try:
            results.append(_describe(identifier))
        except InvalidIdentifierError:
            invalid.append(identifier)

    if json_output:
        console.print_json(json.dumps({"results": results, "invalid": invalid}))
    else:
        if results:
            table = Table(show_header=True, header_style="bold cyan")
            table.add_column("Input", style="dim")
            table.add_column("ID", style="cyan", no_wrap=True)
            table.add_column("Kind", style="magenta")
            table.add_column("Name", style="white")
            table.add_column("Domain / Parent", style="green")
            for row in results:
                table.add_row(row["input"], row["id"], row["kind"], row["name"], row["context"])
            console.print(table)

        for identifier in invalid:
            console.print(f"[red]Invalid identifier:[/red] {identifier}")

    if invalid:
        raise typer.Exit(1)


@app.command()
def tags(
    rule_tags: Annotated[
        list[str], typer.Argument(help="Sigma rule tags, e.g. attack.execution attack.t1059.001")
    ],
) -> None:
    """
    Show the ATT&CK coverage extracted from Sigma rule tags.

    Example:
        attack-taxonomy tags attack.command_and_control attack.t1041
    """
    info = MitreInfo.from_tags(rule_tags)

    if info.is_empty:
        console.print("[yellow]No ATT&CK tactics or techniques found in tags[/yellow]")
        return

    console.print_json(info.model_dump_json())


@app.command()
def generate(
    bundle: Annotated[Path, typer.Argument(help="Local STIX 2.1 bundle (enterprise-attack.json)")],
    output: Annotated[
        Path,
        typer.Option("--output", "-o", help="Where to write the technique table"),
    ] = Path("enterprise-attack.json"),
    domain: Annotated[
        str,
        typer.Option("--domain", "-d", help="ATT&CK domain of the bundle"),
    ] = "enterprise-attack",
) -> None:
    """
    Build a technique table from a STIX bundle.

    Point ATTACK_TAXONOMY_TECHNIQUES_FILE at the output to use it.

    Example:
        attack-taxonomy generate cti/enterprise-attack/enterprise-attack.json -o table.json
    """
    from attack_taxonomy.generator import build_table, load_bundle, write_table

    try:
        table = build_table(load_bundle(bundle), domain=domain)
    except TableLoadError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    write_table(table, output)

    subtechniques = sum(1 for r in table.techniques if r.is_subtechnique)
    console.print(
        f"[green]Wrote[/green] {len(table.techniques)} entries "
        f"({len(table.techniques) - subtechniques} techniques, {subtechniques} sub-techniques) "
        f"to {output}"
    )


if __name__ == "__main__":
    app()
