"""CLI entry point for pdum_gapi."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer
from InquirerPy import inquirer
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pdum.gapi import config as config_module
from pdum.gapi import directory
from pdum.gapi.generator import api_modules, compile_module, index_html
from pdum.gapi.types import APIResolutionError, CodeModule, DirectoryItem, GenerationError, GoogleApiError

app = typer.Typer(
    help="Generate Python clients for Google REST APIs from Discovery documents",
    no_args_is_help=True,
)
console = Console()

_HANDLED_ERRORS = (APIResolutionError, GenerationError, GoogleApiError, FileNotFoundError, ValueError)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
):
    """Generate Python clients for Google REST APIs from Discovery documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command("version")
def version():
    """Show the version of pdum_gapi."""
    from pdum.gapi import __version__

    console.print(f"pdum_gapi version: [bold green]{__version__}[/bold green]")


@app.command("list")
def list_command(
    all_versions: bool = typer.Option(False, "--all", "-a", help="Include non-preferred versions"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Only list versions of this API"),
):
    """List the APIs published in the Discovery directory."""
    try:
        items = directory.list_apis(preferred=not all_versions, name=name)
    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    table = Table(title=f"Discovery directory ({len(items)} APIs)")
    table.add_column("Id", style="cyan")
    table.add_column("Title")
    table.add_column("Preferred", justify="center")
    for item in items:
        table.add_row(item.id, item.title, "✓" if item.preferred else "")
    console.print(table)


@app.command("lookup")
def lookup(query: str = typer.Argument(..., help="API name, id or title, e.g. 'Tag Manager'")):
    """Resolve a friendly API name to its Discovery id."""
    try:
        item = directory.lookup_api(query)
    except _HANDLED_ERRORS as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)
    console.print(f"[green]{item.id}[/green]  {item.title}")


@app.command("generate")
def generate(
    apis: Optional[List[str]] = typer.Argument(None, help="APIs to generate, as name or name:version"),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Output directory"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
    from_file: Optional[List[Path]] = typer.Option(
        None, "--from-file", "-f", help="Generate from a local Discovery document (repeatable)"
    ),
    all_apis: bool = typer.Option(False, "--all", help="Generate every API in the directory"),
    origin: Optional[str] = typer.Option(None, "--origin", help="Project URL for module headers"),
):
    """
    Generate client modules from Discovery documents.

    APIs are taken from the arguments, then from the config file. With
    neither, you'll be prompted to pick them interactively.

    Examples:
        # Two APIs into ./build
        pdum_gapi generate homegraph apikeys:v2

        # From a downloaded document
        pdum_gapi generate --from-file homegraph.json --out src/clients

        # Everything listed in gapi.yaml
        pdum_gapi generate --config gapi.yaml
    """
    try:
        settings = _load_settings(config_path)
        output = out or settings.output
        origin = origin or settings.origin

        if from_file:
            modules = [compile_module(directory.load_rest_description(path), origin) for path in from_file]
        else:
            items = _select_items(apis or settings.apis, all_apis=all_apis, preferred_only=settings.preferred_only)
            modules = _generate_with_progress(items, origin)

        _write_modules(modules, output, package=settings.package)
    except _HANDLED_ERRORS as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Generation interrupted by user.[/yellow]")
        sys.exit(130)


@app.command("index")
def index(
    out: Path = typer.Option(Path("docs/index.html"), "--out", "-o", help="Where to write the page"),
    origin: Optional[str] = typer.Option(None, "--origin", help="Project URL"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="YAML config file"),
):
    """Write an HTML index of the preferred APIs."""
    try:
        settings = _load_settings(config_path)
        items = directory.list_apis(preferred=True)
    except _HANDLED_ERRORS as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)
    except Exception as e:
        console.print(f"[bold red]Unexpected error:[/bold red] {e}")
        sys.exit(1)

    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(index_html(origin or settings.origin, items), encoding="utf-8")
    console.print(f"[green]Wrote index of {len(items)} APIs to[/green] {out}")


@app.command("init-config")
def init_config(
    path: Path = typer.Option(Path(config_module.CONFIG_FILENAME), "--path", "-p", help="Where to write"),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing file"),
):
    """Write a starter YAML config."""
    if path.exists() and not force:
        console.print(f"[bold red]Error:[/bold red] {path} already exists (use --force to overwrite)")
        sys.exit(1)
    settings = config_module.GenerateConfig(apis=["homegraph:v1", "apikeys:v2", "doubleclickbidmanager:v2"])
    config_module.save_config(settings, path)
    console.print(f"[green]Wrote config to[/green] {path}")


def _load_settings(config_path: Optional[Path]) -> config_module.GenerateConfig:
    found = config_module.find_config(config_path)
    if found is None:
        return config_module.GenerateConfig()
    console.print(f"[dim]Using config {found}[/dim]")
    return config_module.load_config(found)


def _select_items(requested: list[str], *, all_apis: bool, preferred_only: bool) -> list[DirectoryItem]:
    if all_apis:
        return directory.list_apis(preferred=preferred_only)

    catalog = directory.list_apis(preferred=False)
    if requested:
        return [directory.resolve_api(query, catalog) for query in requested]

    preferred = [item for item in catalog if item.preferred]
    selected = inquirer.fuzzy(
        message="Select APIs to generate:",
        choices=[{"name": f"{item.title} ({item.id})", "value": item.id} for item in preferred],
        multiselect=True,
    ).execute()
    by_id = {item.id: item for item in preferred}
    return [by_id[api_id] for api_id in selected or []]


def _generate_with_progress(items: list[DirectoryItem], origin: str) -> list[CodeModule]:
    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"), console=console) as progress:
        task = progress.add_task(f"Generating {len(items)} API(s)...", total=len(items))
        modules = api_modules(items, origin, on_done=lambda item: progress.advance(task))

    failed = len(items) - len(modules)
    if failed:
        console.print(f"[yellow]{failed} API(s) could not be generated (see log).[/yellow]")
    return modules


def _write_modules(modules: list[CodeModule], output: Path, *, package: bool) -> None:
    table = Table(title=f"Generated modules in {output}")
    table.add_column("API", style="cyan")
    table.add_column("Module")
    for module in modules:
        path = module.write(output)
        table.add_row(module.api_id, str(path))

    init = output / "__init__.py"
    if package and modules and not init.exists():
        init.write_text('"""Generated Google API clients."""\n', encoding="utf-8")

    console.print(table)


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
