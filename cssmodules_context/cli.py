"""
CLI commands for cssmodules-context.

Provides the `cssmodules` command-line interface for one-off lookups,
project setup, and starting the LSP/MCP hosts.
"""

import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from config.loader import ConfigurationLoader
from core.activation import SUPPORTED_LANGUAGES, TRIGGER_CHARACTERS
from core.models.config import CSSModulesConfig, NameTransformMode
from core.models.entities import Position
from core.parser.imports import uri_to_path
from core.parser.selectors import find_all_selectors
from core.providers import CSSModulesCompletionProvider, CSSModulesDefinitionProvider, DocumentLineHost
from core.providers.base import load_text_document

from cssmodules_context import __version__

console = Console()

CAMEL_CASE_CHOICES = ['false', 'true', 'dashes']


def _load_config(project: Optional[Path], camel_case: Optional[str]) -> CSSModulesConfig:
    """Project options, with a command-line camelCase override"""
    config = ConfigurationLoader().load_project_config(project or Path.cwd())
    if camel_case is not None:
        config = config.model_copy(update={'camel_case': CSSModulesConfig(camelCase=camel_case).camel_case})
    return config


camel_case_option = click.option(
    '--camel-case',
    type=click.Choice(CAMEL_CASE_CHOICES),
    default=None,
    help='Override the camelCase option (default: project configuration)'
)
project_option = click.option(
    '--project', '-p',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help='Project directory holding the configuration (default: current directory)'
)


@click.group()
@click.version_option(version=__version__, prog_name="cssmodules")
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
def main(verbose: bool):
    """
    CSS Modules navigation CLI.

    Look up class name definitions and completions for `styles.className`
    accesses, and run the editor hosts.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr
    )


@main.command()
@click.argument('document', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('line', type=click.IntRange(min=0))
@click.argument('character', type=click.IntRange(min=0))
@camel_case_option
@project_option
def definition(document: Path, line: int, character: int, camel_case: Optional[str], project: Optional[Path]):
    """Show where the class name at LINE:CHARACTER (zero-based) is declared."""
    config = _load_config(project, camel_case)
    provider = CSSModulesDefinitionProvider(config.transform_mode)

    try:
        text_document = load_text_document(document)
        location = asyncio.run(provider.provide_definition(
            text_document,
            Position(line=line, character=character),
            DocumentLineHost(text_document, line)
        ))
    except (OSError, ValueError) as e:
        console.print(f"[red]❌ Lookup failed: {e}[/red]")
        sys.exit(1)

    if location is None:
        console.print("[yellow]No definition found[/yellow]")
        sys.exit(1)

    start = location.range.start
    click.echo(f"{uri_to_path(location.uri)}:{start.line + 1}:{start.character + 1}")


@main.command()
@click.argument('document', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument('line', type=click.IntRange(min=0))
@click.argument('character', type=click.IntRange(min=0))
@camel_case_option
@project_option
def complete(document: Path, line: int, character: int, camel_case: Optional[str], project: Optional[Path]):
    """List class names completing the `styles.` access at LINE:CHARACTER (zero-based)."""
    config = _load_config(project, camel_case)
    provider = CSSModulesCompletionProvider(config.transform_mode)

    try:
        text_document = load_text_document(document)
        candidates = asyncio.run(provider.provide_completion_items(
            text_document,
            Position(line=line, character=character),
            DocumentLineHost(text_document, line)
        ))
    except (OSError, ValueError) as e:
        console.print(f"[red]❌ Completion failed: {e}[/red]")
        sys.exit(1)

    for candidate in candidates:
        click.echo(candidate.label)


@main.command()
@click.argument('stylesheet', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@camel_case_option
@project_option
def selectors(stylesheet: Path, camel_case: Optional[str], project: Optional[Path]):
    """Show every class selector declared in STYLESHEET."""
    config = _load_config(project, camel_case)

    try:
        text = stylesheet.read_text(encoding='utf-8')
    except (OSError, ValueError) as e:
        console.print(f"[red]❌ Failed to read {stylesheet}: {e}[/red]")
        sys.exit(1)

    found = find_all_selectors(text, config.transform_mode)

    table = Table(title=f"Class selectors in {stylesheet.name}")
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Selector", style="white")
    table.add_column("Identifier", style="green")
    table.add_column("Nested", style="dim")

    for selector in found:
        table.add_row(
            str(selector.line + 1),
            selector.raw_name,
            selector.transformed_name,
            "yes" if selector.nested else ""
        )

    console.print(table)


@main.command()
@click.option('--force', '-f', is_flag=True, help='Overwrite existing configuration')
@click.option(
    '--camel-case',
    type=click.Choice(CAMEL_CASE_CHOICES),
    default='false',
    help='How class names are exposed to code (default: false)'
)
@click.option('--hint-message', default=None, help='Text shown alongside completion candidates')
def init(force: bool, camel_case: str, hint_message: Optional[str]):
    """Write a CSS modules configuration file for the current project."""
    project_path = Path.cwd()
    loader = ConfigurationLoader()
    config_path = project_path / loader.global_settings.config_file_name

    # Check if already initialized
    if config_path.exists() and not force:
        console.print("[yellow]⚠️  Project already initialized. Use --force to overwrite.[/yellow]")
        return

    options = {'camelCase': camel_case}
    if hint_message is not None:
        options['hintMessage'] = hint_message

    try:
        config = CSSModulesConfig(**options)
        loader.save_project_config(project_path, config)
    except (OSError, ValueError) as e:
        console.print(f"[red]❌ Failed to create configuration: {e}[/red]")
        sys.exit(1)

    console.print(f"[green]✅ Created {config_path}[/green]")


@main.command()
@project_option
def status(project: Optional[Path]):
    """Show the effective configuration for the project."""
    project_path = (project or Path.cwd()).resolve()
    loader = ConfigurationLoader()
    config = loader.load_project_config(project_path)
    config_file = loader.find_config_file(project_path)

    table = Table(title="CSS Modules Context Status")
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")
    table.add_column("Details", style="dim")

    if config_file is not None:
        table.add_row("Config File", "[green]✅ Found[/green]", str(config_file))
    else:
        table.add_row("Config File", "[yellow]Defaults[/yellow]", "Run 'cssmodules init' to create one")

    mode = config.transform_mode
    mode_details = {
        NameTransformMode.IDENTITY: "class names used as written",
        NameTransformMode.CAMEL_CASE: "btn-primary -> btnPrimary",
        NameTransformMode.DASHES: "btn-primary -> btnPrimary, btn_primary kept",
    }
    table.add_row("camelCase", str(config.camel_case).lower(), mode_details[mode])
    table.add_row("hintMessage", config.hint_message, "Shown alongside completions")
    table.add_row("Languages", ", ".join(SUPPORTED_LANGUAGES), f"Triggers: {' '.join(TRIGGER_CHARACTERS)}")
    table.add_row("Package", f"v{__version__}", "")

    console.print(table)


@main.command()
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Write server logs to a file'
)
def lsp(log_file: Optional[Path]):
    """Start the language server on stdio."""
    from cssmodules_context.lsp.server import start_lsp

    start_lsp(log_file)


@main.command()
def mcp():
    """Start the MCP server on stdio."""
    from cssmodules_context.mcp_server.server import main as mcp_main

    try:
        asyncio.run(mcp_main())
    except KeyboardInterrupt:
        sys.exit(0)


if __name__ == "__main__":
    main()
