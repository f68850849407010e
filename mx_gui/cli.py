"""
Command-line interface for the export selection panels.

Inspect panel schemas, preview rows through a panel's columns, or launch the GUI.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.table import Table

from mx_common.api import ConfigurationError, MXError, configure_logging
from mx_gui.i18n import Translator
from mx_gui.schema.display import display_text
from mx_gui.services import StaticPanelDataSource
from mx_gui.settings import GUISettings
from mx_gui.viewmodels import SelectionTableRegistry

console = Console()

app = typer.Typer(help="Inspect and launch the export selection panels.", no_args_is_help=True)


def _build_registry(locale: Optional[str]) -> SelectionTableRegistry:
    settings = GUISettings.from_env()
    translator = Translator.load(locale or settings.locale)
    return SelectionTableRegistry(translator, id_prefix=settings.id_prefix_length)


def _fail(error: MXError) -> NoReturn:
    console.print(f"[red]{error}[/red]")
    raise typer.Exit(1)


@app.callback()
def entry(
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Global options."""
    configure_logging(debug=debug)


@app.command("panels")
def list_panels(
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Catalogue locale."),
) -> None:
    """List the available panels."""
    try:
        registry = _build_registry(locale)
    except ConfigurationError as exc:
        _fail(exc)

    table = Table(title="Export Panels")
    table.add_column("Name", style="cyan")
    table.add_column("Title")
    table.add_column("Columns", justify="right")
    table.add_column("Search Fields", justify="right")
    for panel in registry:
        table.add_row(
            panel.name,
            panel.title,
            str(len(panel.spec.data_columns)),
            str(len(panel.spec.search_fields)),
        )
    console.print(table)


@app.command("columns")
def show_columns(
    panel: str = typer.Argument(..., help="Panel name (role, flow, batch, itsm)."),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Catalogue locale."),
) -> None:
    """Show a panel's columns and search fields."""
    try:
        registry = _build_registry(locale)
        vm = registry.panel(panel)
    except ConfigurationError as exc:
        _fail(exc)

    columns = Table(title=f"{vm.title} columns")
    columns.add_column("Key", style="cyan")
    columns.add_column("Title")
    columns.add_column("Width", justify="right")
    for column in vm.spec.data_columns:
        width = column.width or column.min_width
        columns.add_row(column.key, column.title, str(width) if width else "-")
    console.print(columns)

    if not vm.spec.search_fields:
        return
    fields = Table(title=f"{vm.title} search fields")
    fields.add_column("Key", style="cyan")
    fields.add_column("Placeholder")
    fields.add_column("Kind")
    fields.add_column("Options")
    for field in vm.spec.search_fields:
        options = ", ".join(f"{opt.value}={opt.label}" for opt in field.options)
        fields.add_row(field.key, field.placeholder, field.kind.value, options or "-")
    console.print(fields)


@app.command("preview")
def preview(
    panel: str = typer.Argument(..., help="Panel name (role, flow, batch, itsm)."),
    data: Path = typer.Option(..., "--data", "-d", help="YAML/JSON file of rows keyed by panel."),
    name: str = typer.Option("", "--name", help="Name filter."),
    row_id: str = typer.Option("", "--id", help="ID filter."),
    scene: str = typer.Option("", "--scene", help="ITSM scene code filter."),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Catalogue locale."),
) -> None:
    """Render a panel's rows through its column schema."""
    try:
        registry = _build_registry(locale)
        vm = registry.panel(panel)
        source = StaticPanelDataSource.from_file(data)
        parameters = {"name": name, "id": row_id, "scene": scene}
        vm.set_rows(source.fetch(vm.name, parameters))
    except MXError as exc:
        _fail(exc)

    table = Table(title=vm.title)
    for header in vm.headers:
        table.add_column(header)
    for cells in vm.render_rows():
        table.add_row(*(display_text(cell) for cell in cells))
    console.print(table)
    console.print(f"{len(vm.rows)} row(s)")


@app.command("gui")
def launch_gui(
    data: Optional[Path] = typer.Option(None, "--data", "-d", help="YAML/JSON file of rows keyed by panel."),
    locale: Optional[str] = typer.Option(None, "--locale", "-l", help="Catalogue locale."),
) -> None:
    """Launch the export selection window."""
    from mx_gui.main import main

    raise typer.Exit(main(data_path=data, locale=locale))


if __name__ == "__main__":
    app()
