"""
Brand CLI

Command-line interface for inspecting and validating brand configurations.

Commands:
- list: List registered brands
- show: Print a brand's resolved configuration
- modules: Show which modules a brand enables
- colors: Show a brand's derived palette
- validate: Validate brand documents before shipping
"""

from pathlib import Path
from typing import Optional

import typer
from rich import print as rprint
from rich.console import Console
from rich.table import Table

from schooltree_brand.config import get_settings
from schooltree_brand.exceptions import BrandDocumentError
from schooltree_brand.gate import FeatureGate
from schooltree_brand.logging_config import configure_logging
from schooltree_brand.models import ResolvedTenantConfig
from schooltree_brand.registry import (
    TenantRegistry,
    builtin_documents,
    directory_documents,
    load_builtin_registry,
)
from schooltree_brand.theme import tenant_colors
from schooltree_brand.validation import validate_document

app = typer.Typer(
    name="schooltree-brand",
    help="White-label brand configuration CLI",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    brands_dir: Optional[Path] = typer.Option(
        None, "--brands-dir", help="Extra brands directory (<dir>/<id>/brand.config.json)"
    ),
    debug: bool = typer.Option(False, "--debug", help="Verbose console logging"),
):
    """Inspect and validate brand configurations."""
    # Subcommands read the brands directory from ctx.obj
    settings = get_settings()
    configure_logging(
        debug=debug or settings.debug,
        log_level="DEBUG" if debug else settings.log_level,
    )
    ctx.obj = brands_dir or settings.brands_dir


def _load_registry(brands_dir: Optional[Path]) -> TenantRegistry:
    try:
        return load_builtin_registry(brands_dir)
    except BrandDocumentError as e:
        rprint(f"[red]{e}[/red]")
        raise typer.Exit(1)


def _require_brand(ctx: typer.Context, brand_id: str) -> ResolvedTenantConfig:
    registry = _load_registry(ctx.obj)
    config = registry.get(brand_id)
    if config is None:
        rprint(f"[red]Brand \"{brand_id}\" not found[/red]")
        rprint(f"Available brands: {', '.join(registry.ids())}")
        raise typer.Exit(1)
    return config


@app.command("list")
def list_brands(ctx: typer.Context):
    """
    List all registered brands.
    """
    registry = _load_registry(ctx.obj)
    default_id = get_settings().default_brand_id

    table = Table(title="Brands")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Auth")
    table.add_column("Dark mode")
    table.add_column("Modules", justify="right")

    for brand_id, config in registry.items():
        gate = FeatureGate(config)
        label = f"{brand_id} (default)" if brand_id == default_id else brand_id
        table.add_row(
            label,
            config.brand.name,
            gate.auth_type.value,
            "yes" if gate.is_dark_mode_available() else "no",
            str(len(gate.enabled_modules())),
        )

    console.print(table)


@app.command()
def show(
    ctx: typer.Context,
    brand_id: str = typer.Argument(..., help="Brand ID"),
):
    """
    Print a brand's resolved configuration as JSON.
    """
    config = _require_brand(ctx, brand_id)
    console.print_json(data=config.to_document())


@app.command()
def modules(
    ctx: typer.Context,
    brand_id: str = typer.Argument(..., help="Brand ID"),
):
    """
    Show which modules a brand enables.
    """
    config = _require_brand(ctx, brand_id)
    gate = FeatureGate(config)

    table = Table(title=f"Modules for {config.brand.name}")
    table.add_column("Module", style="cyan")
    table.add_column("Enabled")
    table.add_column("Settings", style="dim")

    for name, module in config.features.modules.items():
        extras = {k: v for k, v in module.to_document().items() if k != "enabled"}
        table.add_row(
            name.value,
            "[green]yes[/green]" if gate.is_module_enabled(name) else "[red]no[/red]",
            ", ".join(f"{k}={v}" for k, v in extras.items()) or "-",
        )

    console.print(table)
    rprint(f"  Notifications: {gate.is_notifications_enabled()}")
    rprint(f"  Offline mode: {gate.is_offline_mode_enabled()}")
    rprint(f"  Dark mode available: {gate.is_dark_mode_available()}")
    rprint(f"  Payment gateway: {gate.is_payment_gateway_enabled()}")


@app.command()
def colors(
    ctx: typer.Context,
    brand_id: str = typer.Argument(..., help="Brand ID"),
    dark: bool = typer.Option(False, "--dark", help="Show the dark mode palette"),
):
    """
    Show a brand's derived color palette.
    """
    config = _require_brand(ctx, brand_id)
    if dark and not config.features.dark_mode:
        rprint(f"[yellow]Dark mode is not available for {brand_id}; showing light palette[/yellow]")

    palette = tenant_colors(config, dark).to_document()
    subjects = palette.pop("subjects")

    table = Table(title=f"Colors for {config.brand.name}")
    table.add_column("Name", style="cyan")
    table.add_column("Value")

    for name, value in palette.items():
        table.add_row(name, value)
    for name, value in subjects.items():
        table.add_row(f"subjects.{name}", value)

    console.print(table)


@app.command()
def validate(
    ctx: typer.Context,
    brand_id: Optional[str] = typer.Argument(None, help="Brand ID"),
    all_brands: bool = typer.Option(False, "--all", help="Validate all brands"),
):
    """
    Validate brand documents.

    Exits with status 1 if any brand has errors. Warnings do not fail.
    """
    if not brand_id and not all_brands:
        rprint("[red]Give a brand ID or --all[/red]")
        raise typer.Exit(1)

    try:
        documents = builtin_documents()
        if ctx.obj is not None:
            documents.update(directory_documents(ctx.obj))
    except BrandDocumentError as e:
        rprint(f"[red]{e}[/red]")
        raise typer.Exit(1)

    if all_brands:
        selected = documents
    elif brand_id in documents:
        selected = {brand_id: documents[brand_id]}
    else:
        rprint(f"[red]Brand \"{brand_id}\" not found[/red]")
        rprint(f"Available brands: {', '.join(documents)}")
        raise typer.Exit(1)

    has_errors = False
    for key, document in selected.items():
        report = validate_document(document, key)
        rprint(f"\n[cyan]Validating: {key}[/cyan]")
        for error in report.errors:
            rprint(f"  [red]ERROR[/red] {error}")
        for warning in report.warnings:
            rprint(f"  [yellow]WARNING[/yellow] {warning}")
        rprint(f"  Result: {'[green]PASS[/green]' if report.valid else '[red]FAIL[/red]'}")
        has_errors = has_errors or not report.valid

    if has_errors:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
