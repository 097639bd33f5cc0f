"""CLI for discharge-quality: metrics / parse / tenants commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from discharge_quality.core.config import AppSettings
from discharge_quality.core.logging_config import setup_logging
from discharge_quality.core.startup_checks import validate_settings
from discharge_quality.exceptions import ConfigurationError, PersistenceError
from discharge_quality.metrics import (
    QualityMetricsStore,
    calculate_quality_metrics,
    interpret_flesch_kincaid_grade,
    interpret_flesch_reading_ease,
    meets_simplification_target,
)
from discharge_quality.parsers import Parsed, build_registry
from discharge_quality.persistence import create_backend

app = typer.Typer(name="discharge-quality", help="Readability metrics and discharge document parsing")
console = Console()


def _load_settings(verbose: bool) -> AppSettings:
    settings = AppSettings()
    if verbose:
        settings.observability.log_level = "DEBUG"
    setup_logging(settings.observability)
    try:
        validate_settings(settings)
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    return settings


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _print_list(title: str, items: list[str]) -> None:
    console.print(f"[bold]{title}[/bold]" + ("" if items else " [dim](none)[/dim]"))
    for item in items:
        console.print(f"  • {item}")


@app.command()
def metrics(
    original_file: Path = typer.Argument(..., exists=True, help="Original clinical text"),
    simplified_file: Path = typer.Argument(..., exists=True, help="Simplified text"),
    as_json: bool = typer.Option(False, "--json", help="Print the full record as JSON"),
    store: Optional[str] = typer.Option(None, "--store", help="Composition id to persist under"),
    tenant: str = typer.Option("demo", help="Tenant id recorded with stored metrics"),
    strict: bool = typer.Option(False, "--strict", help="Exit 1 when targets are missed"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Score a simplified text against its original."""
    settings = _load_settings(verbose)

    result = calculate_quality_metrics(_read(original_file), _read(simplified_file))
    check = meets_simplification_target(result, settings.targets)

    if as_json:
        payload = result.model_dump(mode="json", by_alias=True)
        payload["target"] = check.model_dump(by_alias=True)
        typer.echo(json.dumps(payload, indent=2))
    else:
        readability = result.readability
        table = Table(title="Quality Metrics")
        table.add_column("Metric", style="cyan")
        table.add_column("Value", justify="right")
        table.add_column("Interpretation", style="green")
        table.add_row(
            "Flesch-Kincaid grade",
            f"{readability.flesch_kincaid_grade_level:.1f}",
            interpret_flesch_kincaid_grade(readability.flesch_kincaid_grade_level),
        )
        table.add_row(
            "Flesch reading ease",
            f"{readability.flesch_reading_ease:.1f}",
            interpret_flesch_reading_ease(readability.flesch_reading_ease),
        )
        table.add_row("SMOG index", f"{readability.smog_index:.1f}", "")
        table.add_row("Coleman-Liau index", f"{readability.coleman_liau_index:.1f}", "")
        table.add_row(
            "Automated readability index", f"{readability.automated_readability_index:.1f}", ""
        )
        table.add_row("Compression ratio %", f"{result.simplification.compression_ratio:.1f}", "")
        table.add_row(
            "Avg sentence length", f"{result.simplification.avg_sentence_length:.1f}", ""
        )
        table.add_row("Words", str(result.lexical.word_count), "")
        table.add_row("Sentences", str(result.lexical.sentence_count), "")
        console.print(table)

        if check.meets_target:
            console.print("[green]Meets simplification target[/green]")
        else:
            console.print("[yellow]Misses simplification target:[/yellow]")
            for reason in check.reasons:
                console.print(f"  - {reason}")

    if store:
        metrics_store = QualityMetricsStore(create_backend(settings.persistence))
        try:
            metrics_store.store_metrics(store, tenant, result)
        except PersistenceError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(code=1) from exc
        if not as_json:
            console.print(f"[green]Stored metrics for {store}[/green]")

    if strict and not check.meets_target:
        raise typer.Exit(code=1)


@app.command()
def parse(
    summary_file: Path = typer.Argument(..., exists=True, help="Raw discharge summary text"),
    instructions_file: Path = typer.Argument(..., exists=True, help="Raw discharge instructions"),
    tenant: str = typer.Option("demo", help="Tenant whose parsers to try"),
    as_json: bool = typer.Option(False, "--json", help="Print the parse result as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Extract structured sections from a tenant's discharge documents."""
    settings = _load_settings(verbose)
    registry = build_registry(settings.parser)

    outcome = registry.parse_discharge_document(
        tenant, _read(summary_file), _read(instructions_file)
    )

    if as_json:
        payload = outcome.to_result()
        if isinstance(outcome, Parsed):
            payload["warnings"] = outcome.warnings
        else:
            payload["reason"] = outcome.reason.value
        typer.echo(json.dumps(payload, indent=2))
        return

    if not isinstance(outcome, Parsed):
        console.print(
            f"[yellow]Document not parsed ({outcome.reason.value}):[/yellow] {outcome.detail}"
        )
        return

    console.print(f"[bold]Parsed with {outcome.parser_type} parser[/bold]\n")
    summary = outcome.summary
    _print_list("Admitting Diagnosis", summary.admitting_diagnosis)
    _print_list("Discharge Diagnosis", summary.discharge_diagnosis)
    _print_list("Hospital Course", summary.hospital_course)
    _print_list("Pertinent Results", summary.pertinent_results)
    _print_list("Condition at Discharge", summary.condition_at_discharge)

    instructions = outcome.instructions
    meds = instructions.discharge_medications
    _print_list("New Medications", meds.new)
    _print_list("Continued Medications", meds.continued)
    _print_list("Stopped Medications", meds.stopped)
    _print_list("Follow-Up Appointments", instructions.follow_up_appointments)
    _print_list("Diet and Lifestyle", instructions.diet_and_lifestyle)
    _print_list("Patient Instructions", instructions.patient_instructions)
    _print_list("Return Precautions", instructions.return_precautions)

    for warning in outcome.warnings:
        console.print(f"[yellow]warning:[/yellow] {warning}")


@app.command()
def tenants(
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """List configured tenants and their parser types."""
    settings = _load_settings(verbose)
    registry = build_registry(settings.parser)

    table = Table(title="Tenant Parsers")
    table.add_column("Tenant", style="cyan")
    table.add_column("Parser types", style="green")
    table.add_column("Settings")
    for tenant_id in registry.list_tenants():
        info = registry.describe_tenant(tenant_id)
        table.add_row(
            tenant_id,
            ", ".join(info["parserTypes"]),
            json.dumps(info["settings"]) if info["settings"] else "",
        )
    console.print(table)


if __name__ == "__main__":
    app()
