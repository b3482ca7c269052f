from __future__ import annotations

import json
from typing import Any, Optional

from rich import box
from rich.console import Console
from rich.table import Table

from recordstore.registry import LoadReport
from recordstore.seeds import SeedModel


def _cell(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def print_models(report: LoadReport, console: Optional[Console] = None) -> None:
    """
    Render loaded models, then any failures, as rich tables.
    """
    console = console or Console()

    if not report.models and not report.failures:
        console.print(f"[yellow]No seed documents found in {report.seed_dir}.[/yellow]")
        return

    table = Table(
        title=f"Models in {report.seed_dir}",
        box=box.ROUNDED,
        caption="Sorted by name",
    )
    table.add_column("Model", style="cyan", no_wrap=True)
    table.add_column("Columns", style="green")
    table.add_column("Records", justify="right", style="magenta")
    table.add_column("Next ID", justify="right", style="blue")
    table.add_column("File", style="dim")

    for name in sorted(report.models):
        model = report.models[name]
        columns = ", ".join(f"{c.name}:{c.type}" for c in model.store.schema.columns)
        table.add_row(
            name,
            columns,
            f"{len(model.store):,}",
            str(model.store.next_id),
            model.path.name,
        )
    console.print(table)

    if report.failures:
        failures = Table(title="Failed to load", box=box.ROUNDED)
        failures.add_column("File", style="red", no_wrap=True)
        failures.add_column("Error", style="yellow")
        failures.add_column("Message")
        for path, exc in sorted(report.failures.items()):
            failures.add_row(path.name, type(exc).__name__, str(exc))
        console.print(failures)


def print_records(model: SeedModel, console: Optional[Console] = None) -> None:
    """
    Render a model's current snapshot as a rich table, ordered by id.
    """
    console = console or Console()
    schema = model.store.schema
    records = model.store.snapshot()

    table = Table(
        title=f"{model.name} ({len(records)} record(s))",
        box=box.ROUNDED,
        caption="Sorted by ID (ascending)",
    )
    table.add_column("id", justify="right", style="cyan", no_wrap=True)
    for column in schema.columns:
        table.add_column(f"{column.name}\n[dim]{column.type}[/dim]")

    for record in records:
        table.add_row(
            str(record.id), *(_cell(record.fields.get(name)) for name in schema.column_names)
        )
    console.print(table)


__all__ = ["print_models", "print_records"]
