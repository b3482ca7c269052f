from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import typer

from recordstore.config import get_settings
from recordstore.domain.errors import RecordStoreError
from recordstore.registry import load_models
from recordstore.reporter import print_models, print_records
from recordstore.seeds import load_model, save_model
from recordstore.utils.logging import configure_logging

app = typer.Typer(help="Mock record store CLI.")

SeedDirOption = typer.Option(
    None,
    "--seed-dir",
    "-d",
    help="Directory of seed documents (default from settings).",
)


def _seed_dir(seed_dir: Optional[Path]) -> Path:
    return seed_dir or get_settings().seed_dir


def _configure() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | seed_dir={settings.seed_dir} | "
        f"log_level={settings.log_level} json={settings.log_json} | indent={settings.seed_indent}"
    )


@app.command()
def models(seed_dir: Optional[Path] = SeedDirOption) -> None:
    """
    List models in the seed directory. Exits with 1 if any model failed to load.
    """
    _configure()
    try:
        report = load_models(_seed_dir(seed_dir))
    except RecordStoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    print_models(report)
    if not report.ok:
        raise typer.Exit(code=1)


@app.command()
def show(
    name: str = typer.Argument(..., help="Model name (resource_name)."),
    seed_dir: Optional[Path] = SeedDirOption,
) -> None:
    """
    Print a model's records.
    """
    _configure()
    try:
        report = load_models(_seed_dir(seed_dir))
        model = report.get(name)
    except (RecordStoreError, KeyError) as exc:
        typer.echo(str(exc).strip("'\""), err=True)
        raise typer.Exit(code=1)
    print_records(model)


@app.command()
def normalize(
    path: Path = typer.Argument(..., help="Seed document to rewrite."),
    indent: Optional[int] = typer.Option(
        None, "--indent", "-i", help="JSON indentation (default from settings)."
    ),
) -> None:
    """
    Load a seed document and write it back in canonical form: ids renumbered
    1..N in seed order, each row id first then columns in schema order.
    """
    _configure()
    settings = get_settings()
    try:
        model = load_model(path)
        save_model(model, indent=settings.seed_indent if indent is None else indent)
    except RecordStoreError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Normalized '{model.name}': {len(model.store)} record(s) -> {path}")


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
