"""
Directory-wide model loading.

Every ``*.json`` file in the seed directory is one model. A model that fails
to load is reported and skipped; the others stay available.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List

from recordstore.domain.errors import DuplicateModelError, RecordStoreError, StorageIOError
from recordstore.seeds import DEFAULT_INDENT, SeedModel, load_model, save_model
from recordstore.utils.logging import get_logger

log = get_logger(__name__)


@dataclass
class LoadReport:
    """
    Outcome of loading a seed directory.
    """

    seed_dir: Path
    models: Dict[str, SeedModel] = field(default_factory=dict)
    failures: Dict[Path, RecordStoreError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures

    def get(self, name: str) -> SeedModel:
        if name not in self.models:
            raise KeyError(f"Unknown model '{name}'. Available: {', '.join(sorted(self.models))}")
        return self.models[name]


def discover(seed_dir: Path | str) -> List[Path]:
    """List seed documents in ``seed_dir`` sorted by file name."""
    seed_dir = Path(seed_dir)
    try:
        return sorted(p for p in seed_dir.iterdir() if p.is_file() and p.suffix == ".json")
    except OSError as exc:
        raise StorageIOError(seed_dir, exc) from exc


def load_models(seed_dir: Path | str) -> LoadReport:
    """
    Load every model in ``seed_dir``.

    Per-model failures (unreadable file, malformed document, invalid seed row,
    duplicate model name) are collected in ``LoadReport.failures`` and logged;
    they do not stop the remaining models from loading. A missing or
    unreadable directory raises StorageIOError.
    """
    report = LoadReport(seed_dir=Path(seed_dir))
    for path in discover(seed_dir):
        try:
            model = load_model(path)
        except RecordStoreError as exc:
            log.error(
                f"Model in {path.name} failed to load: {exc}",
                extra={"path": str(path), "error": type(exc).__name__},
            )
            report.failures[path] = exc
            continue

        if model.name in report.models:
            exc = DuplicateModelError(model.name, path, report.models[model.name].path)
            log.error(str(exc), extra={"path": str(path), "model": model.name})
            report.failures[path] = exc
            continue
        report.models[model.name] = model

    log.info(
        f"Loaded {len(report.models)} model(s) from {report.seed_dir}",
        extra={"models": sorted(report.models), "failures": len(report.failures)},
    )
    return report


def save_all(report: LoadReport, indent: int = DEFAULT_INDENT) -> List[Path]:
    """Persist every loaded model back to its own document."""
    return [save_model(model, indent=indent) for model in report.models.values()]


__all__ = ["LoadReport", "discover", "load_models", "save_all"]
