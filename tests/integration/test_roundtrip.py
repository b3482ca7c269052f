"""
End-to-end lifecycle: load a seed directory, serve concurrent CRUD, persist,
and reload from what was written.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from recordstore.registry import load_models, save_all
from recordstore.seeds import load_model, persist_rows, save_model

WORKERS = 4
INSERTS_PER_WORKER = 50


def test_persist_of_load_keeps_every_row(write_seed):
    rows = [{"name": f"n{i}", "age": str(i)} for i in range(25)]
    model = load_model(write_seed("people.json", seeds=rows))

    persisted = persist_rows(model.store)

    assert len(persisted) == len(rows)
    assert [row["id"] for row in persisted] == list(range(1, len(rows) + 1))
    for original, saved in zip(rows, persisted):
        assert {k: v for k, v in saved.items() if k != "id"} == original


def test_reload_after_mutations_matches_store(write_seed):
    path = write_seed("people.json")
    model = load_model(path)
    store = model.store

    store.insert({"name": "barbara", "age": "61"})
    store.apply_partial(2, {"age": "86"})
    store.replace(3, {"name": "ken", "age": "81"})
    store.delete(1)
    expected = [{k: v for k, v in row.items() if k != "id"} for row in persist_rows(store)]

    save_model(model)
    reloaded = load_model(path)

    assert [r.fields for r in reloaded.store.snapshot()] == expected
    assert [r.id for r in reloaded.store.snapshot()] == [1, 2, 3]


def test_concurrent_traffic_then_save_all(seed_dir: Path):
    report = load_models(seed_dir)
    posts = report.get("posts").store

    def worker(n: int) -> list[int]:
        ids = []
        for i in range(INSERTS_PER_WORKER):
            record = posts.insert({"title": f"t{n}-{i}", "body": "b"})
            ids.append(record.id)
            if i % 2:
                posts.delete(record.id)
        return ids

    with ThreadPoolExecutor(max_workers=WORKERS) as pool:
        ids = [i for batch in pool.map(worker, range(WORKERS)) for i in batch]

    assert len(set(ids)) == WORKERS * INSERTS_PER_WORKER
    save_all(report)

    reloaded = load_model(seed_dir / "posts.json")
    assert len(reloaded.store) == 2 + WORKERS * INSERTS_PER_WORKER // 2
    assert reloaded.store.next_id == len(reloaded.store) + 1
