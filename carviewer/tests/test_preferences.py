from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

import pytest

from carviewer.errors import PreferenceStoreError
from carviewer.preferences.store import PreferenceStore


def test_load_reads_name_weight_lines(tmp_path: Path):
    path = tmp_path / "pref.csv"
    path.write_text("Camry,2\nM3,0.5\nMustang,1.25", encoding="utf-8")

    store = PreferenceStore.load(path)

    assert store.as_dict() == {"Camry": 2.0, "M3": 0.5, "Mustang": 1.25}


def test_load_missing_file_is_fatal(tmp_path: Path):
    with pytest.raises(PreferenceStoreError):
        PreferenceStore.load(tmp_path / "missing.csv")


def test_load_malformed_lines_default_to_zero(tmp_path: Path):
    path = tmp_path / "pref.csv"
    path.write_text("Camry,abc\nX5\n\nM3,3", encoding="utf-8")

    store = PreferenceStore.load(path)

    assert store.weight("Camry") == 0.0
    assert store.weight("X5") == 0.0
    assert store.weight("M3") == 3.0
    assert len(store) == 3


def test_load_empty_file_gives_empty_table(pref_path: Path):
    assert len(PreferenceStore.load(pref_path)) == 0


def test_increment_creates_then_accumulates(pref_path: Path):
    store = PreferenceStore(pref_path)
    store.increment("Camry", 0.5)
    assert store.weight("Camry") == 0.5
    store.increment("Camry", 1.0)
    assert store.weight("Camry") == 1.5


def test_increment_accepts_negative_amounts(pref_path: Path):
    store = PreferenceStore(pref_path, {"Camry": 1.0})
    store.increment("Camry", -2.5)
    assert store.weight("Camry") == -1.5


def test_absent_name_weighs_zero_without_being_inserted(pref_path: Path):
    store = PreferenceStore(pref_path)
    assert store.weight("Unknown") == 0.0
    assert "Unknown" not in store


def test_persist_writes_one_line_per_entry_without_trailing_newline(pref_path: Path):
    store = PreferenceStore(pref_path, {"Camry": 2.0, "M3": 0.5})

    assert store.persist() is True
    assert pref_path.read_text(encoding="utf-8") == "Camry,2\nM3,0.5"


def test_persist_keeps_full_precision(pref_path: Path):
    store = PreferenceStore(pref_path, {"Camry": 0.1 + 0.2})
    store.persist()
    assert PreferenceStore.load(pref_path).weight("Camry") == 0.1 + 0.2


def test_persist_never_writes_exponent_notation(pref_path: Path):
    store = PreferenceStore(pref_path, {"Camry": 0.00001, "M3": 1e22, "X5": 2.5e-7})
    store.persist()

    text = pref_path.read_text(encoding="utf-8")
    assert "e" not in text
    assert text.splitlines()[0] == "Camry,0.00001"
    assert PreferenceStore.load(pref_path).as_dict() == {"Camry": 1e-05, "M3": 1e22, "X5": 2.5e-7}


def test_persist_empty_table_leaves_file_untouched(tmp_path: Path):
    path = tmp_path / "pref.csv"
    path.write_text("Camry,4", encoding="utf-8")
    store = PreferenceStore(path)

    assert store.persist() is False
    assert path.read_text(encoding="utf-8") == "Camry,4"


def test_persist_failure_is_reported_not_raised(tmp_path: Path):
    # a directory cannot be written as a file
    store = PreferenceStore(tmp_path, {"Camry": 1.0})
    assert store.persist() is False


def test_persist_load_round_trip(tmp_path: Path):
    path = tmp_path / "pref.csv"
    path.write_text("Mustang,3\nCamry,0.5\nFiesta,0", encoding="utf-8")

    original = PreferenceStore.load(path)
    original.persist()
    reloaded = PreferenceStore.load(path)

    assert reloaded.as_dict() == original.as_dict()


def test_clear_file_truncates_and_creates(tmp_path: Path):
    existing = tmp_path / "pref.csv"
    existing.write_text("Camry,4", encoding="utf-8")
    PreferenceStore.clear_file(existing)
    assert existing.read_text(encoding="utf-8") == ""

    fresh = tmp_path / "new.csv"
    PreferenceStore.clear_file(fresh)
    assert fresh.exists()


def test_stats(pref_path: Path):
    store = PreferenceStore(pref_path, {"Camry": 1.0, "M3": 3.0, "X5": 0.5})
    stats = store.get_stats(top_n=2)
    assert stats["size"] == 3
    assert stats["total_weight"] == 4.5
    assert stats["top"] == [{"name": "M3", "weight": 3.0}, {"name": "Camry", "weight": 1.0}]


def test_concurrent_updates_are_not_lost(pref_path: Path):
    store = PreferenceStore(pref_path)
    workers, rounds = 8, 200

    def work(worker: int) -> None:
        for i in range(rounds):
            store.increment("Camry", 1.0)
            store.increment_many(["M3", "X5"], 0.5)
            if i % 20 == 0:
                assert store.persist() is True

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(work, range(workers)))

    assert store.as_dict() == {
        "Camry": workers * rounds * 1.0,
        "M3": workers * rounds * 0.5,
        "X5": workers * rounds * 0.5,
    }
    assert store.persist() is True
    assert PreferenceStore.load(pref_path).as_dict() == store.as_dict()
