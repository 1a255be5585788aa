from __future__ import annotations

from pathlib import Path

import pytest

from carviewer.catalog.models import CarModel, Category, Manufacturer, Snapshot

from .sample_catalog import CATEGORIES, MANUFACTURERS, MODELS


@pytest.fixture
def snapshot() -> Snapshot:
    return Snapshot(
        manufacturers=[Manufacturer.model_validate(m) for m in MANUFACTURERS],
        categories=[Category.model_validate(c) for c in CATEGORIES],
        car_models=[CarModel.model_validate(m) for m in MODELS],
    )


@pytest.fixture
def pref_path(tmp_path: Path) -> Path:
    path = tmp_path / "pref.csv"
    path.write_text("", encoding="utf-8")
    return path
