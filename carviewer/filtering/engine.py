from __future__ import annotations

import logging
import re

from ..catalog.lookup import category_name, manufacturer_detail
from ..catalog.models import CarModel, Snapshot
from ..errors import RangeFormatError
from ..preferences.config import DEFAULT_PREFERENCE_CONFIG
from ..preferences.store import PreferenceStore
from .models import FilterCriteria

logger = logging.getLogger(__name__)

# checked in this order, first match wins
_TRANSMISSION_CLASSES = [
    ("manual", "Manual"),
    ("automatic", "Automatic"),
    ("cvt", "CVT"),
]

# plain decimal digits only, no spaces or underscores
_INTEGER = re.compile(r"[+-]?[0-9]+")


def normalize_transmission(raw: str) -> str:
    """Map a gearbox description onto Manual, Automatic or CVT.

    Unrecognised descriptions are returned unchanged.
    """
    lowered = raw.lower()
    for needle, label in _TRANSMISSION_CLASSES:
        if needle in lowered:
            return label
    return raw


def parse_horsepower_range(value: str) -> tuple[int, int]:
    """Parse ``"min-max"`` into two integers."""
    parts = value.split("-")
    if len(parts) != 2:
        raise RangeFormatError(f"invalid horsepower range format: {value!r}")
    low, high = parts
    if not _INTEGER.fullmatch(low):
        raise RangeFormatError(f"invalid minimum horsepower value: {low!r}")
    if not _INTEGER.fullmatch(high):
        raise RangeFormatError(f"invalid maximum horsepower value: {high!r}")
    return int(low), int(high)


def _matches(
    model: CarModel,
    snapshot: Snapshot,
    criteria: FilterCriteria,
    hp_range: tuple[int, int] | None,
) -> bool:
    if criteria.manufacturer and manufacturer_detail(snapshot, model.manufacturer_id, "Name") != criteria.manufacturer:
        return False
    if criteria.category and category_name(snapshot, model.category_id) != criteria.category:
        return False
    specs = model.specifications
    if criteria.drivetrain and specs.drivetrain != criteria.drivetrain:
        return False
    if criteria.transmission and normalize_transmission(specs.transmission) != criteria.transmission:
        return False
    if hp_range is not None:
        low, high = hp_range
        if not low <= specs.horsepower <= high:
            return False
    return True


def filter_snapshot(
    snapshot: Snapshot,
    criteria: FilterCriteria,
    store: PreferenceStore,
    soft_weight: float = DEFAULT_PREFERENCE_CONFIG.soft_weight,
) -> Snapshot:
    """
    Keep the models that pass every supplied criterion, in snapshot order.

    ``horsepower == "All"`` returns ``snapshot`` untouched with no weight
    changes. Otherwise each surviving model's name is bumped by
    ``soft_weight`` in ``store``. Manufacturers and categories pass through.
    A malformed horsepower range raises ``RangeFormatError`` before any model
    is looked at.
    """
    if criteria.is_disabled:
        return snapshot

    hp_range = parse_horsepower_range(criteria.horsepower) if criteria.horsepower else None

    survivors = [m for m in snapshot.car_models if _matches(m, snapshot, criteria, hp_range)]
    store.increment_many((m.name for m in survivors), soft_weight)

    logger.info(
        "Filter %s kept %d of %d models",
        criteria.model_dump(exclude_defaults=True), len(survivors), len(snapshot.car_models),
    )
    return snapshot.model_copy(update={"car_models": survivors})
