from __future__ import annotations

import logging
from typing import Sequence

from ..catalog.models import CarModel, Snapshot
from ..errors import SelectionError
from ..preferences.config import DEFAULT_PREFERENCE_CONFIG
from ..preferences.store import PreferenceStore
from .config import DEFAULT_COMPARISON_CONFIG, ComparisonConfig

logger = logging.getLogger(__name__)


def _identity(key: str) -> int | str:
    try:
        return int(key)
    except ValueError:
        return key


def find_model(snapshot: Snapshot, identifier: str | int) -> CarModel:
    """Return the model with this id, or the zero-value ``CarModel()``."""
    try:
        target = int(identifier)
    except (TypeError, ValueError):
        return CarModel()
    for model in snapshot.car_models:
        if model.id == target:
            return model
    return CarModel()


def select_pair(
    snapshot: Snapshot,
    identifiers: Sequence[str | int],
    store: PreferenceStore,
    hard_weight: float = DEFAULT_PREFERENCE_CONFIG.hard_weight,
    config: ComparisonConfig = DEFAULT_COMPARISON_CONFIG,
) -> tuple[CarModel, CarModel]:
    """
    Resolve exactly two distinct model ids for a side-by-side comparison.

    Anything other than two distinct ids raises ``SelectionError`` and leaves
    the store alone. An id with no matching model yields ``CarModel()``
    (or raises, with ``config.strict``). Each resolved model gets a
    ``hard_weight`` bump.
    """
    keys = [str(i).strip() for i in identifiers]
    if len(keys) != 2 or _identity(keys[0]) == _identity(keys[1]):
        raise SelectionError(config.wrong_count_message)

    first, second = (find_model(snapshot, k) for k in keys)

    unmatched = [k for k, m in zip(keys, (first, second)) if m.is_zero]
    if unmatched:
        if config.strict:
            raise SelectionError(f"Unknown model id(s): {', '.join(unmatched)}")
        logger.warning("Comparison ids with no matching model: %s", unmatched)

    # unmatched ids resolve to CarModel(), whose empty name is never recorded
    store.increment_many((m.name for m in (first, second) if not m.is_zero), hard_weight)
    return first, second
