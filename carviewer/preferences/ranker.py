from __future__ import annotations

from ..catalog.models import Snapshot
from .store import PreferenceStore


def rank(snapshot: Snapshot, store: PreferenceStore) -> Snapshot:
    """
    Order the snapshot's models by descending preference weight.

    Nothing happens until the store has seen at least one interaction.
    Otherwise every model name is first seeded into the store with weight 0
    (so the table learns about new models), then the models are stable-sorted:
    equal weights keep their incoming order.
    """
    if len(store) == 0:
        return snapshot

    store.ensure(model.name for model in snapshot.car_models)
    weights = store.as_dict()
    ordered = sorted(snapshot.car_models, key=lambda m: weights[m.name], reverse=True)
    return snapshot.model_copy(update={"car_models": ordered})
