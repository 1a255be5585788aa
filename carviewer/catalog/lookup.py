from __future__ import annotations

from .models import CarModel, ComparedModel, Snapshot

UNKNOWN_CATEGORY = "Unknown Category"


def manufacturer_detail(snapshot: Snapshot, manufacturer_id: int, field: str) -> str:
    """Return ``Name``, ``Country`` or ``FoundingYear`` of a manufacturer, or ``""``."""
    for manufacturer in snapshot.manufacturers:
        if manufacturer.id == manufacturer_id:
            if field == "Name":
                return manufacturer.name
            if field == "Country":
                return manufacturer.country
            if field == "FoundingYear":
                return str(manufacturer.founding_year)
    return ""


def category_name(snapshot: Snapshot, category_id: int) -> str:
    for category in snapshot.categories:
        if category.id == category_id:
            return category.name
    return UNKNOWN_CATEGORY


def has_more_horsepower(a: int, b: int) -> bool:
    return a > b


def describe(snapshot: Snapshot, model: CarModel, rival: CarModel | None = None) -> ComparedModel:
    """Resolve a model's foreign keys for display next to ``rival``."""
    more = False
    if rival is not None:
        more = has_more_horsepower(model.specifications.horsepower, rival.specifications.horsepower)
    return ComparedModel(
        model=model,
        manufacturer_name=manufacturer_detail(snapshot, model.manufacturer_id, "Name"),
        manufacturer_country=manufacturer_detail(snapshot, model.manufacturer_id, "Country"),
        manufacturer_founding_year=manufacturer_detail(snapshot, model.manufacturer_id, "FoundingYear"),
        category_name=category_name(snapshot, model.category_id),
        more_horsepower=more,
    )
