from __future__ import annotations

from pydantic import BaseModel

# horsepower value meaning "do not filter at all"
NO_FILTER = "All"


class FilterCriteria(BaseModel):
    """Optional constraints, an empty value means "no constraint"."""

    manufacturer: str = ""
    category: str = ""
    drivetrain: str = ""
    transmission: str = ""
    horsepower: str = ""

    @property
    def is_disabled(self) -> bool:
        return self.horsepower == NO_FILTER
