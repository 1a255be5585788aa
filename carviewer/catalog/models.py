from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class Manufacturer(_Record):
    id: int = 0
    name: str = ""
    country: str = ""
    founding_year: int = Field(default=0, alias="foundingYear")


class Category(_Record):
    id: int = 0
    name: str = ""


class Specifications(_Record):
    engine: str = ""
    horsepower: int = 0
    transmission: str = ""
    drivetrain: str = ""


class CarModel(_Record):
    """A car model as served by the models source.

    ``manufacturer_id`` and ``category_id`` are plain lookups into the
    snapshot, a dangling id is valid and resolves to an unknown sentinel.
    The zero-value ``CarModel()`` stands for "no such model".
    """

    id: int = 0
    name: str = ""
    manufacturer_id: int = Field(default=0, alias="manufacturerId")
    category_id: int = Field(default=0, alias="categoryId")
    year: int = 0
    specifications: Specifications = Field(default_factory=Specifications)
    image: str = ""

    @property
    def is_zero(self) -> bool:
        return self == CarModel()


class Snapshot(_Record):
    """One complete fetch of the three sources, owned by a single request."""

    manufacturers: list[Manufacturer] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    car_models: list[CarModel] = Field(default_factory=list, alias="carModels")

    @property
    def is_empty(self) -> bool:
        return not (self.manufacturers or self.categories or self.car_models)


class ComparedModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    model: CarModel
    manufacturer_name: str = Field(alias="manufacturerName")
    manufacturer_country: str = Field(alias="manufacturerCountry")
    manufacturer_founding_year: str = Field(alias="manufacturerFoundingYear")
    category_name: str = Field(alias="categoryName")
    more_horsepower: bool = Field(default=False, alias="moreHorsepower")


class CatalogView(BaseModel):
    """Everything the rendering layer needs for one page, fully prepared."""

    model_config = ConfigDict(populate_by_name=True)

    manufacturers: list[Manufacturer] = Field(default_factory=list)
    categories: list[Category] = Field(default_factory=list)
    car_models: list[CarModel] = Field(default_factory=list, alias="carModels")
    message: str = ""
    is_popup: bool = Field(default=False, alias="isPopup")
    compare_models: list[ComparedModel] = Field(default_factory=list, alias="compareModels")

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot, **extra) -> CatalogView:
        return cls(
            manufacturers=snapshot.manufacturers,
            categories=snapshot.categories,
            car_models=snapshot.car_models,
            **extra,
        )
