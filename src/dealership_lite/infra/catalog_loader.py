"""Load the vehicle catalog from a JSON file into a CatalogStore."""

from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from dealership_lite.domain.catalog import CatalogStore
from dealership_lite.domain.vehicle import Vehicle
from dealership_lite.infra.config import catalog_path

logger = logging.getLogger(__name__)


class VehicleRecord(BaseModel):
    """One catalog entry as stored on disk."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(min_length=1)
    name: str
    brand: str
    price: Decimal = Field(ge=0)
    year: int
    fuel_type: str
    transmission: str
    engine: str
    horsepower: int = Field(ge=0)
    mileage: int = Field(ge=0)
    exterior_color: str
    interior_color: str
    body_type: str
    description: str
    features: list[str] = Field(default_factory=list)
    in_stock: bool = True
    image: str
    gallery: list[str] = Field(min_length=1)

    def to_domain(self) -> Vehicle:
        return Vehicle(
            id=self.id,
            name=self.name,
            brand=self.brand,
            price=self.price,
            year=self.year,
            fuel_type=self.fuel_type,
            transmission=self.transmission,
            engine=self.engine,
            horsepower=self.horsepower,
            mileage=self.mileage,
            exterior_color=self.exterior_color,
            interior_color=self.interior_color,
            body_type=self.body_type,
            description=self.description,
            features=tuple(self.features),
            in_stock=self.in_stock,
            image=self.image,
            gallery=tuple(self.gallery),
        )


_records_adapter = TypeAdapter(list[VehicleRecord])


def parse_catalog(raw: str | bytes) -> CatalogStore:
    """
    Parse catalog JSON into a store.

    Raises:
        pydantic.ValidationError: If the JSON does not match VehicleRecord
        dealership_lite.domain.errors.ValidationError: On duplicate ids or
            a gallery without the primary image
    """
    records = _records_adapter.validate_json(raw)
    return CatalogStore(record.to_domain() for record in records)


def load_catalog_store(path: Path | None = None) -> CatalogStore:
    path = path or catalog_path()
    store = parse_catalog(path.read_bytes())

    logger.info(
        "Catalog loaded",
        extra={"path": str(path), "vehicle_count": len(store)},
    )
    return store
