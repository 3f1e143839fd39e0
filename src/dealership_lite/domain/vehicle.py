from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from dealership_lite.domain.errors import (
    FilterValidationError,
    PagingValidationError,
    ValidationError,
)


@dataclass(frozen=True, slots=True)
class Vehicle:
    id: str
    name: str
    brand: str
    price: Decimal
    year: int
    fuel_type: str
    transmission: str
    engine: str
    horsepower: int
    mileage: int
    exterior_color: str
    interior_color: str
    body_type: str
    description: str
    features: tuple[str, ...] = ()
    in_stock: bool = True
    image: str = ""
    gallery: tuple[str, ...] = field(default_factory=tuple)

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.name}"

    def validate(self) -> None:
        """
        Check record invariants.

        Raises:
            ValidationError: If price or mileage is negative, or the gallery
                is empty or does not contain the primary image
        """
        if self.price < 0:
            raise ValidationError("price must be >= 0", vehicle_id=self.id)
        if self.mileage < 0:
            raise ValidationError("mileage must be >= 0", vehicle_id=self.id)
        if not self.gallery:
            raise ValidationError("gallery must contain at least one image", vehicle_id=self.id)
        if self.image not in self.gallery:
            raise ValidationError("gallery must include the primary image", vehicle_id=self.id)


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Stock page filters. None or "" for brand/fuel_type means no filter."""

    brand: str | None = None
    fuel_type: str | None = None
    price_min: Decimal | None = None
    price_max: Decimal | None = None
    search: str = ""

    def validate(self) -> None:
        """
        Validate filter parameters.

        Raises:
            FilterValidationError: If filter parameters are invalid
        """
        # No floats past the boundary
        if self.price_min is not None and not isinstance(self.price_min, Decimal):
            raise FilterValidationError("price_min must be Decimal or None")
        if self.price_max is not None and not isinstance(self.price_max, Decimal):
            raise FilterValidationError("price_max must be Decimal or None")

        if (
            self.price_min is not None
            and self.price_max is not None
            and self.price_min > self.price_max
        ):
            raise FilterValidationError(
                errors=[
                    {
                        "field": "price_min",
                        "message": "Must be less than or equal to price_max",
                        "code": "INVALID_RANGE",
                    }
                ]
            )


@dataclass(frozen=True, slots=True)
class Paging:
    offset: int = 0
    limit: int = 20

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            PagingValidationError: If paging parameters are invalid
        """
        if self.offset < 0:
            raise PagingValidationError("offset must be >= 0")
        if self.limit <= 0:
            raise PagingValidationError("limit must be > 0")
        if self.limit > 200:
            raise PagingValidationError("limit must be <= 200")


@dataclass(frozen=True, slots=True)
class ColorOption:
    value: str
    label: str
    price_delta: Decimal = Decimal("0")


COLOR_OPTIONS: tuple[ColorOption, ...] = (
    ColorOption(value="white", label="Pearl White", price_delta=Decimal("0")),
    ColorOption(value="black", label="Obsidian Black", price_delta=Decimal("500")),
    ColorOption(value="silver", label="Metallic Silver", price_delta=Decimal("500")),
    ColorOption(value="red", label="Vibrant Red", price_delta=Decimal("1000")),
    ColorOption(value="blue", label="Ocean Blue", price_delta=Decimal("1000")),
)


def find_color_option(value: str | None) -> ColorOption | None:
    if not value:
        return None
    for option in COLOR_OPTIONS:
        if option.value == value:
            return option
    return None
