from pydantic import BaseModel, ConfigDict, Field


class VehicleCardDTO(BaseModel):
    """Fields shown on a catalog card."""

    id: str
    name: str
    brand: str
    price: str
    year: int
    fuel_type: str
    mileage: int
    in_stock: bool
    image: str


class VehicleDetailDTO(VehicleCardDTO):
    transmission: str
    engine: str
    horsepower: int
    exterior_color: str
    interior_color: str
    body_type: str
    description: str
    features: list[str]
    gallery: list[str]


class VehiclesSearchQueryDTO(BaseModel):
    """Query parameters for the stock page search."""

    brand: str | None = Field(
        default=None,
        description="Filter by brand (exact match). Empty means all brands",
        examples=["Tesla"],
    )
    fuel_type: str | None = Field(
        default=None,
        description="Filter by fuel type (exact match). Empty means all fuel types",
        examples=["Petrol"],
    )
    price_min: str | None = Field(
        default=None,
        description="Minimum price (inclusive, decimal as string)",
        examples=["39000"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    price_max: str | None = Field(
        default=None,
        description="Maximum price (inclusive, decimal as string)",
        examples=["60000"],
        pattern=r"^\d+(\.\d{1,2})?$",
    )
    search: str = Field(
        default="",
        description="Case-insensitive substring of brand or name",
        examples=["mus"],
    )
    offset: int = Field(default=0, description="Number of results to skip", ge=0)
    limit: int = Field(
        default=20,
        description="Maximum number of results to return",
        ge=1,
        le=200,
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "fuel_type": "Petrol",
                "price_min": "39000",
                "price_max": "60000",
                "search": "",
                "offset": 0,
                "limit": 20,
            }
        }
    )


class VehicleSearchResponseDTO(BaseModel):
    vehicles: list[VehicleCardDTO]
    total: int
    offset: int
    limit: int


class ColorOptionDTO(BaseModel):
    value: str
    label: str
    price_delta: str


class CatalogOptionsDTO(BaseModel):
    brands: list[str]
    fuel_types: list[str]
    price_min: str | None
    price_max: str | None
    colors: list[ColorOptionDTO]
