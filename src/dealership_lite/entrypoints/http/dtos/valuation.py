from pydantic import BaseModel, ConfigDict, Field


class ValuationRequestDTO(BaseModel):
    brand: str = Field(examples=["Audi"])
    year: int = Field(examples=[2023])
    mileage: int = Field(description="Must be >= 0", examples=[5000])
    condition: str = Field(
        description="One of: excellent, good, fair, poor",
        examples=["good"],
    )


class ValuationResponseDTO(BaseModel):
    estimated_value: int
    base_value: str
    brand_recognized: bool
    age_years: int
    condition: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "estimated_value": 33952,
                "base_value": "40000",
                "brand_recognized": True,
                "age_years": 3,
                "condition": "good",
            }
        }
    )


class SellRequestDTO(BaseModel):
    brand: str
    model: str
    year: int
    mileage: int
    condition: str
    exterior_color: str
    transmission: str
    fuel_type: str
    description: str
    name: str
    email: str
    phone: str


class SellRequestResponseDTO(BaseModel):
    reference: str
    estimate: ValuationResponseDTO
    message: str
