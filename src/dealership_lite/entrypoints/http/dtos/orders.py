from pydantic import BaseModel, ConfigDict, Field

from dealership_lite.entrypoints.http.dtos.vehicles import ColorOptionDTO, VehicleCardDTO


class OrderQuoteRequestDTO(BaseModel):
    """Partial order form state; any field may still be unset."""

    vehicle_id: str | None = Field(default=None, examples=["2"])
    color: str | None = Field(default=None, examples=["black"])
    quantity: int = Field(default=1, description="Between 1 and 5", examples=[2])


class OrderSummaryDTO(BaseModel):
    vehicle: VehicleCardDTO | None
    color: ColorOptionDTO | None
    quantity: int
    base_price: str | None
    color_delta: str
    total: str | None = Field(description="None until a vehicle is selected")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "vehicle": None,
                "color": None,
                "quantity": 1,
                "base_price": None,
                "color_delta": "0",
                "total": None,
            }
        }
    )


class OrderRequestDTO(BaseModel):
    """Request payload for placing an order."""

    vehicle_id: str
    color: str
    quantity: int = 1
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    zip_code: str
    notes: str = ""


class OrderConfirmationDTO(BaseModel):
    reference: str
    vehicle: VehicleCardDTO
    quantity: int
    total: str
    message: str
