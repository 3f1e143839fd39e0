from datetime import date

from pydantic import BaseModel


class ServiceTypeDTO(BaseModel):
    id: str
    name: str
    price: str | None
    description: str
    duration: str


class ServiceCatalogDTO(BaseModel):
    service_types: list[ServiceTypeDTO]
    time_slots: list[str]
    booking_window_days: int


class ServiceBookingRequestDTO(BaseModel):
    brand: str
    model: str
    year: int
    service_type: str
    date: date
    time_slot: str
    name: str
    email: str
    phone: str
    message: str = ""


class ServiceBookingResponseDTO(BaseModel):
    reference: str
    service: ServiceTypeDTO
    date: date
    time_slot: str
    message: str
