from datetime import date

from pydantic import BaseModel

from dealership_lite.entrypoints.http.dtos.vehicles import VehicleCardDTO


class OrderRecordDTO(BaseModel):
    id: str
    customer: str
    car: str
    date: date
    status: str
    amount: str


class ServiceRecordDTO(BaseModel):
    id: str
    customer: str
    car: str
    type: str
    date: date
    status: str


class SellRequestRecordDTO(BaseModel):
    id: str
    customer: str
    car: str
    year: int
    date: date
    status: str


class AdminDashboardDTO(BaseModel):
    inventory: list[VehicleCardDTO]
    orders: list[OrderRecordDTO]
    services: list[ServiceRecordDTO]
    sell_requests: list[SellRequestRecordDTO]
