"""Static records shown on the admin dashboard."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True, slots=True)
class OrderRecord:
    id: str
    customer: str
    car: str
    date: date
    status: str
    amount: Decimal


@dataclass(frozen=True, slots=True)
class ServiceRecord:
    id: str
    customer: str
    car: str
    type: str
    date: date
    status: str


@dataclass(frozen=True, slots=True)
class SellRequestRecord:
    id: str
    customer: str
    car: str
    year: int
    date: date
    status: str


MOCK_ORDERS: tuple[OrderRecord, ...] = (
    OrderRecord("ORD-001", "John Smith", "Tesla Model S", date(2023, 5, 15), "Completed", Decimal("82500")),
    OrderRecord("ORD-002", "Sarah Johnson", "BMW X5", date(2023, 5, 18), "Processing", Decimal("64200")),
    OrderRecord("ORD-003", "Mike Wilson", "Audi A4", date(2023, 5, 20), "Processing", Decimal("42300")),
    OrderRecord("ORD-004", "Emily Davis", "Ford Mustang", date(2023, 5, 22), "Pending", Decimal("46700")),
)

MOCK_SERVICES: tuple[ServiceRecord, ...] = (
    ServiceRecord("SRV-001", "Robert Brown", "Tesla Model S", "Full Service", date(2023, 5, 16), "Completed"),
    ServiceRecord("SRV-002", "Alice Green", "Land Rover Range Rover", "Basic Service", date(2023, 5, 19), "Scheduled"),
    ServiceRecord("SRV-003", "David Lee", "BMW X5", "Custom Service", date(2023, 5, 21), "In Progress"),
    ServiceRecord("SRV-004", "Lisa Chen", "Porsche 911", "Full Service", date(2023, 5, 23), "Scheduled"),
)

MOCK_SELL_REQUESTS: tuple[SellRequestRecord, ...] = (
    SellRequestRecord("SELL-001", "James Wilson", "Audi A6", 2019, date(2023, 5, 15), "Pending Inspection"),
    SellRequestRecord("SELL-002", "Emma Taylor", "BMW 3 Series", 2018, date(2023, 5, 17), "Offer Made"),
    SellRequestRecord("SELL-003", "Michael Johnson", "Mercedes C-Class", 2020, date(2023, 5, 19), "Pending Inspection"),
    SellRequestRecord("SELL-004", "Sophia Brown", "Lexus RX", 2017, date(2023, 5, 21), "Declined"),
)
