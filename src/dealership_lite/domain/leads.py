"""Lead capture forms: order, sell, service booking and contact.

Each form is a typed, immutable struct whose validate() returns a FormResult
instead of raising, so callers can report every field error at once.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from decimal import Decimal

from dealership_lite.domain.order import MAX_QUANTITY, MIN_QUANTITY
from dealership_lite.domain.valuation import ConditionTier
from dealership_lite.domain.vehicle import find_color_option

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MIN_PHONE_LENGTH = 10
BOOKING_WINDOW_DAYS = 30

TIME_SLOTS: tuple[str, ...] = (
    "09:00", "10:00", "11:00", "12:00", "13:00", "14:00", "15:00", "16:00",
)


@dataclass(frozen=True, slots=True)
class ServiceType:
    id: str
    name: str
    price: Decimal | None
    description: str
    duration: str


SERVICE_TYPES: tuple[ServiceType, ...] = (
    ServiceType(
        id="basic",
        name="Basic Service",
        price=Decimal("149"),
        description="Oil change, fluid top-ups, filter replacement, and basic inspection.",
        duration="1-2 hours",
    ),
    ServiceType(
        id="full",
        name="Full Service",
        price=Decimal("299"),
        description=(
            "Comprehensive inspection, filter replacements, brake check, "
            "suspension check, and more."
        ),
        duration="3-4 hours",
    ),
    ServiceType(
        id="custom",
        name="Custom Service",
        price=None,
        description="Custom service based on your specific requirements.",
        duration="Varies",
    ),
)


def find_service_type(service_id: str) -> ServiceType | None:
    for service in SERVICE_TYPES:
        if service.id == service_id:
            return service
    return None


@dataclass(frozen=True, slots=True)
class FieldError:
    field: str
    message: str
    code: str = "INVALID_VALUE"

    def to_dict(self) -> dict[str, str]:
        return {"field": self.field, "message": self.message, "code": self.code}


@dataclass(frozen=True, slots=True)
class FormResult:
    """Tagged validation outcome: ok, or the list of field errors."""

    errors: tuple[FieldError, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return not self.errors

    def error_dicts(self) -> list[dict[str, str]]:
        return [error.to_dict() for error in self.errors]


class _Errors:
    def __init__(self) -> None:
        self._items: list[FieldError] = []

    def add(self, field_name: str, message: str, code: str = "INVALID_VALUE") -> None:
        self._items.append(FieldError(field_name, message, code))

    def require(self, field_name: str, value: str, message: str, min_length: int = 1) -> None:
        if len(value.strip()) < min_length:
            code = "REQUIRED" if not value.strip() else "TOO_SHORT"
            self.add(field_name, message, code)

    def email(self, value: str) -> None:
        if not EMAIL_PATTERN.match(value.strip()):
            self.add("email", "Please enter a valid email", "INVALID_EMAIL")

    def phone(self, value: str) -> None:
        self.require("phone", value, "Please enter a valid phone number", MIN_PHONE_LENGTH)

    def result(self) -> FormResult:
        return FormResult(errors=tuple(self._items))


@dataclass(frozen=True, slots=True)
class OrderRequest:
    vehicle_id: str
    color: str
    quantity: int
    first_name: str
    last_name: str
    email: str
    phone: str
    address: str
    city: str
    zip_code: str
    notes: str = ""

    def validate(self) -> FormResult:
        errors = _Errors()
        errors.require("vehicle_id", self.vehicle_id, "Please select a car")
        if not self.color:
            errors.add("color", "Please select a color", "REQUIRED")
        elif find_color_option(self.color) is None:
            errors.add("color", f"Unknown color '{self.color}'", "INVALID_CHOICE")
        if not MIN_QUANTITY <= self.quantity <= MAX_QUANTITY:
            errors.add(
                "quantity",
                f"Must be between {MIN_QUANTITY} and {MAX_QUANTITY}",
                "OUT_OF_RANGE",
            )
        errors.require("first_name", self.first_name, "First name is required", 2)
        errors.require("last_name", self.last_name, "Last name is required", 2)
        errors.email(self.email)
        errors.phone(self.phone)
        errors.require("address", self.address, "Address is required", 5)
        errors.require("city", self.city, "City is required", 2)
        errors.require("zip_code", self.zip_code, "ZIP code is required", 5)
        return errors.result()


@dataclass(frozen=True, slots=True)
class SellRequest:
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

    def validate(self) -> FormResult:
        errors = _Errors()
        errors.require("brand", self.brand, "Brand is required")
        errors.require("model", self.model, "Model is required")
        if self.year <= 0:
            errors.add("year", "Year is required", "REQUIRED")
        if self.mileage <= 0:
            errors.add("mileage", "Mileage must be a positive number", "NOT_POSITIVE")
        if self.condition not in {tier.value for tier in ConditionTier}:
            errors.add("condition", "Condition is required", "INVALID_CHOICE")
        errors.require("exterior_color", self.exterior_color, "Exterior color is required")
        errors.require("transmission", self.transmission, "Transmission is required")
        errors.require("fuel_type", self.fuel_type, "Fuel type is required")
        errors.require(
            "description", self.description, "Please provide a brief description of your car", 10
        )
        errors.require("name", self.name, "Name is required", 2)
        errors.email(self.email)
        errors.phone(self.phone)
        return errors.result()


@dataclass(frozen=True, slots=True)
class ServiceBooking:
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

    def validate(self, today: date) -> FormResult:
        """
        Booking dates must be after today, within the booking window
        and on a weekday.
        """
        errors = _Errors()
        errors.require("brand", self.brand, "Brand is required")
        errors.require("model", self.model, "Model is required")
        if self.year <= 0:
            errors.add("year", "Year is required", "REQUIRED")
        if find_service_type(self.service_type) is None:
            errors.add("service_type", "Service type is required", "INVALID_CHOICE")

        if self.date <= today:
            errors.add("date", "Please select a date after today", "DATE_NOT_AVAILABLE")
        elif self.date > today + timedelta(days=BOOKING_WINDOW_DAYS):
            errors.add(
                "date",
                f"Bookings open at most {BOOKING_WINDOW_DAYS} days ahead",
                "DATE_NOT_AVAILABLE",
            )
        elif self.date.weekday() >= 5:
            errors.add("date", "We are closed on weekends", "DATE_NOT_AVAILABLE")

        if self.time_slot not in TIME_SLOTS:
            errors.add("time_slot", "Time slot is required", "INVALID_CHOICE")
        errors.require("name", self.name, "Name is required", 2)
        errors.email(self.email)
        errors.phone(self.phone)
        return errors.result()


@dataclass(frozen=True, slots=True)
class ContactMessage:
    name: str
    email: str
    subject: str
    message: str

    def validate(self) -> FormResult:
        errors = _Errors()
        errors.require("name", self.name, "Name is required", 2)
        errors.email(self.email)
        errors.require("subject", self.subject, "Subject is required", 2)
        errors.require("message", self.message, "Message should be at least 10 characters", 10)
        return errors.result()
