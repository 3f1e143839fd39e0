from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from datetime import date
from typing import Callable

from dealership_lite.domain.errors import ValidationError
from dealership_lite.domain.leads import ServiceBooking, ServiceType, find_service_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ServiceBookingConfirmation:
    reference: str
    service: ServiceType
    date: date
    time_slot: str


class BookService:
    """
    Schedule a service appointment.

    The booking window is relative to `today`, injectable for tests.
    """

    def __init__(self, today: Callable[[], date] = date.today) -> None:
        self._today = today

    def execute(self, booking: ServiceBooking) -> ServiceBookingConfirmation:
        result = booking.validate(today=self._today())
        if not result.ok:
            raise ValidationError(errors=result.error_dicts())

        service = find_service_type(booking.service_type)
        if service is None:
            raise ValueError(f"Unknown service type '{booking.service_type}'")

        reference = f"SRV-{uuid.uuid4().hex[:8].upper()}"

        logger.info(
            "Service booking submitted",
            extra={
                "reference": reference,
                "service_type": service.id,
                "date": booking.date.isoformat(),
                "time_slot": booking.time_slot,
            },
        )

        return ServiceBookingConfirmation(
            reference=reference,
            service=service,
            date=booking.date,
            time_slot=booking.time_slot,
        )
